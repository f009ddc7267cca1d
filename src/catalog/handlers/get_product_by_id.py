from src.catalog.entities.product import Product, ProductRepository
from src.catalog.mediator import QueryHandler, handles
from src.catalog.queries import GetProductByIdQuery


@handles(GetProductByIdQuery)
class GetProductByIdHandler(QueryHandler[GetProductByIdQuery, Product | None]):
    """Return the product with the requested id, or None when there is none."""

    async def handle(self, query: GetProductByIdQuery) -> Product | None:
        return ProductRepository(self._session).find_by_id(query.id)
