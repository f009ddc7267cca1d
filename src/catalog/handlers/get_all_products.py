from src.catalog.entities.product import Product, ProductRepository
from src.catalog.mediator import QueryHandler, handles
from src.catalog.queries import GetAllProductsQuery


@handles(GetAllProductsQuery)
class GetAllProductsHandler(QueryHandler[GetAllProductsQuery, list[Product]]):
    """Return all products ordered by ascending id."""

    async def handle(self, query: GetAllProductsQuery) -> list[Product]:
        return ProductRepository(self._session).list_all()
