"""Read queries over the product catalog."""

from pydantic import Field

from src.catalog.mediator import Query


class GetAllProductsQuery(Query):
    """Retrieve every product, ordered by id."""


class GetProductByIdQuery(Query):
    """Retrieve a single product by its identifier."""

    id: int = Field(description="Identifier of the product to retrieve")
