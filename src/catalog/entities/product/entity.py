"""Entity: Product."""

from decimal import Decimal

from pydantic import Field

from src.catalog.entities._base import Entity


class Product(Entity):
    """Product entity representing a catalog item.

    This is the domain model handed to callers. Length and precision limits
    live on ProductTable as schema metadata and are not validated here.
    """

    name: str = Field(description="Product name")
    description: str | None = Field(default=None, description="Optional description")
    price: Decimal = Field(description="Unit price")
