"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "Product"
    # AUTOINCREMENT keeps ids from being reused on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    name: str = Field(max_length=200, nullable=False)
    description: str | None = Field(default=None, max_length=1000, nullable=True)
    price: Decimal = Field(max_digits=18, decimal_places=2, nullable=False)
