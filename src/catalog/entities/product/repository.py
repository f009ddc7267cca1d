"""Product repository for data access operations."""

from collections.abc import Iterable
from datetime import UTC

from sqlalchemy import func
from sqlmodel import Session, select

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Product]:
        """Return every product ordered by ascending id."""
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]

    def find_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def insert_many(self, products: Iterable[Product]) -> list[Product]:
        """Insert products as new rows; ids are assigned by the store."""
        rows = [
            ProductTable(
                name=product.name,
                description=product.description,
                price=product.price,
                created_at=product.created_at,
            )
            for product in products
        ]
        self._session.add_all(rows)
        self._session.flush()
        for row in rows:
            self._session.refresh(row)
        return [self._to_entity(row) for row in rows]

    def any(self) -> bool:
        statement = select(ProductTable.id).limit(1)
        return self._session.exec(statement).first() is not None

    def count(self) -> int:
        statement = select(func.count()).select_from(ProductTable)
        return self._session.exec(statement).one()

    @staticmethod
    def _to_entity(row: ProductTable) -> Product:
        product = Product.model_validate(row, from_attributes=True)
        # SQLite hands timestamps back without tzinfo; they are stored as UTC
        if product.created_at.tzinfo is None:
            product.created_at = product.created_at.replace(tzinfo=UTC)
        return product
