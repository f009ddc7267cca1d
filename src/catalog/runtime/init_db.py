"""Database initialization and baseline seeding."""

from decimal import Decimal

from loguru import logger

from src.catalog.core.services.database import DbManageService, DbSessionService
from src.catalog.entities._base import utc_now
from src.catalog.entities.product import Product, ProductRepository

# (name, description, price) in insertion order
BASELINE_PRODUCTS: tuple[tuple[str, str | None, Decimal], ...] = (
    ("Laptop", "High-performance laptop with 16GB RAM", Decimal("1299.99")),
    ("Wireless Mouse", None, Decimal("29.99")),
    ("USB-C Cable", "3-meter charging cable", Decimal("15.99")),
    ("External SSD", "1TB portable storage", Decimal("129.99")),
    ("Webcam", "1080p HD webcam with microphone", Decimal("79.99")),
)


def baseline_products() -> list[Product]:
    """Build fresh baseline products stamped with the current time."""
    return [
        Product(name=name, description=description, price=price, created_at=utc_now())
        for name, description, price in BASELINE_PRODUCTS
    ]


def init_db(db_session_service: DbSessionService) -> int:
    """Create the schema and seed the baseline products into an empty store.

    Returns the number of rows inserted: the full baseline on first run,
    0 when the table already holds data.
    """
    DbManageService(db_session_service).ensure_initialized()

    with db_session_service.session_scope() as session:
        repository = ProductRepository(session)
        if repository.any():
            logger.info("Product table already populated; skipping seed")
            return 0

        inserted = repository.insert_many(baseline_products())

    logger.info("Seeded {} products", len(inserted))
    return len(inserted)


if __name__ == "__main__":
    init_db(DbSessionService())
