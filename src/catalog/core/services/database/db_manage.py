"""Schema management for the product store."""

from loguru import logger
from sqlmodel import SQLModel

from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.core.services.database.db_utils import ensure_sqlite_directory


class DbManageService:
    def __init__(self, db_session_service: DbSessionService):
        self._db_session_service = db_session_service

    def ensure_initialized(self) -> None:
        """Create the backing store and its tables if they do not exist yet."""
        from src.catalog.entities.product import ProductTable  # noqa: F401

        ensure_sqlite_directory(self._db_session_service.url)
        SQLModel.metadata.create_all(self._db_session_service.engine)
        logger.info("Database initialized with tables.")
