"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.catalog.core.services.database.db_utils import is_memory_database
from src.catalog.runtime.config.config_data import DatabaseConfig
from src.catalog.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the shared database engine and session factory."""

        main_config = get_config()
        self._db_config = db_config or main_config.database

        engine_kwargs = {
            "echo": self._db_config.echo,
            "connect_args": self._get_connect_args(self._db_config),
            **self._get_pool_args(self._db_config),
        }

        logger.info("Initializing database engine using connection string: {}", self._db_config.connection_string)
        self._engine = create_engine(self._db_config.connection_string, **engine_kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def url(self) -> str:
        return self._db_config.connection_string

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict[str, Any]:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": db_config.timeout,  # Lock timeout
                }
            )

        return connect_args

    def _get_pool_args(self, db_config: DatabaseConfig) -> dict[str, Any]:
        # An in-memory database lives only as long as its connection
        if is_memory_database(db_config.connection_string):
            return {"poolclass": StaticPool}
        return {}

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session for one unit of work; commit on success, roll back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {error_type}: {error_message}",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        """Release every pooled connection held by the engine."""
        self._engine.dispose()
