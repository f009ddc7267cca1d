"""Unit tests for database session and schema services."""

from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from src.catalog.core.services.database import DbManageService, DbSessionService
from src.catalog.core.services.database.db_utils import (
    ensure_sqlite_directory,
    is_memory_database,
    sqlite_file_path,
)
from src.catalog.entities.product import ProductTable
from src.catalog.runtime.config.config_data import DatabaseConfig


class TestDbUtils:
    @pytest.mark.parametrize(
        "url",
        ["sqlite://", "sqlite:///:memory:"],
    )
    def test_memory_urls(self, url: str):
        assert is_memory_database(url) is True
        assert sqlite_file_path(url) is None

    def test_file_url(self, tmp_path: Path):
        url = f"sqlite:///{tmp_path / 'products.db'}"

        assert is_memory_database(url) is False
        assert sqlite_file_path(url) == tmp_path / "products.db"

    def test_relative_file_url(self):
        assert sqlite_file_path("sqlite:///products.db") == Path("products.db")

    def test_ensure_sqlite_directory_creates_parent(self, tmp_path: Path):
        target = tmp_path / "nested" / "dir" / "products.db"

        ensure_sqlite_directory(f"sqlite:///{target}")

        assert target.parent.is_dir()
        assert not target.exists()


class TestDbSessionService:
    def test_session_scope_commits(self, db_session_service: DbSessionService):
        DbManageService(db_session_service).ensure_initialized()

        with db_session_service.session_scope() as session:
            session.add(ProductTable(name="Laptop", price=Decimal("1299.99")))

        with db_session_service.session_scope() as session:
            names = session.exec(select(ProductTable.name)).all()

        assert names == ["Laptop"]

    def test_session_scope_rolls_back_on_error(self, db_session_service: DbSessionService):
        DbManageService(db_session_service).ensure_initialized()

        with pytest.raises(RuntimeError, match="boom"):
            with db_session_service.session_scope() as session:
                session.add(ProductTable(name="Laptop", price=Decimal("1299.99")))
                session.flush()
                raise RuntimeError("boom")

        with db_session_service.session_scope() as session:
            assert session.exec(select(ProductTable)).all() == []

    def test_url_reflects_config(self, file_db_url: str):
        service = DbSessionService(DatabaseConfig(url=file_db_url))
        try:
            assert service.url == file_db_url
        finally:
            service.dispose()


class TestDbManageService:
    def test_ensure_initialized_creates_store_and_table(
        self, file_db_session_service: DbSessionService, file_db_url: str
    ):
        DbManageService(file_db_session_service).ensure_initialized()

        db_file = sqlite_file_path(file_db_url)
        assert db_file is not None and db_file.exists()
        assert "Product" in inspect(file_db_session_service.engine).get_table_names()

    def test_ensure_initialized_is_idempotent(self, file_db_session_service: DbSessionService):
        manage = DbManageService(file_db_session_service)
        manage.ensure_initialized()

        with file_db_session_service.session_scope() as session:
            session.add(ProductTable(name="Webcam", price=Decimal("79.99")))

        manage.ensure_initialized()

        with file_db_session_service.session_scope() as session:
            assert len(session.exec(select(ProductTable)).all()) == 1

    def test_ensure_initialized_fails_when_store_cannot_be_opened(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        service = DbSessionService(DatabaseConfig(url=f"sqlite:///{blocker / 'products.db'}"))

        try:
            with pytest.raises(OperationalError):
                DbManageService(service).ensure_initialized()
        finally:
            service.dispose()
