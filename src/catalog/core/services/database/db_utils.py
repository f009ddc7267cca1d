from pathlib import Path

from loguru import logger
from sqlalchemy.engine import make_url


def is_memory_database(url: str) -> bool:
    """True for SQLite URLs that point at an in-memory database."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def sqlite_file_path(url: str) -> Path | None:
    """Return the database file behind a SQLite URL, or None if there is none."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite" or is_memory_database(url):
        return None
    return Path(parsed.database)


def ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    path = sqlite_file_path(url)
    if path is None:
        return
    if not path.parent.exists():
        logger.info("Creating database directory {}", path.parent)
        path.parent.mkdir(parents=True, exist_ok=True)
