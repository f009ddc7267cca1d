"""Unit tests for logging configuration."""

import logging
import sys
from pathlib import Path

import pytest
from loguru import logger

from src.catalog.runtime.app_startup import InterceptHandler, configure_logging
from src.catalog.runtime.config.config_data import ConfigData, LoggingConfig
from src.catalog.runtime.context import with_context


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    logger.remove()
    logger.add(sys.stderr)
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging_writes_file_sink(tmp_path: Path, restore_logging):
    log_file = tmp_path / "logs" / "catalog.log"
    override = ConfigData(logging=LoggingConfig(level="INFO", format="plain", file=str(log_file)))

    with with_context(override):
        configure_logging()

    logger.info("catalog ready")
    logger.complete()

    assert log_file.exists()
    assert "catalog ready" in log_file.read_text()


def test_stdlib_records_are_forwarded(tmp_path: Path, restore_logging):
    log_file = tmp_path / "catalog.log"
    override = ConfigData(logging=LoggingConfig(level="INFO", file=str(log_file)))

    with with_context(override):
        configure_logging()

    assert any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers)
    logging.getLogger("catalog.test").warning("forwarded from stdlib")
    logger.complete()

    assert "forwarded from stdlib" in log_file.read_text()
