"""Tests for structlog setup."""
import logging

import pytest
import structlog

from metadoc.config import LoggingConfig
from metadoc.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    logging.basicConfig(level=logging.WARNING, force=True)


def test_configure_logging_sets_level():
    configure_logging(LoggingConfig(level="DEBUG", format="console"))
    assert logging.getLogger().level == logging.DEBUG
    assert structlog.is_configured()


def test_configure_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "metadoc.log"
    configure_logging(LoggingConfig(level="INFO", format="json", file=log_file))

    structlog.get_logger("metadoc.test").info("hello", entity_name="customer")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert '"event": "hello"' in content
    assert '"entity_name": "customer"' in content
