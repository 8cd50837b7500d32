"""
Tests for logging configuration.
"""

import logging

import pytest

from movie_catalog.utils.logging_config import (
    configure_catalog_logging, get_logger, setup_logging
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_console_only():
    """Test that one console handler is installed at the requested level."""
    setup_logging(level="WARNING")
    root = logging.getLogger()
    
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert logging.getLogger('sqlalchemy.engine').level == logging.WARNING


def test_setup_logging_with_file(tmp_path):
    """Test that a log file is created when requested."""
    setup_logging(log_file="catalog.log", log_dir=str(tmp_path))
    logging.getLogger("movie_catalog.test").info("hello")
    
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello" in (tmp_path / "catalog.log").read_text()


def test_configure_catalog_logging_debug():
    """Test the debug switch without a log file."""
    configure_catalog_logging(debug=True, log_file=None)
    
    assert logging.getLogger().level == logging.DEBUG


def test_get_logger_level_override():
    logger = get_logger("movie_catalog.sample", level="error")
    
    assert logger.level == logging.ERROR


def test_configure_catalog_logging_uses_env_level(monkeypatch):
    """Test that the non-debug level is read from LOG_LEVEL."""
    monkeypatch.setenv('LOG_LEVEL', 'warning')
    configure_catalog_logging(log_file=None)
    
    assert logging.getLogger().level == logging.WARNING
