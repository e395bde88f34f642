"""
Unit tests for logging setup.
"""

import logging
import logging.handlers

import pytest

from scriptorium.utils.config import Settings
from scriptorium.utils.logger import get_logger, setup_logging

@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

def _file_handlers(root_logger):
    return [h for h in root_logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]

def test_setup_logging_creates_error_log(tmp_path, restore_root_logger):
    """Test that setup_logging adds console and error file handlers."""
    logger = setup_logging(Settings(DEBUG=False, ENABLE_DEBUG_LOG=False), log_dir=str(tmp_path / "logs"))

    assert logger.name == "scriptorium"
    assert (tmp_path / "logs" / "error.log").exists()

    file_handlers = _file_handlers(restore_root_logger)
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.ERROR
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

def test_setup_logging_debug_mode(tmp_path, restore_root_logger):
    """Test that debug mode adds a debug log and SQL logging."""
    setup_logging(Settings(DEBUG=True, LOG_LEVEL="DEBUG"), log_dir=str(tmp_path))

    assert (tmp_path / "debug.log").exists()
    assert len(_file_handlers(restore_root_logger)) == 2
    assert restore_root_logger.level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO

def test_setup_logging_is_idempotent(tmp_path, restore_root_logger):
    """Test that repeated setup does not duplicate handlers."""
    settings = Settings(DEBUG=False, ENABLE_DEBUG_LOG=False)

    setup_logging(settings, log_dir=str(tmp_path))
    count = len(restore_root_logger.handlers)
    setup_logging(settings, log_dir=str(tmp_path))

    assert len(restore_root_logger.handlers) == count

def test_get_logger_level():
    """Test that an explicit level is applied."""
    logger = get_logger("scriptorium.tests.level", level=logging.WARNING)

    assert logger.name == "scriptorium.tests.level"
    assert logger.level == logging.WARNING
