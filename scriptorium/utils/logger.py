"""
Logger utility for consistent logging across Scriptorium.

This module provides a standardized way to create and configure loggers
throughout the package, ensuring consistent log formatting and behavior.

Features:
- Consistent log format across all modules
- Configurable log level based on settings
- Stream handler to stdout for easy viewing in console/terminal
- File handlers for error and debug logs with rotation
- Prevents duplicate log handlers when called multiple times
"""

import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

from scriptorium.utils.config import Settings, get_settings

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def _resolve_level(settings: Settings) -> int:
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

def setup_logging(settings: Optional[Settings] = None, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure global logging.

    Installs a console handler, a rotating error log and, when debugging,
    a rotating debug log. Existing root handlers are replaced so repeated
    calls do not duplicate output.

    Args:
        settings: Settings to read levels from. Loaded from the environment if omitted.
        log_dir: Directory for the log files. Defaults to ``settings.LOG_DIR``.

    Returns:
        logging.Logger: The ``scriptorium`` package logger
    """
    settings = settings or Settings()
    debug_mode = settings.DEBUG
    log_level = _resolve_level(settings)

    # Create logs directory if it doesn't exist
    log_path = Path(log_dir or settings.LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    verbose_formatter = logging.Formatter(
        VERBOSE_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )
    standard_formatter = logging.Formatter(
        DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    # Console handler (always enabled)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    root_logger.addHandler(console_handler)

    # File handler for errors (always enabled)
    error_file_handler = logging.handlers.RotatingFileHandler(
        log_path / "error.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(verbose_formatter)
    root_logger.addHandler(error_file_handler)

    if debug_mode or settings.ENABLE_DEBUG_LOG:
        debug_file_handler = logging.handlers.RotatingFileHandler(
            log_path / "debug.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        debug_file_handler.setLevel(log_level)
        debug_file_handler.setFormatter(verbose_formatter)
        root_logger.addHandler(debug_file_handler)

    # SQL statements are only interesting while debugging
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if debug_mode else logging.WARNING
    )

    logger = logging.getLogger('scriptorium')
    logger.info(f"Logging initialized with level {settings.LOG_LEVEL.upper()}")

    return logger

def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger instance with consistent formatting.

    If neither the logger nor the root logger has handlers yet, a stdout
    handler is attached so messages are not lost before ``setup_logging``
    runs.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.
        level: Logging level. If None, uses ``LOG_LEVEL`` from settings.

    Returns:
        logging.Logger: Configured logger instance.

    Example:
        ```python
        from scriptorium.utils.logger import get_logger

        logger = get_logger(__name__)
        logger.info("Saved user 42")
        ```
    """
    if level is None:
        level = _resolve_level(get_settings())

    logger = logging.getLogger(name or __name__)
    logger.setLevel(level)

    root_logger = logging.getLogger()
    if not logger.handlers and not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            DEFAULT_FORMAT,
            datefmt=DEFAULT_DATE_FORMAT
        ))
        logger.addHandler(handler)

    return logger
