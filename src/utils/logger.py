"""
Logger utility for consistent logging across the calendar API.

This module provides a standardized way to create and configure loggers
throughout the application, ensuring consistent log formatting and behavior.

Features:
- Consistent log format across all modules
- Configurable log level based on environment variables
- Stream handler to stdout for easy viewing in console/terminal
- File handlers for error and debug logs with rotation
- Prevents duplicate log handlers when called multiple times
"""

import os
import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logging(log_dir: Optional[str] = None, log_level_name: Optional[str] = None,
                  debug_mode: Optional[bool] = None) -> logging.Logger:
    """
    Configure global logging for the application.

    Log level and debug mode default to the LOG_LEVEL and DEBUG environment
    variables when not given. Error records always go to a rotating ``error.log`` under
    ``log_dir``; a rotating ``debug.log`` is added in debug mode or when
    ENABLE_DEBUG_LOG is set.

    Args:
        log_dir: Directory for log files. Defaults to LOG_DIR or ``logs``.
        log_level_name: Level name such as ``INFO``
        debug_mode: Log debug records to the console and ``debug.log``

    Returns:
        logging.Logger: Application logger
    """
    if debug_mode is None:
        debug_mode = os.getenv("DEBUG", "False").lower() == "true"
    log_level_name = (log_level_name or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    log_path = Path(log_dir or os.getenv("LOG_DIR", "logs"))
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

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    root_logger.addHandler(console_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        log_path / "error.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(verbose_formatter)
    root_logger.addHandler(error_file_handler)

    if debug_mode or os.getenv("ENABLE_DEBUG_LOG", "False").lower() == "true":
        debug_file_handler = logging.handlers.RotatingFileHandler(
            log_path / "debug.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        debug_file_handler.setLevel(log_level)
        debug_file_handler.setFormatter(verbose_formatter)
        root_logger.addHandler(debug_file_handler)

    # The discovery cache warns on every build() with oauth2client missing
    logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.ERROR)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)

    logger = logging.getLogger('calendar_api')
    logger.info(f"Logging initialized with level {log_level_name}")

    return logger

def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with consistent formatting.

    If neither the logger nor the root logger has handlers yet, a stdout
    handler is attached so that modules imported before ``setup_logging``
    still produce readable output.

    Args:
        name: Logger name, usually ``__name__``.
        level: Explicit level; defaults to LOG_LEVEL from the environment.

    Returns:
        logging.Logger: Configured logger instance.
    """
    if level is None:
        log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
        level = getattr(logging, log_level_name, logging.INFO)

    logger = logging.getLogger(name or __name__)
    logger.setLevel(level)

    root_logger = logging.getLogger()
    if not logger.handlers and not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            DEFAULT_FORMAT,
            datefmt=DEFAULT_DATE_FORMAT
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
