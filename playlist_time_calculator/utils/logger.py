"""Logging for Playlist Time Calculator.

Everything logs under the ``playlist_time_calculator`` logger. The CLI
configures it once per command from ``LoggingConfig``; components that are
not handed a logger take a child of it via :func:`get_logger`.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import coloredlogs

LOGGER_NAME = "playlist_time_calculator"

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'


def setup_logger(
    log_file: Optional[Path] = None,
    level: str = "WARNING",
    max_size_mb: int = 10,
    backup_count: int = 5
) -> logging.Logger:
    """Configure the package logger.

    Command output goes to stdout, so log records are written to stderr,
    plus a rotating file when ``log_file`` is set. Calling this again
    replaces the previous handlers.

    Args:
        log_file: Path to log file (if None, no file logging)
        level: Logging level name
        max_size_mb: Maximum log file size in MB before rotation
        backup_count: Number of rotated files to keep

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(coloredlogs.ColoredFormatter(fmt=CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
