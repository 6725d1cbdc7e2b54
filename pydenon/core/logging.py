"""
Logging helpers for the pydenon package.

All package loggers hang off the ``pydenon`` logger so applications can
configure the whole client with a single call.
"""

import logging
from typing import Optional

LOGGER_NAME = "pydenon"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOGGER = logging.getLogger(LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package logger.

    Args:
        name: Module name relative to the package, e.g. ``core.framing``

    Returns:
        logging.Logger: Logger named ``pydenon.<name>``
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.INFO, format_string: Optional[str] = None) -> None:
    """
    Configure the package logger with a single stream handler.

    Calling this again replaces the previous handler, so the last call wins.

    Args:
        level: Logging level for the package logger
        format_string: Format for log records (defaults to DEFAULT_FORMAT)
    """
    for handler in list(LOGGER.handlers):
        LOGGER.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    LOGGER.addHandler(handler)
    LOGGER.setLevel(level)
