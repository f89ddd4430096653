"""Logging setup shared by the Flask app and the example scripts."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Package root logger, whichever import path the package was loaded under.
PACKAGE_LOGGER_NAME = __name__.rsplit(".common.", 1)[0]


def configure_logging(level: str = "INFO", *, stream=None) -> logging.Logger:
    """Install a single stream handler on the package logger.

    Calling it twice replaces the handler instead of stacking duplicates.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    package_logger.setLevel(numeric_level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger
