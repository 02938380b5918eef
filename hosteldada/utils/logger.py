"""Structured logging utilities."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from hosteldada.utils.config import get_settings


PACKAGE_LOGGER_NAME = "hosteldada"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Attach one stderr handler to the package logger.

    Only the ``hosteldada`` logger is touched, so uvicorn or a host
    application keeps control of the root logger. stdout belongs to the
    console menu.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    resolved_level = (level or get_settings().log_level).upper()
    package_logger.setLevel(resolved_level)

    # Prevent duplicate handlers if configured more than once
    if package_logger.handlers:
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the requested module under the package logger."""
    if not name.startswith(PACKAGE_LOGGER_NAME):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    configure_logging()
    return logging.getLogger(name)
