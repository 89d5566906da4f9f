"""Diagnostic logging setup.

The terminal belongs to the UI, so records only ever go to a file given on
the command line. Without one the package logger stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "tuistarter"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(log_file: Path | None, level: str | None = None) -> logging.Handler | None:
    """Attach a file handler to the package logger; return it, or ``None``."""
    if log_file is None:
        return None
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, (level or "DEBUG").upper()))
    return handler


__all__ = ["LOG_FORMAT", "LOG_LEVELS", "PACKAGE_LOGGER", "configure_logging"]
