"""Logging setup for the sales report CLI and library callers.

Diagnostics go to stderr by default so the CLI's stdout carries only the
report itself.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "sales_report"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: int | str) -> int:
    """Numeric level for an int or a level name such as "debug".

    Unknown names resolve to INFO.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    module_name: str = ROOT_LOGGER,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return the project logger.

    Calling it again re-levels the existing handler instead of adding a
    second one, and points it at stream when one is given.

    Args:
        level: Numeric level or level name (default INFO).
        module_name: Logger to configure; children inherit its handler.
        stream: Output stream (default sys.stderr).

    Returns:
        Configured logger.
    """
    numeric = resolve_level(level)
    logger = logging.getLogger(module_name)
    logger.setLevel(numeric)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(numeric)
            if stream is not None and isinstance(handler, logging.StreamHandler):
                handler.setStream(stream)
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
