"""
Logging Configuration Module
=============================

Helpers for applications embedding topocalc.

Every engine module logs through ``logging.getLogger(__name__)``, which
places it under the ``topocalc`` namespace. The library itself only
installs a NullHandler; call ``setup_logging`` to see the records.

Usage:
    from topocalc.core.logging_config import setup_logging, get_logger

    setup_logging(level=logging.DEBUG)
    logger = get_logger("my_app")
    logger.info("Parcel area computed")

Log Levels used by the engine:
    DEBUG    - Insufficient input and solver summaries (misclosure, RMSE)
    WARNING  - Degenerate geometry (parallel lines, danger circle, ...)
"""

import logging
import sys
from typing import Optional

LOGGER_PREFIX = "topocalc"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """Attach a stream handler to the topocalc logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, use detailed format with timestamps and line numbers
        stream: Output stream (defaults to sys.stderr)

    Returns:
        Root logger for topocalc
    """
    global _handler

    root_logger = logging.getLogger(LOGGER_PREFIX)

    if _handler is not None:
        root_logger.removeHandler(_handler)

    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT))
    root_logger.addHandler(handler)
    _handler = handler

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the topocalc namespace.

    Args:
        name: Module name (typically __name__)
    """
    if name != LOGGER_PREFIX and not name.startswith(LOGGER_PREFIX + "."):
        name = f"{LOGGER_PREFIX}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the logging level at runtime."""
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    """Enable DEBUG level logging."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Set logging back to INFO level."""
    set_log_level(logging.INFO)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
]
