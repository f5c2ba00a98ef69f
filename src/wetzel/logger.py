"""Logging configuration for wetzel with verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Verbosity level constants for external use
VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_WARNINGS = 1  # Documentation warnings (missing titles, etc.)
VERBOSITY_INFO = 2
VERBOSITY_DEBUG = 3  # Every auto-link substitution

_LEVEL_MAP = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_WARNINGS: logging.WARNING,
    VERBOSITY_INFO: logging.INFO,
    VERBOSITY_DEBUG: logging.DEBUG,
}


def get_logger() -> logging.Logger:
    """Get the wetzel logger instance.

    Returns the same logger on every call. Use setup_logger() to attach
    a handler; until then nothing below ERROR is emitted.
    """
    return logging.getLogger("wetzel")


def _silence(logger: logging.Logger) -> None:
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.ERROR)


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the wetzel logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=silent (errors only), 1=warnings, 2=info, 3=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVEL_MAP.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to a clean, silent state."""
    logger = get_logger()
    _silence(logger)
    logger.propagate = True


def debug_enabled() -> bool:
    """Check if debug-level logging is enabled (verbosity >= 3)."""
    return get_logger().isEnabledFor(logging.DEBUG)


# Library default: silent until the caller opts in
_silence(get_logger())
