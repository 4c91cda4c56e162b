"""Structured logging configuration.

This module initializes structlog with a stable key/value format.
Log lines go to stderr so stdout only carries the emitted document.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(debug: bool) -> None:
    """Configure structlog output for this process.

    Args:
        debug: Emit debug-level traces when true, warnings and above otherwise.
    """
    level = logging.DEBUG if debug else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A lazily-bound structlog logger.
    """
    if not structlog.is_configured():
        configure_logging(debug=False)
    return structlog.get_logger(name)
