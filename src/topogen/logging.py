"""Structured logging for topogen.

This module provides structured logging using structlog:
- Pretty console logs for interactive use
- JSON-formatted logs for machine consumption
- Integration with standard library logging

The enumeration core only logs at DEBUG, once per preprocessing pass and
once per exhausted stream, never per generated order.

Usage:
    from topogen.logging import configure_logging, get_logger

    configure_logging(level=logging.DEBUG)
    logger = get_logger(__name__)
    logger.debug("peeled", levels=3, size=7)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

_configured = False


def configure_logging(
    json_format: bool = False,
    level: int = logging.WARNING,
    logger_factory: Any = None,
) -> None:
    """Configure structured logging for topogen.

    Args:
        json_format: If True, output JSON logs.
                    If False, output pretty console logs.
        level: Minimum log level (default: WARNING)
        logger_factory: Custom logger factory (for testing)
    """
    global _configured

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=logger_factory or structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    _configured = True


def get_logger(name: str) -> Any:
    """Get a structured logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        A bound logger that supports structured logging.
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)

