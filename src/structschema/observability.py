"""Structured logging setup for structschema.

Diagnostics go to stderr through structlog so that stdout only carries
the CLI's user-facing messages.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Configure structlog with a console renderer.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Output stream. Defaults to stderr.

    Example:
        >>> configure_logging("DEBUG")
        >>> structlog.get_logger("structschema").debug("type_found", type_name="User")
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream) if stream else _stderr_logger,
        cache_logger_on_first_use=False,
    )
