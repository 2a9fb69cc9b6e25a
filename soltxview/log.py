"""
Structured logging for soltxview.

structlog with ISO timestamps and log level. JSON output by default
(LOG_FORMAT=json), human-readable console output otherwise. Modules call
get_logger(__name__) and log an event name plus keyword context:

    logger = get_logger(__name__)
    logger.debug("account_unresolved", instruction_index=3, account_index=9)

The library never configures structlog itself; host applications call
configure_structlog() (main.py does) or set up structlog their own way.
No soltxview imports here to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog


def configure_structlog(level: int | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog: level filter, ISO timestamp, JSON or console renderer.
    Defaults come from LOG_LEVEL (WARNING) and LOG_FORMAT (json) at call time.
    """
    if level is None:
        level = getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    if fmt is None:
        fmt = os.getenv("LOG_FORMAT", "json").strip().lower()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structured logger bound to the given module name."""
    return structlog.get_logger(name).bind(logger=name)
