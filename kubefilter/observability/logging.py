"""Structured logging configuration using structlog.

Log lines always go to stderr: stdout carries forwarded events when the
screening CLI runs in a pipeline.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOG_FORMATS = ("json", "console")


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_logging(
    level: str = "info",
    fmt: str = "json",
    stream: TextIO | None = None,
    cache_loggers: bool = True,
) -> None:
    """Configure structlog.

    Args:
        level:         debug, info, warning or error.  Unknown values fall back to info.
        fmt:           ``json`` for one JSON object per line, ``console`` for humans.
        stream:        Destination file object.  Defaults to stderr.
        cache_loggers: Freeze bound loggers on first use.  Tests that capture
                       log output after configuring disable this.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            _renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
