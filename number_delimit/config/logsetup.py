"""Structured logging configuration for applications embedding the formatter.

The library never configures logging on import. After :func:`configure_logging`
both structlog events (``number_delimited`` from the formatter, with its
input, result and options as fields) and plain stdlib records (settings
warnings) come out as one JSON object per line on stdout.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from number_delimit.config.settings import get_settings

# Processors shared by structlog events and foreign stdlib records
SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Build the stdlib formatter that renders every record as JSON."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Route structlog through stdlib logging and emit JSON on stdout.

    ``level`` defaults to ``Settings.LOG_LEVEL``.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(json_formatter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel((level or get_settings().LOG_LEVEL).upper())


__all__ = ["SHARED_PROCESSORS", "json_formatter", "configure_logging"]
