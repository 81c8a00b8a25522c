# core/logging_setup.py

"""
Structured logging configuration using structlog.

Log records are written to stderr so they never interleave with the menu output on stdout.
Console format is used by default; JSON output can be selected through `Settings.log_format`.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import FilteringBoundLogger, Processor

from core.config import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configures structlog for the running process.

    Args:
        settings (Settings): Application settings providing `log_level` and `log_format`.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    return structlog.get_logger(name)
