"""Structured logging configuration using structlog.

The dashboard owns the terminal, so nothing is ever logged to the console.
Diagnostics go to a local file only when debug logging is enabled.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 2

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _file_handler(log_file: Path) -> logging.Handler:
    """Create a rotating JSON-lines file handler."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )
    return handler


def configure_logging(debug: bool = False, log_file: Path | str = "debug.log") -> None:
    """Configure structured logging for the dashboard.

    Args:
        debug: Write DEBUG-level diagnostics to ``log_file``.
        log_file: Diagnostic log path, relative to the working directory
            unless absolute.
    """
    log_level = logging.DEBUG if debug else logging.CRITICAL

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if debug:
        root_logger.addHandler(_file_handler(Path(log_file)))
    else:
        root_logger.addHandler(logging.NullHandler())

