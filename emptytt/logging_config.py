"""Logging configuration for emptytt package."""

import logging
from typing import Optional

import structlog

from emptytt.config import get_settings

logging.basicConfig(level=get_settings().log_level)

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(pad_event_to=25),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def configure_logging(level: Optional[str] = None) -> None:
    """Set the root log level, e.g. from the CLI verbosity flag."""
    logging.getLogger().setLevel((level or get_settings().log_level).upper())


def get_logger() -> structlog.stdlib.BoundLogger:
    """Get a configured structlog logger."""
    return structlog.get_logger()
