"""Structured logging setup."""
import logging

import structlog

from app.core.config import get_settings


def configure_logging(log_level: str | None = None) -> None:
    """Configure structlog to emit JSON lines at or above ``log_level``."""
    level = (log_level or get_settings().log_level).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.PrintLoggerFactory(),
    )
