"""Structured logging setup for Catalog Service."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog to render JSON through the stdlib logging module.

    Args:
        level: Minimum log level name (e.g. "INFO", "DEBUG")
    """
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
