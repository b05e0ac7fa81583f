"""Structured logging configuration using structlog.

Development runs get pretty console output, production runs get JSON lines.

Usage:
    from src.core.logging import get_logger, configure_logging

    configure_logging(development=True)

    logger = get_logger(__name__)
    logger.info("boundary_teleport", from_page=0, to_page=3)
"""

import logging
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor

# Libraries whose INFO chatter drowns out carousel events
DEFAULT_QUIET_LOGGERS = ("discord",)


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
    quiet_loggers: Iterable[str] = DEFAULT_QUIET_LOGGERS,
) -> None:
    """Configure structured logging for the application.

    Args:
        development: If True, use pretty-printed output. If False, use JSON.
                    If None, reads from ENVIRONMENT env var (default: development).
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR).
                  If None, reads from LOG_LEVEL env var (default: INFO).
        quiet_loggers: Standard library logger names raised to WARNING.
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"

    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO").upper()

    numeric_level = getattr(logging, log_level, logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if development:
        processors: list[Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True replaces handlers installed by earlier calls
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


@contextmanager
def carousel_context(**kwargs: Any) -> Iterator[None]:
    """Bind context variables for the duration of a block.

    Used around event dispatch so every log line emitted while handling a
    pager event carries the carousel's identity.
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
