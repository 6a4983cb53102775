"""Structured logging configuration and error logging.

Uses structlog for structured, contextual logging. ``log_error`` hands an
``IError`` to any logger, using its message as the template and its
metadata as the positional arguments.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Protocol

import structlog

from clean_results.domain.abstractions import IError

_configured = False


class SupportsLog(Protocol):
    """Anything with a stdlib-compatible ``log`` method.

    Both ``logging.Logger`` and ``structlog.stdlib.BoundLogger`` qualify.
    """

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> Any: ...


def configure_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
    """
    global _configured
    if _configured:
        return

    # Shared processors; positional args carry error metadata
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structured logger
    """
    if not _configured:
        from clean_results.shared.config import settings
        configure_logging(
            level=settings.log_level,
            log_format=settings.log_format,
            log_file=settings.log_file,
        )

    return structlog.get_logger(name)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def log_error(
    logger: SupportsLog,
    error: IError | None,
    level: int | str = logging.ERROR,
    exc_info: BaseException | None = None,
    **fields: Any,
) -> None:
    """Log an error object through a structured or stdlib logger.

    The error is read, never stored or modified. A missing error logs the
    configured placeholder event with no arguments instead of failing.

    Args:
        logger: structlog BoundLogger or stdlib Logger
        error: Error to log, or None
        level: Log level as number or name
        exc_info: Optional exception that caused the error
        **fields: Extra keyword arguments passed to ``logger.log``

    Example:
        >>> log_error(get_logger(__name__), Error.of("Order %s failed", 42))
    """
    if error is None:
        from clean_results.shared.config import get_settings
        event: str = get_settings().missing_error_event
        args: tuple[object | None, ...] = ()
    else:
        event = error.message
        args = tuple(error.metadata)

    if exc_info is not None:
        fields["exc_info"] = exc_info

    logger.log(_resolve_level(level), event, *args, **fields)


def log_debug(logger: SupportsLog, error: IError | None, exc_info: BaseException | None = None, **fields: Any) -> None:
    log_error(logger, error, logging.DEBUG, exc_info, **fields)


def log_info(logger: SupportsLog, error: IError | None, exc_info: BaseException | None = None, **fields: Any) -> None:
    log_error(logger, error, logging.INFO, exc_info, **fields)


def log_warning(logger: SupportsLog, error: IError | None, exc_info: BaseException | None = None, **fields: Any) -> None:
    log_error(logger, error, logging.WARNING, exc_info, **fields)


def log_critical(logger: SupportsLog, error: IError | None, exc_info: BaseException | None = None, **fields: Any) -> None:
    log_error(logger, error, logging.CRITICAL, exc_info, **fields)
