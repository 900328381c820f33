"""
Logging configuration for NetClient.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs for
tracing a request across calling conventions and threads.
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID from context.

    Returns:
        Current correlation ID or None if not set
    """
    return correlation_id_var.get()


@contextmanager
def correlation_scope(correlation_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of a block.

    An ID already set by the caller is kept, so application-level IDs flow
    into request logs. Otherwise ``correlation_id`` (or a new UUID) is set
    and the previous value is restored on exit.

    Yields:
        The correlation ID in effect inside the block
    """
    current = correlation_id_var.get()
    if current is not None and correlation_id is None:
        yield current
        return

    token = correlation_id_var.set(correlation_id or str(uuid.uuid4()))
    try:
        yield correlation_id_var.get()
    finally:
        correlation_id_var.reset(token)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for NetClient.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(stderr_handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    if not name.startswith("netclient"):
        name = f"netclient.{name}"
    return structlog.get_logger(name)


# Convenience functions for common logging patterns

def log_request_dispatched(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    url: str,
    **kwargs: Any,
) -> None:
    """
    Log a request handed to the transport.

    Args:
        logger: Logger instance
        method: HTTP method
        url: Fully materialized request URL
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "request_dispatched",
        "method": method,
        "url": url,
    }

    log_data.update(kwargs)

    logger.debug("request_dispatched", **log_data)


def log_request_completed(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    url: str,
    success: bool,
    duration_ms: float,
    status_code: Optional[int] = None,
    error: Optional[BaseException] = None,
    **kwargs: Any,
) -> None:
    """
    Log the classified outcome of a request.

    Args:
        logger: Logger instance
        method: HTTP method
        url: Request URL
        success: Whether the request was classified as a success
        duration_ms: Time spent in the transport in milliseconds
        status_code: Response status code if a response was received
        error: Classified or underlying error on failure
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "request_completed",
        "method": method,
        "url": url,
        "success": success,
        "duration_ms": duration_ms,
    }

    if status_code is not None:
        log_data["status_code"] = status_code

    if error is not None:
        log_data["error_type"] = type(error).__name__
        log_data["error"] = str(error)

    log_data.update(kwargs)

    if success:
        logger.debug("request_completed", **log_data)
    else:
        logger.warning("request_completed", **log_data)
