"""Structured logging configuration for the site builder.

Sets up structlog on top of the standard library so every module can emit
key/value events either as JSON lines (production) or as colored console
output (development).

Usage:
    from shared.logging_config import setup_logging
    import structlog

    setup_logging(service_name="site-builder")  # Uses env defaults for format/level
    logger = structlog.get_logger()
    logger.info("project_created", project_id=1, user_id=7)
"""

import logging
import os
import sys
from typing import Literal
import uuid

import structlog
from structlog.types import Processor

CORRELATION_HEADER = "X-Correlation-ID"


def setup_logging(
    service_name: str | None = None,
    log_format: Literal["json", "console"] | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structured logging with structlog.

    Args:
        service_name: Name bound to every event.
                     Falls back to SERVICE_NAME env var or "site-builder".
        log_format: Output format - "json" for production, "console" for dev.
                   Falls back to LOG_FORMAT env var or "console".
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
                  Falls back to LOG_LEVEL env var or "INFO".
    """
    service_name = service_name or os.getenv("SERVICE_NAME", "site-builder")
    log_format = log_format or os.getenv("LOG_FORMAT", "console")
    log_level = log_level or os.getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        # correlation_id, method, path are bound per request
        structlog.contextvars.merge_contextvars,
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=False))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=service_name)

    logger = structlog.get_logger()
    logger.info(
        "logging_initialized",
        service=service_name,
        log_format=log_format,
        log_level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name. If not provided, uses the caller's module name.

    Returns:
        Configured structlog logger instance.
    """
    return structlog.get_logger(name)


def bind_request_context(correlation_id: str | None, method: str, path: str) -> str:
    """Bind per-request fields to the logging context.

    Generates a correlation id when the caller did not send one and returns
    the id actually bound.
    """
    correlation_id = correlation_id or f"req_{uuid.uuid4().hex[:8]}"
    structlog.contextvars.bind_contextvars(
        correlation_id=correlation_id, method=method, path=path
    )
    return correlation_id


def get_correlation_id() -> str | None:
    """Get correlation ID from current context."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    """Drop per-request fields, keeping the service name bound at startup."""
    structlog.contextvars.unbind_contextvars("correlation_id", "method", "path")
