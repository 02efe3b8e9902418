"""
Centralized logging configuration for the septem command line harness.

The conversion core never logs; errors propagate to the caller. Only the
CLI layer obtains loggers from here. Output goes to stderr so that stdout
carries conversion results only.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        stream: Destination stream (defaults to sys.stderr)

    Raises:
        ValueError: If level is not a known logging level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    # Repeated calls replace the previous root handlers
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def log_conversion(
    logger: FilteringBoundLogger,
    source: str,
    result: str,
    direction: str,
    normalized: Optional[str] = None,
) -> None:
    """
    Log a successful conversion with standardized fields.

    Args:
        logger: Structlog logger instance
        source: Input as given on the command line
        result: Produced output
        direction: "encode" (int → numeral) or "decode" (numeral → int)
        normalized: Upper-case digits of a decoded input
    """
    bound_logger = logger.bind(source=source, result=result, direction=direction)
    if normalized is not None:
        bound_logger = bound_logger.bind(normalized=normalized)

    bound_logger.debug("Conversion")


def log_conversion_error(
    logger: FilteringBoundLogger,
    source: str,
    error: Exception,
    context: Optional[dict[str, Any]] = None,
) -> None:
    """
    Log a failed conversion.

    Args:
        logger: Structlog logger instance
        source: Input as given on the command line
        error: Raised exception
        context: Additional context data
    """
    bound_logger = logger.bind(
        source=source,
        error_kind=type(error).__name__,
        error=str(error),
    )
    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Conversion failed")
