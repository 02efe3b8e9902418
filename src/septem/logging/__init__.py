"""Structured logging for the septem CLI."""

from .config import configure_logging, get_logger, log_conversion, log_conversion_error

__all__ = ["configure_logging", "get_logger", "log_conversion", "log_conversion_error"]
