"""Utility modules for the trace migrator.

Provides:
- Structured logging configuration
"""

from .logging import configure_from_settings, configure_logging, get_logger, log_operation, LogContext

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "log_operation",
    "LogContext",
]
