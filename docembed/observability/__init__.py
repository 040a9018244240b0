"""
Observability helpers: logging setup, safe structured logging, log event ids.
"""

from docembed.observability.log_events import LogEvents
from docembed.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from docembed.observability.logger import configure_logging, get_logger

__all__ = [
    "LogEvents",
    "configure_logging",
    "get_logger",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
]
