"""
Observability module.

Provides logging configuration and safe structured logging helpers.
"""

from backend.observability.log_utils import (
    log_exception_with_context,
    safe_log_value,
)
from backend.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "log_exception_with_context",
    "safe_log_value",
]
