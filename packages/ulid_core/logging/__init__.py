"""Public logging API for the ULID library.

Thin layer over Python's ``logging``: a stdout handler with JSON or plain
output and ``contextvars``-based structured fields.
"""

from .config import (
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_from_settings,
    configure_logging,
    get_logger,
)
from .context import bind_context, clear_context, get_context, log_context

__all__ = [
    "bind_context",
    "clear_context",
    "configure_from_settings",
    "configure_logging",
    "ContextFilter",
    "get_context",
    "get_logger",
    "JsonFormatter",
    "log_context",
    "PlainFormatter",
]
