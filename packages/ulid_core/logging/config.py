"""Stdout logging setup for hosts embedding the ULID library.

The library itself only creates named loggers under a ``NullHandler``. A host
installs the real handler, either directly through ``configure_logging`` or
from resolved settings with ``configure_from_settings``, so generator warnings
share the host's stream.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, TextIO

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from packages.ulid_core.config import LoggingSettings

LIBRARY_LOGGER_NAME = "packages.ulid_core"

# Without a host handler, records stop here instead of reaching the
# interpreter's last-resort stderr handler.
logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


class ContextFilter(logging.Filter):
    """Copy bound context fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        record.context = context
        record.__dict__.update(context)
        return True


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: core fields first, then bound context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(_record_context(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Single-line text with ``key=value`` context appended in key order."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if not context:
            return line
        return line + " " + " ".join(f"{key}={context[key]}" for key in sorted(context))


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Replace root handlers with a single context-aware stream handler.

    Calling this again swaps the handler rather than adding a second one.
    """
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})


def configure_from_settings(settings: LoggingSettings, *, stream: TextIO | None = None) -> None:
    """Apply resolved ``LoggingSettings``."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
        stream=stream,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard hierarchy."""
    return logging.getLogger(name)
