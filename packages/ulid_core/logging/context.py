"""Structured logging context carried in a ``ContextVar``.

Fields bound here are attached to every record passing a ``ContextFilter``.
The generator binds its event fields only for the duration of one warning, so
host-level fields such as ``service`` survive untouched.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})
_FIELDS: ContextVar[Mapping[str, str]] = ContextVar("ulid_log_fields", default=_EMPTY)


def _merged(values: Mapping[str, object]) -> Mapping[str, str]:
    merged = dict(_FIELDS.get())
    merged.update({str(key): str(value) for key, value in values.items() if value is not None})
    return MappingProxyType(merged)


def get_context() -> dict[str, str]:
    """Return a mutable copy of the bound fields."""
    return dict(_FIELDS.get())


def bind_context(**values: object) -> None:
    """Bind fields for the rest of the current context; ``None`` is skipped."""
    if values:
        _FIELDS.set(_merged(values))


def clear_context(*keys: str) -> None:
    """Drop the named fields, or every field when no names are given."""
    if not keys:
        _FIELDS.set(_EMPTY)
        return
    _FIELDS.set(
        MappingProxyType({key: value for key, value in _FIELDS.get().items() if key not in keys})
    )


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` only while the block runs."""
    token = _FIELDS.set(_merged(values))
    try:
        yield
    finally:
        _FIELDS.reset(token)
