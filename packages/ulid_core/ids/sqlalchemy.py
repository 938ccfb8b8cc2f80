"""SQLAlchemy helpers for ULID-backed columns.

A column holding ULIDs may present them to Python as ``ULID`` objects, UUIDs,
canonical strings, or raw bytes. ``ULIDRepresentation`` names those four forms
and maps each to one pair of conversions; everything else in this module is
driven by that table.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from sqlalchemy import CheckConstraint, Column, LargeBinary, String, Uuid
from sqlalchemy.dialects.postgresql import BYTEA
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

from .constants import BIN_LENGTH, STR_LENGTH
from .monotonic import DEFAULT_GENERATOR, MonotonicGenerator
from .ulid import ULID

ULID_BYTES_LENGTH = BIN_LENGTH


class ULIDRepresentation(str, Enum):
    """Python-side forms a ULID value can take."""

    ULID = "ulid"
    UUID = "uuid"
    TEXT = "text"
    BYTES = "bytes"


@dataclass(frozen=True)
class _Transform:
    """Conversion pair between ``ULID`` and one representation."""

    to_value: Callable[[ULID], Any]
    from_value: Callable[[Any], ULID]


def _expect_ulid(value: Any) -> ULID:
    if not isinstance(value, ULID):
        raise TypeError(f"expected ULID, got {type(value).__name__}")
    return value


_TRANSFORMS: dict[ULIDRepresentation, _Transform] = {
    ULIDRepresentation.ULID: _Transform(lambda value: value, _expect_ulid),
    ULIDRepresentation.UUID: _Transform(ULID.to_uuid, ULID.from_uuid),
    ULIDRepresentation.TEXT: _Transform(ULID.to_str, ULID.from_str),
    ULIDRepresentation.BYTES: _Transform(ULID.to_bytes, ULID.from_bytes),
}


def representation_of(value: object) -> ULIDRepresentation:
    """Return the representation matching the runtime type of ``value``."""
    if isinstance(value, ULID):
        return ULIDRepresentation.ULID
    if isinstance(value, uuid.UUID):
        return ULIDRepresentation.UUID
    if isinstance(value, str):
        return ULIDRepresentation.TEXT
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ULIDRepresentation.BYTES
    raise TypeError(f"Unanticipated type {type(value).__name__} for ULID conversion")


def coerce_ulid(value: object) -> ULID:
    """Convert any supported representation into a ``ULID``."""
    return _TRANSFORMS[representation_of(value)].from_value(value)


def convert_ulid(value: ULID, representation: ULIDRepresentation | str) -> Any:
    """Convert a ``ULID`` into the requested representation."""
    return _TRANSFORMS[ULIDRepresentation(representation)].to_value(value)


def ulid_default(
    representation: ULIDRepresentation | str = ULIDRepresentation.ULID,
    *,
    generator: MonotonicGenerator | None = None,
) -> Callable[[], Any]:
    """Return a zero-argument callable suitable for ``Column(default=...)``.

    Each call draws from the monotonic generator and converts the result to
    ``representation`` once, at configuration time.
    """
    transform = _TRANSFORMS[ULIDRepresentation(representation)]
    source = generator or DEFAULT_GENERATOR

    def _generate() -> Any:
        return transform.to_value(source.next())

    return _generate


class ULIDType(TypeDecorator[ULID]):
    """Column type exposing ``ULID`` values over text, binary, or UUID storage.

    Bound parameters may be given in any supported representation; results are
    always returned as ``ULID``.
    """

    impl = LargeBinary
    cache_ok = True

    def __init__(self, storage: ULIDRepresentation | str = ULIDRepresentation.BYTES) -> None:
        super().__init__()
        storage = ULIDRepresentation(storage)
        if storage is ULIDRepresentation.ULID:
            raise ValueError("ULIDType storage must be one of uuid, text, or bytes")
        self.storage = storage

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if self.storage is ULIDRepresentation.TEXT:
            return dialect.type_descriptor(String(STR_LENGTH))
        if self.storage is ULIDRepresentation.UUID:
            return dialect.type_descriptor(Uuid(as_uuid=True))
        return dialect.type_descriptor(LargeBinary(BIN_LENGTH))

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        return convert_ulid(coerce_ulid(value), self.storage)

    def process_result_value(self, value: Any, dialect: Dialect) -> ULID | None:
        if value is None:
            return None
        return coerce_ulid(value)

    @property
    def python_type(self) -> type[ULID]:
        return ULID


def ulid_primary_key_column(
    name: str = "id",
    *,
    length_constraint_name: str | None = None,
) -> Column[bytes]:
    """Return a standard ULID primary-key column definition.

    Uses PostgreSQL BYTEA with a strict 16-byte check constraint to represent
    canonical 128-bit ULIDs generated in application code.
    """
    constraint = ulid_length_check(
        name,
        length_constraint_name or f"ck_{name}_ulid_16",
    )
    return Column(
        name,
        BYTEA,
        constraint,
        primary_key=True,
        nullable=False,
        default=ulid_default(ULIDRepresentation.BYTES),
    )


def ulid_length_check(column_name: str, constraint_name: str) -> CheckConstraint:
    """Return a CHECK constraint enforcing fixed 16-byte ULID storage."""
    return CheckConstraint(
        f"octet_length({column_name}) = {ULID_BYTES_LENGTH}",
        name=constraint_name,
    )
