"""ULID value type, codecs, and generators."""

from .constants import BIN_LENGTH, MAX_TIME, MIN_TIME, PAYLOAD_LENGTH, STR_LENGTH
from .monotonic import DEFAULT_GENERATOR, MonotonicGenerator, monotonic_ulid
from .sources import RandomSource, SecureRandomSource, ThreadLocalRandomSource, wall_clock_ms
from .sqlalchemy import (
    ULID_BYTES_LENGTH,
    ULIDRepresentation,
    ULIDType,
    coerce_ulid,
    ulid_default,
    ulid_primary_key_column,
)
from .ulid import (
    ULID,
    generate_ulid_bytes,
    generate_ulid_str,
    require_ulid_bytes,
    ulid_bytes_to_str,
    ulid_str_to_bytes,
)

__all__ = [
    "BIN_LENGTH",
    "DEFAULT_GENERATOR",
    "MAX_TIME",
    "MIN_TIME",
    "MonotonicGenerator",
    "PAYLOAD_LENGTH",
    "RandomSource",
    "STR_LENGTH",
    "SecureRandomSource",
    "ThreadLocalRandomSource",
    "ULID",
    "ULID_BYTES_LENGTH",
    "ULIDRepresentation",
    "ULIDType",
    "coerce_ulid",
    "generate_ulid_bytes",
    "generate_ulid_str",
    "monotonic_ulid",
    "require_ulid_bytes",
    "ulid_bytes_to_str",
    "ulid_default",
    "ulid_primary_key_column",
    "ulid_str_to_bytes",
    "wall_clock_ms",
]
