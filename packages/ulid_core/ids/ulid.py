"""ULID value type and codecs.

A ULID is 128 bits: a 48-bit Unix millisecond timestamp followed by an 80-bit
payload. The binary form is the 16-byte big-endian serialization, identical to
the UUID byte layout. The canonical string form is 26 Crockford Base32
characters encoding 130 bits whose top two are always zero.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from packages.ulid_core.errors.exceptions import (
    InvalidBinaryLength,
    InvalidPayload,
    InvalidTextLength,
    InvalidTimestamp,
)

from .constants import (
    BIN_LENGTH,
    MAX_TIME,
    MAX_ULID_INT,
    MIN_TIME,
    PAYLOAD_LENGTH,
    STR_LENGTH,
)
from .crockford import decode_str, encode_int
from .sources import Clock, RandomSource, SecureRandomSource, ThreadLocalRandomSource, wall_clock_ms

_UINT64_LIMIT = 1 << 64
_UINT64_MASK = _UINT64_LIMIT - 1

_DEFAULT_SOURCE = ThreadLocalRandomSource()
_SECURE_SOURCE = SecureRandomSource()


@dataclass(frozen=True, order=True, repr=False)
class ULID:
    """Immutable 128-bit identifier stored as two unsigned 64-bit halves.

    Ordering compares ``msb`` then ``lsb``, which matches unsigned lexicographic
    order over the binary form and over the canonical string form.
    """

    msb: int
    lsb: int

    def __post_init__(self) -> None:
        for name in ("msb", "lsb"):
            half = getattr(self, name)
            if not 0 <= half < _UINT64_LIMIT:
                raise ValueError(f"{name} must be an unsigned 64-bit integer")

    # construction

    @classmethod
    def from_int(cls, value: int) -> ULID:
        """Build from a 128-bit unsigned integer."""
        if not 0 <= value <= MAX_ULID_INT:
            raise ValueError("ULID value exceeds 128-bit range")
        return cls(value >> 64, value & _UINT64_MASK)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> ULID:
        """Decode the 16-byte big-endian binary form."""
        raw = memoryview(data).tobytes()
        if len(raw) != BIN_LENGTH:
            raise InvalidBinaryLength(len(raw))
        return cls.from_int(int.from_bytes(raw, byteorder="big", signed=False))

    @classmethod
    def from_str(cls, value: str) -> ULID:
        """Decode 26 Crockford Base32 characters.

        Decoding is case-insensitive and accepts ``I``/``L``/``O`` aliases.
        The two bits above the 128-bit value are discarded, so a first symbol
        of ``8`` or higher is truncated rather than rejected.
        """
        if not isinstance(value, str):
            raise TypeError(f"ULID text must be str, not {type(value).__name__}")
        if len(value) != STR_LENGTH:
            raise InvalidTextLength(len(value))
        return cls.from_int(decode_str(value) & MAX_ULID_INT)

    @classmethod
    def from_timestamp_and_payload(
        cls, timestamp: int, payload: bytes | bytearray | memoryview
    ) -> ULID:
        """Compose a ULID from a millisecond timestamp and 10 payload bytes."""
        if not MIN_TIME <= timestamp <= MAX_TIME:
            raise InvalidTimestamp(timestamp)
        return cls._compose(timestamp, payload)

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> ULID:
        """Reinterpret a UUID's 16 bytes as a ULID."""
        return cls.from_int(value.int)

    @classmethod
    def from_uuid_bytes(cls, data: bytes | bytearray | memoryview) -> ULID:
        """Reinterpret 16 UUID-ordered bytes as a ULID."""
        return cls.from_bytes(data)

    @classmethod
    def random(cls, source: RandomSource | None = None, *, clock: Clock | None = None) -> ULID:
        """Generate a ULID from the wall clock and ``source``.

        The timestamp is not range checked; the payload length returned by the
        source is.
        """
        timestamp = (clock or wall_clock_ms)()
        payload = (source or _DEFAULT_SOURCE).randbytes(PAYLOAD_LENGTH)
        return cls._compose(timestamp, payload)

    @classmethod
    def secure(cls, *, clock: Clock | None = None) -> ULID:
        """Generate a ULID with a cryptographically strong payload."""
        return cls.random(_SECURE_SOURCE, clock=clock)

    @classmethod
    def _compose(cls, timestamp: int, payload: bytes | bytearray | memoryview) -> ULID:
        raw = memoryview(payload).tobytes()
        if len(raw) != PAYLOAD_LENGTH:
            raise InvalidPayload(len(raw))
        number = (timestamp << 80) | int.from_bytes(raw, byteorder="big", signed=False)
        return cls.from_int(number & MAX_ULID_INT)

    # accessors

    @property
    def timestamp(self) -> int:
        """Unix time in milliseconds held in the top 48 bits."""
        return self.msb >> 16

    @property
    def payload(self) -> bytes:
        """Low 80 bits as 10 big-endian bytes."""
        return self.to_bytes()[BIN_LENGTH - PAYLOAD_LENGTH :]

    def to_datetime(self) -> datetime:
        """Return the timestamp as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000, tz=UTC)

    # codecs

    def to_bytes(self) -> bytes:
        """Return the 16-byte big-endian binary form."""
        return int(self).to_bytes(BIN_LENGTH, byteorder="big", signed=False)

    def to_str(self) -> str:
        """Return the canonical 26-character string form."""
        return encode_int(int(self), STR_LENGTH)

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(int=int(self))

    def to_uuid_bytes(self) -> bytes:
        return self.to_bytes()

    def __int__(self) -> int:
        return (self.msb << 64) | self.lsb

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"ULID({self.to_str()!r})"


def ulid_str_to_bytes(value: str) -> bytes:
    """Decode a ULID string, ignoring surrounding whitespace, into 16 bytes."""
    return ULID.from_str(value.strip()).to_bytes()


def ulid_bytes_to_str(value: bytes) -> str:
    """Encode 16-byte big-endian ULID into canonical 26-char Base32 string."""
    return ULID.from_bytes(value).to_str()


def generate_ulid_bytes(*, timestamp_ms: int | None = None) -> bytes:
    """Generate a new ULID as canonical 16-byte big-endian binary.

    The payload is drawn from a cryptographically secure source. An explicit
    ``timestamp_ms`` must fit the 48-bit range.
    """
    if timestamp_ms is None:
        return ULID.secure().to_bytes()
    payload = _SECURE_SOURCE.randbytes(PAYLOAD_LENGTH)
    return ULID.from_timestamp_and_payload(int(timestamp_ms), payload).to_bytes()


def generate_ulid_str(*, timestamp_ms: int | None = None) -> str:
    """Generate a new ULID in canonical 26-char string format."""
    return ulid_bytes_to_str(generate_ulid_bytes(timestamp_ms=timestamp_ms))


def require_ulid_bytes(value: object, *, field_name: str = "id") -> bytes:
    """Validate and normalize a value as canonical 16-byte ULID binary."""
    if isinstance(value, ULID):
        return value.to_bytes()
    if isinstance(value, (bytes, bytearray)) and len(value) == BIN_LENGTH:
        return bytes(value)
    raise ValueError(f"{field_name} must be 16-byte ULID binary")
