"""Exception kinds raised by the ULID codec and generators.

Every exception carries a stable ``code`` and a ``metadata()`` mapping so
boundary layers can normalize failures without parsing messages. Input errors
also subclass ``ValueError``.
"""

from __future__ import annotations

from typing import ClassVar

from . import codes


class ULIDError(Exception):
    """Base class for every ULID failure."""

    code: ClassVar[str] = codes.INTERNAL_ERROR

    def metadata(self) -> dict[str, str]:
        """Return structured, string-valued details about the failure."""
        return {}


class InvalidTextLength(ULIDError, ValueError):
    """Text decoder input was not exactly 26 code units."""

    code = codes.INVALID_TEXT_LENGTH

    def __init__(self, actual: int) -> None:
        super().__init__(f"ULID string must be exactly 26 characters, got {actual}")
        self.actual = actual

    def metadata(self) -> dict[str, str]:
        return {"actual": str(self.actual)}


class InvalidCharacter(ULIDError, ValueError):
    """Text decoder hit a code unit outside the accepted Crockford set."""

    code = codes.INVALID_CHARACTER

    def __init__(self, codepoint: int, position: int) -> None:
        super().__init__(
            f"Invalid ULID character {chr(codepoint)!r} (U+{codepoint:04X}) "
            f"at position {position}"
        )
        self.codepoint = codepoint
        self.position = position

    def metadata(self) -> dict[str, str]:
        return {"codepoint": str(self.codepoint), "position": str(self.position)}


class InvalidBinaryLength(ULIDError, ValueError):
    """Binary decoder input was not exactly 16 bytes."""

    code = codes.INVALID_BINARY_LENGTH

    def __init__(self, actual: int) -> None:
        super().__init__(f"ULID bytes must be exactly 16 bytes, got {actual}")
        self.actual = actual

    def metadata(self) -> dict[str, str]:
        return {"actual": str(self.actual)}


class InvalidTimestamp(ULIDError, ValueError):
    """Timestamp outside the unsigned 48-bit millisecond range."""

    code = codes.INVALID_TIMESTAMP

    def __init__(self, value: int) -> None:
        super().__init__(f"Timestamp {value} is outside the ULID 48-bit range")
        self.value = value

    def metadata(self) -> dict[str, str]:
        return {"value": str(self.value)}


class InvalidPayload(ULIDError, ValueError):
    """Payload was not exactly 10 bytes."""

    code = codes.INVALID_PAYLOAD

    def __init__(self, length: int) -> None:
        super().__init__(f"ULID payload must be exactly 10 bytes, got {length}")
        self.length = length

    def metadata(self) -> dict[str, str]:
        return {"length": str(self.length)}


class PayloadOverflow(ULIDError):
    """Monotonic payload exhausted all 2**80 values within one millisecond."""

    code = codes.PAYLOAD_OVERFLOW

    def __init__(self, timestamp: int) -> None:
        super().__init__(f"ULID payload overflowed within millisecond {timestamp}")
        self.timestamp = timestamp

    def metadata(self) -> dict[str, str]:
        return {"timestamp": str(self.timestamp)}
