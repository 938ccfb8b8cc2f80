"""Public error API for ULID operations."""

from . import codes
from .exceptions import (
    InvalidBinaryLength,
    InvalidCharacter,
    InvalidPayload,
    InvalidTextLength,
    InvalidTimestamp,
    PayloadOverflow,
    ULIDError,
)
from .factories import conflict_error, internal_error, validation_error
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "InvalidBinaryLength",
    "InvalidCharacter",
    "InvalidPayload",
    "InvalidTextLength",
    "InvalidTimestamp",
    "PayloadOverflow",
    "ULIDError",
    "codes",
    "conflict_error",
    "exception_to_error",
    "internal_error",
    "validation_error",
]
