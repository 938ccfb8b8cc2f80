"""Tests for ULID exception kinds and boundary error normalization."""

from __future__ import annotations

import pytest

from packages.ulid_core.errors import (
    ErrorCategory,
    InvalidBinaryLength,
    InvalidCharacter,
    InvalidPayload,
    InvalidTextLength,
    InvalidTimestamp,
    PayloadOverflow,
    ULIDError,
    codes,
    exception_to_error,
)
from packages.ulid_core.ids import ULID


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (InvalidTextLength(3), codes.INVALID_TEXT_LENGTH),
        (InvalidCharacter(ord("U"), 4), codes.INVALID_CHARACTER),
        (InvalidBinaryLength(15), codes.INVALID_BINARY_LENGTH),
        (InvalidTimestamp(-1), codes.INVALID_TIMESTAMP),
        (InvalidPayload(9), codes.INVALID_PAYLOAD),
    ],
)
def test_input_errors_normalize_to_validation(exc: ULIDError, code: str) -> None:
    """Input failures are value errors and map to non-retryable validation."""
    detail = exception_to_error(exc)

    assert isinstance(exc, ValueError)
    assert detail.code == code
    assert detail.category is ErrorCategory.VALIDATION
    assert detail.retryable is False
    assert detail.metadata["exception_type"] == type(exc).__name__


def test_invalid_character_metadata_names_position() -> None:
    with pytest.raises(InvalidCharacter) as excinfo:
        ULID.from_str("0000u000000000000000000000")

    detail = exception_to_error(excinfo.value)

    assert detail.metadata["position"] == "4"
    assert detail.metadata["codepoint"] == str(ord("u"))
    assert "position 4" in detail.message


def test_payload_overflow_is_retryable_conflict() -> None:
    exc = PayloadOverflow(1_234)

    detail = exception_to_error(exc)

    assert not isinstance(exc, ValueError)
    assert detail.code == codes.PAYLOAD_OVERFLOW
    assert detail.category is ErrorCategory.CONFLICT
    assert detail.retryable is True
    assert detail.metadata["timestamp"] == "1234"


def test_foreign_exceptions_fall_back_to_generic_codes() -> None:
    value_detail = exception_to_error(ValueError("bad"))
    runtime_detail = exception_to_error(RuntimeError())

    assert value_detail.code == codes.INVALID_ARGUMENT
    assert value_detail.category is ErrorCategory.VALIDATION
    assert runtime_detail.code == codes.UNEXPECTED_EXCEPTION
    assert runtime_detail.category is ErrorCategory.INTERNAL
    assert runtime_detail.message == "unexpected exception"


def test_error_detail_serializes_to_plain_mapping() -> None:
    detail = exception_to_error(InvalidTextLength(25))

    assert detail.as_dict() == {
        "code": codes.INVALID_TEXT_LENGTH,
        "message": "ULID string must be exactly 26 characters, got 25",
        "category": "validation",
        "retryable": False,
        "metadata": {"exception_type": "InvalidTextLength", "actual": "25"},
    }
