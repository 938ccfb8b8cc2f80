"""Factory helpers for building ``ErrorDetail`` values per category."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail


def _detail(
    category: ErrorCategory,
    message: str,
    code: str,
    retryable: bool,
    metadata: Mapping[str, str] | None,
) -> ErrorDetail:
    return ErrorDetail(
        code=code,
        message=message,
        category=category,
        retryable=retryable,
        metadata=dict(metadata or {}),
    )


def validation_error(
    message: str,
    *,
    code: str = codes.VALIDATION_ERROR,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Rejected input; never retryable with the same arguments."""
    return _detail(ErrorCategory.VALIDATION, message, code, False, metadata)


def conflict_error(
    message: str,
    *,
    code: str = codes.CONFLICT,
    retryable: bool = False,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Generator state prevented the call from completing."""
    return _detail(ErrorCategory.CONFLICT, message, code, retryable, metadata)


def internal_error(
    message: str,
    *,
    code: str = codes.INTERNAL_ERROR,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Anything not attributable to caller input or generator state."""
    return _detail(ErrorCategory.INTERNAL, message, code, False, metadata)
