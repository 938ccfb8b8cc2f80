"""Exception normalization utilities for boundary error contracts."""

from __future__ import annotations

from . import codes
from .exceptions import PayloadOverflow, ULIDError
from .factories import conflict_error, internal_error, validation_error
from .types import ErrorDetail


def exception_to_error(exc: Exception) -> ErrorDetail:
    """Normalize a Python exception into an ``ErrorDetail``.

    ULID failures keep their own code and metadata. A payload overflow is
    retryable because the next millisecond starts a fresh payload.
    """
    metadata = {"exception_type": type(exc).__name__}

    if isinstance(exc, ULIDError):
        metadata.update(exc.metadata())
        if isinstance(exc, PayloadOverflow):
            return conflict_error(
                str(exc), code=exc.code, retryable=True, metadata=metadata
            )
        if isinstance(exc, ValueError):
            return validation_error(str(exc), code=exc.code, metadata=metadata)
        return internal_error(str(exc), code=exc.code, metadata=metadata)

    if isinstance(exc, ValueError):
        return validation_error(str(exc), code=codes.INVALID_ARGUMENT, metadata=metadata)

    return internal_error(
        str(exc) or "unexpected exception",
        code=codes.UNEXPECTED_EXCEPTION,
        metadata=metadata,
    )
