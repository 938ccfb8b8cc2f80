"""Transport-agnostic error shape for ULID failures.

Boundary layers (HTTP handlers, RPC servers) convert exceptions into
``ErrorDetail`` with ``exception_to_error`` and serialize ``as_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ErrorCategory(str, Enum):
    """Coarse category used for status mapping at boundaries."""

    UNSPECIFIED = "unspecified"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error suitable for response payloads."""

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
            "metadata": dict(self.metadata),
        }
