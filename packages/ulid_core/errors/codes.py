"""Shared error code constants.

These constants are stable machine-readable identifiers for ULID failures.
Callers that normalize errors for transport should branch on codes rather than
exception messages.
"""

# Generic validation
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"

# Codec
INVALID_TEXT_LENGTH = "ULID_INVALID_TEXT_LENGTH"
INVALID_CHARACTER = "ULID_INVALID_CHARACTER"
INVALID_BINARY_LENGTH = "ULID_INVALID_BINARY_LENGTH"

# Construction
INVALID_TIMESTAMP = "ULID_INVALID_TIMESTAMP"
INVALID_PAYLOAD = "ULID_INVALID_PAYLOAD"

# Generation
CONFLICT = "CONFLICT"
PAYLOAD_OVERFLOW = "ULID_PAYLOAD_OVERFLOW"

# Internal
INTERNAL_ERROR = "INTERNAL_ERROR"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"
