"""Shared ULID layout constants.

This module centralizes the scalar sizes and ranges used by the codec,
generators, and SQLAlchemy adapters so all ULID-aware code relies on one
canonical naming source.
"""

STR_LENGTH = 26
BIN_LENGTH = 16
PAYLOAD_LENGTH = 10

MIN_TIME = 0
MAX_TIME = (1 << 48) - 1
MAX_PAYLOAD = (1 << 80) - 1
MAX_ULID_INT = (1 << 128) - 1
