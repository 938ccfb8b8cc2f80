"""Canonical logging field names.

These constants define a stable key set for structured logs and context
propagation so generator events keep one shape across hosts.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Generator fields.
LAST_TIMESTAMP_MS = "last_timestamp_ms"
OBSERVED_TIMESTAMP_MS = "observed_timestamp_ms"
CLOCK_REGRESSION_POLICY = "clock_regression_policy"
CLOCK_REGRESSION_EVENT = "ulid_clock_regression"
PAYLOAD_OVERFLOW_EVENT = "ulid_payload_overflow"

# Common host-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
