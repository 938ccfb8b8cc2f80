"""Monotonic ULID generation.

Within one millisecond the payload of the previous ULID is incremented as an
80-bit big-endian integer, so successive values from one generator instance are
strictly increasing. A fresh random payload is drawn whenever the millisecond
advances.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Literal

from packages.ulid_core.errors.exceptions import PayloadOverflow
from packages.ulid_core.logging import fields, get_logger, log_context

from .constants import MAX_PAYLOAD, PAYLOAD_LENGTH
from .sources import (
    Clock,
    RandomSource,
    SecureRandomSource,
    ThreadLocalRandomSource,
    wall_clock_ms,
)
from .ulid import ULID

if TYPE_CHECKING:
    from packages.ulid_core.config import GeneratorSettings

ClockRegressionPolicy = Literal["clamp", "reset"]

_LOGGER = get_logger(__name__)


class MonotonicGenerator:
    """Thread-safe generator of strictly increasing ULIDs.

    ``clock_regression`` controls what happens when the clock reads earlier
    than the last emitted timestamp: ``"clamp"`` keeps the last timestamp and
    increments the payload, ``"reset"`` starts over at the earlier timestamp
    with a fresh payload (which may break ordering).
    """

    def __init__(
        self,
        source: RandomSource | None = None,
        *,
        clock: Clock | None = None,
        clock_regression: ClockRegressionPolicy = "clamp",
    ) -> None:
        if clock_regression not in ("clamp", "reset"):
            raise ValueError(f"Unknown clock regression policy: {clock_regression!r}")
        self._source = source if source is not None else SecureRandomSource()
        self._clock = clock or wall_clock_ms
        self._clock_regression = clock_regression
        self._lock = threading.Lock()
        self._last_time_ms: int | None = None
        self._last_payload = 0

    @classmethod
    def from_settings(
        cls, settings: GeneratorSettings, *, clock: Clock | None = None
    ) -> MonotonicGenerator:
        """Build a generator from resolved ``GeneratorSettings``."""
        source: RandomSource
        if settings.random_source == "fast":
            source = ThreadLocalRandomSource()
        else:
            source = SecureRandomSource()
        return cls(source, clock=clock, clock_regression=settings.clock_regression)

    @property
    def clock_regression(self) -> ClockRegressionPolicy:
        return self._clock_regression

    def next(self) -> ULID:
        """Return the next ULID, strictly greater than any previously returned."""
        result: ULID | None = None
        with self._lock:
            observed = self._clock()
            last = self._last_time_ms
            regressed = last is not None and observed < last
            now = last if regressed and self._clock_regression == "clamp" else observed

            if now == last:
                payload = self._last_payload + 1
                # State is only committed once the increment is known to fit.
                if payload <= MAX_PAYLOAD:
                    result = ULID.from_int((now << 80) | payload)
                    self._last_payload = payload
            else:
                fresh = self._source.randbytes(PAYLOAD_LENGTH)
                result = ULID.from_timestamp_and_payload(now, fresh)
                self._last_time_ms = now
                self._last_payload = int.from_bytes(result.payload, byteorder="big")

        if regressed:
            self._log_clock_regression(last, observed)
        if result is None:
            with log_context(
                {fields.EVENT: fields.PAYLOAD_OVERFLOW_EVENT, fields.LAST_TIMESTAMP_MS: now}
            ):
                _LOGGER.warning("ULID payload exhausted within one millisecond")
            raise PayloadOverflow(now)
        return result

    def __iter__(self) -> MonotonicGenerator:
        return self

    def __next__(self) -> ULID:
        return self.next()

    def _log_clock_regression(self, last: int, observed: int) -> None:
        with log_context(
            {
                fields.EVENT: fields.CLOCK_REGRESSION_EVENT,
                fields.LAST_TIMESTAMP_MS: last,
                fields.OBSERVED_TIMESTAMP_MS: observed,
                fields.CLOCK_REGRESSION_POLICY: self._clock_regression,
            }
        ):
            _LOGGER.warning("Wall clock moved backwards during ULID generation")


DEFAULT_GENERATOR = MonotonicGenerator(SecureRandomSource())


def monotonic_ulid() -> ULID:
    """Return the next ULID from the process-wide monotonic generator."""
    return DEFAULT_GENERATOR.next()
