"""Tests for the monotonic ULID generator."""

from __future__ import annotations

import logging
import threading
from itertools import islice

import pytest

from packages.ulid_core.config import GeneratorSettings
from packages.ulid_core.errors import PayloadOverflow
from packages.ulid_core.ids import ULID, MonotonicGenerator, monotonic_ulid
from tests.helpers import ConstantSource, StepClock, ZeroSource

_LOGGER_NAME = "packages.ulid_core.ids.monotonic"


def test_same_millisecond_increments_payload(zero_source: ZeroSource) -> None:
    generator = MonotonicGenerator(zero_source, clock=lambda: 1_000)

    values = [generator.next() for _ in range(3)]

    assert [value.timestamp for value in values] == [1_000, 1_000, 1_000]
    assert [value.payload for value in values] == [
        bytes(10),
        bytes(9) + b"\x01",
        bytes(9) + b"\x02",
    ]


def test_increment_carries_across_bytes() -> None:
    generator = MonotonicGenerator(
        ConstantSource(bytes(7) + b"\x00\xff\xff"), clock=lambda: 5
    )

    generator.next()

    assert generator.next().payload == bytes(7) + b"\x01\x00\x00"


def test_new_millisecond_draws_fresh_payload() -> None:
    source = ConstantSource(b"\x10" * 10)
    generator = MonotonicGenerator(source, clock=StepClock(1, 1, 2))

    first, second, third = generator.next(), generator.next(), generator.next()

    assert source.calls == 2
    assert second.payload == b"\x10" * 9 + b"\x11"
    assert third.timestamp == 2
    assert third.payload == b"\x10" * 10
    assert first < second < third


def test_sequential_values_strictly_increase() -> None:
    generator = MonotonicGenerator()

    values = list(islice(generator, 2_000))

    assert all(left < right for left, right in zip(values, values[1:]))


def test_default_generator_shorthand_is_monotonic() -> None:
    first = monotonic_ulid()
    second = monotonic_ulid()

    assert first < second


def test_concurrent_callers_share_one_increasing_sequence(zero_source: ZeroSource) -> None:
    # A frozen clock makes every draw an increment of one shared counter.
    generator = MonotonicGenerator(zero_source, clock=lambda: 1_000)
    workers, per_worker = 8, 500
    results: dict[int, list[ULID]] = {}
    start = threading.Barrier(workers)

    def _draw(worker: int) -> None:
        start.wait()
        results[worker] = [generator.next() for _ in range(per_worker)]

    threads = [threading.Thread(target=_draw, args=(worker,)) for worker in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    combined = sorted(value for values in results.values() for value in values)
    assert [int(value) for value in combined] == [
        (1_000 << 80) | step for step in range(workers * per_worker)
    ]
    for values in results.values():
        assert all(left < right for left, right in zip(values, values[1:]))


def test_concurrent_callers_on_wall_clock_are_issued_in_global_order() -> None:
    generator = MonotonicGenerator()
    lock = threading.Lock()
    issued: list[ULID] = []

    def _draw() -> None:
        for _ in range(500):
            with lock:
                issued.append(generator.next())

    threads = [threading.Thread(target=_draw) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(issued) == 8 * 500
    assert all(left < right for left, right in zip(issued, issued[1:]))


def test_payload_overflow_raises_without_mutating_state() -> None:
    clock = StepClock(7, 7, 7, 8)
    generator = MonotonicGenerator(ConstantSource(b"\xff" * 10), clock=clock)

    first = generator.next()
    with pytest.raises(PayloadOverflow) as excinfo:
        generator.next()
    with pytest.raises(PayloadOverflow):
        generator.next()
    recovered = generator.next()

    assert excinfo.value.timestamp == 7
    assert first.payload == b"\xff" * 10
    assert recovered.timestamp == 8
    assert first < recovered


def test_payload_overflow_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    generator = MonotonicGenerator(ConstantSource(b"\xff" * 10), clock=lambda: 3)
    generator.next()

    with caplog.at_level(logging.WARNING, logger=_LOGGER_NAME):
        with pytest.raises(PayloadOverflow):
            generator.next()

    assert [record.levelno for record in caplog.records] == [logging.WARNING]
    assert "exhausted" in caplog.records[0].getMessage()


def test_clock_regression_clamps_by_default(
    zero_source: ZeroSource, caplog: pytest.LogCaptureFixture
) -> None:
    generator = MonotonicGenerator(zero_source, clock=StepClock(2_000, 1_000))

    with caplog.at_level(logging.WARNING, logger=_LOGGER_NAME):
        first = generator.next()
        second = generator.next()

    assert generator.clock_regression == "clamp"
    assert second.timestamp == 2_000
    assert second.payload == bytes(9) + b"\x01"
    assert first < second
    assert len(caplog.records) == 1
    assert "backwards" in caplog.records[0].getMessage()


def test_clock_regression_reset_policy_restarts_payload(zero_source: ZeroSource) -> None:
    generator = MonotonicGenerator(
        zero_source, clock=StepClock(2_000, 1_000), clock_regression="reset"
    )

    first = generator.next()
    second = generator.next()

    assert second.timestamp == 1_000
    assert second.payload == bytes(10)
    assert second < first


def test_success_path_does_not_log(
    zero_source: ZeroSource, caplog: pytest.LogCaptureFixture
) -> None:
    generator = MonotonicGenerator(zero_source, clock=StepClock(1, 1, 2))

    with caplog.at_level(logging.DEBUG, logger=_LOGGER_NAME):
        for _ in range(3):
            generator.next()

    assert caplog.records == []


def test_random_source_failure_propagates_and_keeps_state() -> None:
    class _FlakySource:
        def __init__(self) -> None:
            self.fail = False

        def randbytes(self, n: int) -> bytes:
            if self.fail:
                raise RuntimeError("entropy unavailable")
            return bytes(n)

    source = _FlakySource()
    generator = MonotonicGenerator(source, clock=StepClock(1, 2, 1))
    generator.next()
    source.fail = True

    with pytest.raises(RuntimeError, match="entropy unavailable"):
        generator.next()

    # The clock regressed back to 1 and clamping continues from the last commit.
    assert generator.next().payload == bytes(9) + b"\x01"


def test_unknown_clock_regression_policy_is_rejected() -> None:
    with pytest.raises(ValueError):
        MonotonicGenerator(clock_regression="ignore")  # type: ignore[arg-type]


def test_from_settings_applies_policy_and_source() -> None:
    generator = MonotonicGenerator.from_settings(
        GeneratorSettings(random_source="fast", clock_regression="reset"),
        clock=lambda: 10,
    )

    first = generator.next()
    second = generator.next()

    assert generator.clock_regression == "reset"
    assert first.timestamp == second.timestamp == 10
    assert int(second) == int(first) + 1
