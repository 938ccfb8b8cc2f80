"""Deterministic random sources and clocks shared by ULID tests."""

from __future__ import annotations


class ZeroSource:
    """Random source returning only zero bytes."""

    def randbytes(self, n: int) -> bytes:
        return bytes(n)


class ConstantSource:
    """Random source repeating a fixed pattern and counting draws."""

    def __init__(self, value: bytes) -> None:
        self.value = value
        self.calls = 0

    def randbytes(self, n: int) -> bytes:
        self.calls += 1
        return self.value[:n]


class StepClock:
    """Clock replaying scripted millisecond readings, repeating the last one."""

    def __init__(self, *readings: int) -> None:
        self._readings = list(readings)

    def __call__(self) -> int:
        if len(self._readings) > 1:
            return self._readings.pop(0)
        return self._readings[0]
