"""Pluggable random sources and the wall clock used by ULID generators."""

from __future__ import annotations

import random
import secrets
import threading
import time
from typing import Callable, Protocol

Clock = Callable[[], int]


class RandomSource(Protocol):
    """Byte-fill capability; ``random.Random`` satisfies it structurally."""

    def randbytes(self, n: int) -> bytes:
        """Return ``n`` random bytes."""


class ThreadLocalRandomSource:
    """Fast non-blocking source holding one ``random.Random`` per thread."""

    def __init__(self) -> None:
        self._local = threading.local()

    def randbytes(self, n: int) -> bytes:
        generator = getattr(self._local, "generator", None)
        if generator is None:
            generator = random.Random()
            self._local.generator = generator
        return generator.randbytes(n)


class SecureRandomSource:
    """Cryptographically strong source backed by ``secrets``."""

    def randbytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


def wall_clock_ms() -> int:
    """Return Unix time in whole milliseconds."""
    return time.time_ns() // 1_000_000
