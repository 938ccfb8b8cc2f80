"""Pytest configuration for the ULID test suite."""

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from packages.ulid_core.logging import ContextFilter, clear_context  # noqa: E402
from tests.helpers import ZeroSource  # noqa: E402


@pytest.fixture
def zero_source() -> ZeroSource:
    return ZeroSource()


@pytest.fixture(autouse=True)
def _isolate_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging and clear bound context."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if any(isinstance(item, ContextFilter) for item in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)
    clear_context()
