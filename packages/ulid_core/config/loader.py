"""Configuration loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/ulid/ulid.yaml
4) Model defaults

Environment variable format:
- Prefix: ``ULID_``
- Nested keys: ``__`` separator
- Example: ``ULID_GENERATOR__CLOCK_REGRESSION=reset``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import _CONFIG_PATH, UlidSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> UlidSettings:
    """Resolve ``UlidSettings`` from every configured source."""
    token = _CONFIG_PATH.set(Path(config_path)) if config_path is not None else None
    try:
        return UlidSettings(**dict(cli_params or {}))
    finally:
        if token is not None:
            _CONFIG_PATH.reset(token)
