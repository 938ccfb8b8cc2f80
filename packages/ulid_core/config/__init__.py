"""Public API for ULID configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    GeneratorSettings,
    LoggingSettings,
    UlidSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "GeneratorSettings",
    "LoggingSettings",
    "UlidSettings",
    "load_settings",
]
