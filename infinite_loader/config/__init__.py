"""Configuration management."""

from .settings import (
    DEFAULT_MINIMUM_BATCH_SIZE,
    DEFAULT_THRESHOLD,
    LoaderSettings,
    Settings,
    SettingsManager,
)

__all__ = [
    "DEFAULT_MINIMUM_BATCH_SIZE",
    "DEFAULT_THRESHOLD",
    "LoaderSettings",
    "Settings",
    "SettingsManager",
]
