"""Batched on-demand loading for windowed lists."""

from .config import LoaderSettings, Settings, SettingsManager
from .core import IndexRange, ListRef, LoadRange, VariableSizeListRef, VisibleRange
from .loader import InfiniteLoader
from .managers import PendingRequest

__all__ = [
    "IndexRange",
    "InfiniteLoader",
    "ListRef",
    "LoadRange",
    "LoaderSettings",
    "PendingRequest",
    "Settings",
    "SettingsManager",
    "VariableSizeListRef",
    "VisibleRange",
]
