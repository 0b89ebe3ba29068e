"""Range algorithms and collaborator interfaces."""

from .batching import expand_range, expand_ranges
from .protocols import IsItemLoaded, ListRef, LoadMoreItems, VariableSizeListRef
from .ranges import (
    EMPTY_RANGE,
    IndexRange,
    LoadRange,
    OverscanRange,
    VisibleRange,
    compute_overscan_range,
    is_range_visible,
)
from .scanner import scan_for_unloaded_ranges

__all__ = [
    "EMPTY_RANGE",
    "IndexRange",
    "IsItemLoaded",
    "ListRef",
    "LoadMoreItems",
    "LoadRange",
    "OverscanRange",
    "VariableSizeListRef",
    "VisibleRange",
    "compute_overscan_range",
    "expand_range",
    "expand_ranges",
    "is_range_visible",
    "scan_for_unloaded_ranges",
]
