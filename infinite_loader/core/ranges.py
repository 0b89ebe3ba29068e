"""Index range model and overscan calculation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndexRange:
    """Inclusive range of item indices. Empty when stop_index < start_index."""

    start_index: int
    stop_index: int

    @property
    def is_empty(self) -> bool:
        return self.stop_index < self.start_index

    @property
    def size(self) -> int:
        if self.is_empty:
            return 0
        return self.stop_index - self.start_index + 1

    def overlaps(self, other: "IndexRange") -> bool:
        if self.is_empty or other.is_empty:
            return False
        return (
            self.start_index <= other.stop_index
            and self.stop_index >= other.start_index
        )

    def indices(self) -> range:
        return range(self.start_index, self.stop_index + 1)


VisibleRange = IndexRange
OverscanRange = IndexRange
LoadRange = IndexRange

EMPTY_RANGE = IndexRange(0, -1)


def compute_overscan_range(
    visible: VisibleRange, threshold: int, item_count: int
) -> OverscanRange:
    """Pad the visible range by threshold items on each side.

    The result is clamped to ``[0, item_count - 1]``. A non-positive
    item_count gives an empty range.
    """
    if item_count <= 0:
        return EMPTY_RANGE

    threshold = max(0, threshold)
    return IndexRange(
        start_index=max(0, visible.start_index - threshold),
        stop_index=min(item_count - 1, visible.stop_index + threshold),
    )


def is_range_visible(load_range: LoadRange, visible: VisibleRange) -> bool:
    return load_range.overlaps(visible)
