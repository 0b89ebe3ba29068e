"""Memoized state for skipping redundant load passes."""

from typing import Optional, Sequence, Tuple

from infinite_loader.core.ranges import IndexRange, LoadRange, VisibleRange


class MemoCacheManager:
    def __init__(self):
        self.last_rendered_start_index: Optional[int] = None
        self.last_rendered_stop_index: Optional[int] = None
        self.memoized_ranges: Tuple[LoadRange, ...] = ()

    @property
    def last_rendered_range(self) -> Optional[VisibleRange]:
        if (
            self.last_rendered_start_index is None
            or self.last_rendered_stop_index is None
        ):
            return None
        return IndexRange(
            self.last_rendered_start_index, self.last_rendered_stop_index
        )

    def remember_rendered(self, start_index: int, stop_index: int) -> None:
        self.last_rendered_start_index = start_index
        self.last_rendered_stop_index = stop_index

    def should_skip(self, load_ranges: Sequence[LoadRange]) -> bool:
        return tuple(load_ranges) == self.memoized_ranges

    def remember(self, load_ranges: Sequence[LoadRange]) -> None:
        self.memoized_ranges = tuple(load_ranges)

    def reset(self) -> None:
        self.memoized_ranges = ()
