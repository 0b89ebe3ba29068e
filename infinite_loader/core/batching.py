"""Grow unloaded runs into load batches of a minimum size."""

from typing import List, Optional, Sequence

from .protocols import IsItemLoaded
from .ranges import IndexRange, LoadRange, OverscanRange


def expand_range(
    unloaded: IndexRange,
    minimum_batch_size: int,
    item_count: int,
    is_item_loaded: Optional[IsItemLoaded] = None,
    grow_forward: bool = True,
    grow_backward: bool = True,
) -> LoadRange:
    """Grow ``unloaded`` towards ``minimum_batch_size`` items.

    Growth goes forward first, up to ``item_count - 1``, then backward down
    to 0 for whatever is still missing. When ``is_item_loaded`` is given,
    growth in a direction stops at the first already-loaded neighbour, so
    the batch can end up shorter than the minimum.
    """
    minimum_batch_size = max(1, minimum_batch_size)
    if unloaded.is_empty or unloaded.size >= minimum_batch_size:
        return unloaded

    start = unloaded.start_index
    stop = unloaded.stop_index

    if grow_forward:
        potential_stop = min(start + minimum_batch_size - 1, item_count - 1)
        while stop < potential_stop:
            index = stop + 1
            if is_item_loaded is not None and is_item_loaded(index):
                break
            stop = index

    if grow_backward:
        while stop - start + 1 < minimum_batch_size and start > 0:
            index = start - 1
            if is_item_loaded is not None and is_item_loaded(index):
                break
            start = index

    return IndexRange(start, stop)


def expand_ranges(
    unloaded_ranges: Sequence[IndexRange],
    overscan: OverscanRange,
    minimum_batch_size: int,
    item_count: int,
    is_item_loaded: IsItemLoaded,
) -> List[LoadRange]:
    """Expand every run of a scanned window independently.

    A run that stops short of the window edge is bounded by an item the
    scan already saw loaded, so only edges touching the window boundary
    are grown. Expanded runs are never merged.
    """
    return [
        expand_range(
            unloaded,
            minimum_batch_size,
            item_count,
            is_item_loaded=is_item_loaded,
            grow_forward=unloaded.stop_index == overscan.stop_index,
            grow_backward=unloaded.start_index == overscan.start_index,
        )
        for unloaded in unloaded_ranges
    ]
