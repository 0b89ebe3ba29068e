"""Scan an overscan window for contiguous runs of unloaded items."""

from typing import List, Optional

from .protocols import IsItemLoaded
from .ranges import IndexRange, OverscanRange


def scan_for_unloaded_ranges(
    overscan: OverscanRange, is_item_loaded: IsItemLoaded
) -> List[IndexRange]:
    """Return the maximal unloaded runs inside ``overscan``.

    ``is_item_loaded`` is called exactly once for every index of the
    window, in ascending order, even after the first gap has been found.
    """
    unloaded_ranges: List[IndexRange] = []
    run_start: Optional[int] = None
    run_stop: Optional[int] = None

    for index in overscan.indices():
        if not is_item_loaded(index):
            if run_start is None:
                run_start = index
            run_stop = index
        elif run_start is not None:
            unloaded_ranges.append(IndexRange(run_start, run_stop))
            run_start = run_stop = None

    if run_start is not None:
        unloaded_ranges.append(IndexRange(run_start, run_stop))

    return unloaded_ranges
