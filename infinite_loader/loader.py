"""Infinite Loader - Loads unloaded items around the visible window of a list."""

import logging
from typing import List, Optional

from infinite_loader.config.settings import (
    DEFAULT_MINIMUM_BATCH_SIZE,
    DEFAULT_THRESHOLD,
    LoaderSettings,
)
from infinite_loader.core.batching import expand_ranges
from infinite_loader.core.protocols import (
    IsItemLoaded,
    ListRef,
    LoadMoreItems,
    VariableSizeListRef,
)
from infinite_loader.core.ranges import (
    IndexRange,
    LoadRange,
    VisibleRange,
    compute_overscan_range,
)
from infinite_loader.core.scanner import scan_for_unloaded_ranges
from infinite_loader.managers.memo_cache_manager import MemoCacheManager
from infinite_loader.managers.request_dispatcher import (
    PendingRequest,
    RequestDispatcher,
)

logger = logging.getLogger("InfiniteLoader.InfiniteLoader")

INVALID_SIGNATURE_WARNING = (
    "Invalid on_items_rendered signature; "
    "please refer to InfiniteLoader documentation."
)
INVALID_LIST_REF_WARNING = (
    "Invalid list ref; please refer to InfiniteLoader documentation."
)
DEPRECATED_LOAD_MORE_ROWS_WARNING = (
    'InfiniteLoader "load_more_rows" argument has been renamed to '
    '"load_more_items".'
)


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class InfiniteLoader:
    """Coordinates batched loading for a windowed list.

    The list renderer calls :meth:`on_items_rendered` whenever its visible
    window changes. Each call scans the window plus ``threshold`` items on
    either side, groups unloaded items into batches of at least
    ``minimum_batch_size`` and hands each new batch to ``load_more_items``.
    When a load completes while its range is still visible, the attached
    list ref is refreshed.
    """

    def __init__(
        self,
        is_item_loaded: IsItemLoaded,
        load_more_items: Optional[LoadMoreItems] = None,
        item_count: int = 0,
        threshold: int = DEFAULT_THRESHOLD,
        minimum_batch_size: int = DEFAULT_MINIMUM_BATCH_SIZE,
        list_ref: Optional[ListRef] = None,
        load_more_rows: Optional[LoadMoreItems] = None,
    ):
        """Initialize InfiniteLoader.

        Args:
            is_item_loaded: Predicate telling whether an index is loaded
            load_more_items: Loader called with inclusive (start, stop) bounds
            item_count: Number of items in the list
            threshold: Items to scan beyond each edge of the visible range
            minimum_batch_size: Smallest number of items per load
            list_ref: Renderer to refresh once visible items have loaded
            load_more_rows: Deprecated name for load_more_items
        """
        if load_more_rows is not None:
            logger.warning(DEPRECATED_LOAD_MORE_ROWS_WARNING)
            if load_more_items is None:
                load_more_items = load_more_rows
        if load_more_items is None:
            raise TypeError("InfiniteLoader requires a load_more_items callable")

        self.is_item_loaded = is_item_loaded
        self.settings = LoaderSettings(
            threshold=threshold,
            minimum_batch_size=minimum_batch_size,
            item_count=item_count,
        )
        self.list_ref = list_ref
        self._list_ref_checked = False

        self._memo = MemoCacheManager()
        self._dispatcher = RequestDispatcher(
            load_more_items=load_more_items,
            get_visible_range=lambda: self._memo.last_rendered_range,
            on_range_loaded=self._refresh_list,
            on_range_failed=self._forget_requested_ranges,
        )

    @classmethod
    def from_settings(
        cls,
        settings: LoaderSettings,
        is_item_loaded: IsItemLoaded,
        load_more_items: LoadMoreItems,
        list_ref: Optional[ListRef] = None,
    ) -> "InfiniteLoader":
        return cls(
            is_item_loaded=is_item_loaded,
            load_more_items=load_more_items,
            item_count=settings.item_count,
            threshold=settings.threshold,
            minimum_batch_size=settings.minimum_batch_size,
            list_ref=list_ref,
        )

    # Configuration

    @property
    def item_count(self) -> int:
        return self.settings.item_count

    @item_count.setter
    def item_count(self, value: int) -> None:
        self._update_settings(item_count=value)

    @property
    def threshold(self) -> int:
        return self.settings.threshold

    @threshold.setter
    def threshold(self, value: int) -> None:
        self._update_settings(threshold=value)

    @property
    def minimum_batch_size(self) -> int:
        return self.settings.minimum_batch_size

    @minimum_batch_size.setter
    def minimum_batch_size(self, value: int) -> None:
        self._update_settings(minimum_batch_size=value)

    def _update_settings(self, **changes) -> None:
        self.settings = LoaderSettings(**{**self.settings.model_dump(), **changes})

    @property
    def load_more_items(self) -> LoadMoreItems:
        return self._dispatcher.load_more_items

    @load_more_items.setter
    def load_more_items(self, value: LoadMoreItems) -> None:
        self._dispatcher.load_more_items = value

    # Renderer interface

    def attach_list_ref(self, list_ref: Optional[ListRef]) -> None:
        self.list_ref = list_ref

    @property
    def last_rendered_range(self) -> Optional[VisibleRange]:
        return self._memo.last_rendered_range

    def on_items_rendered(
        self, visible_start_index=None, visible_stop_index=None, **kwargs
    ) -> None:
        """Handle a visible range change from the list renderer.

        Extra keyword arguments (overscan indices and the like) are accepted
        and ignored. A malformed signal is reported and skipped.
        """
        if not (
            _is_index(visible_start_index)
            and _is_index(visible_stop_index)
            and visible_start_index <= visible_stop_index
        ):
            logger.warning(INVALID_SIGNATURE_WARNING)
            return

        if not self._list_ref_checked:
            self._list_ref_checked = True
            if self.list_ref is None:
                logger.warning(INVALID_LIST_REF_WARNING)

        self._memo.remember_rendered(visible_start_index, visible_stop_index)
        self._ensure_items_loaded(visible_start_index, visible_stop_index)

    def reset_load_more_items_cache(self, auto_reload: bool = False) -> None:
        """Forget which ranges were already requested.

        With ``auto_reload`` the last rendered range is reconciled again right
        away, re-issuing loads even for ranges that are still in flight.
        """
        logger.info(f"Resetting load cache (auto_reload={auto_reload})")
        self._memo.reset()

        visible = self._memo.last_rendered_range
        if auto_reload and visible is not None:
            self._ensure_items_loaded(
                visible.start_index, visible.stop_index, force=True
            )

    reset = reset_load_more_items_cache

    # Pending loads

    @property
    def pending_requests(self) -> List[PendingRequest]:
        return self._dispatcher.pending_requests

    async def wait_for_pending(self) -> None:
        await self._dispatcher.wait_for_pending()

    # Reconciliation

    def _ensure_items_loaded(
        self, start_index: int, stop_index: int, force: bool = False
    ) -> None:
        overscan = compute_overscan_range(
            IndexRange(start_index, stop_index), self.threshold, self.item_count
        )
        unloaded_ranges = scan_for_unloaded_ranges(overscan, self.is_item_loaded)
        load_ranges = expand_ranges(
            unloaded_ranges,
            overscan,
            self.minimum_batch_size,
            self.item_count,
            self.is_item_loaded,
        )

        if self._memo.should_skip(load_ranges):
            logger.debug(
                f"Unloaded ranges unchanged for {start_index}-{stop_index}, skipping"
            )
            return

        self._memo.remember(load_ranges)
        try:
            self._dispatcher.dispatch(load_ranges, force=force)
        except Exception:
            self._forget_requested_ranges()
            raise

    def _forget_requested_ranges(
        self, load_range: Optional[LoadRange] = None
    ) -> None:
        # Ranges that were never handed to the loader stay eligible next pass.
        self._memo.reset()

    def _refresh_list(self, load_range: LoadRange) -> None:
        list_ref = self.list_ref
        if list_ref is None:
            return

        if isinstance(list_ref, VariableSizeListRef):
            list_ref.reset_after_index(load_range.start_index, True)
        else:
            list_ref.force_update()
