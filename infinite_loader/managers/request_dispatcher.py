"""Request Dispatcher - Issues batched loads and tracks them until they settle."""

import asyncio
import concurrent.futures
import inspect
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Sequence

from infinite_loader.core.protocols import LoadMoreItems
from infinite_loader.core.ranges import LoadRange, VisibleRange, is_range_visible

logger = logging.getLogger("InfiniteLoader.RequestDispatcher")


@dataclass(eq=False)
class PendingRequest:
    range: LoadRange
    future: asyncio.Future


class RequestDispatcher:
    """Calls the external loader once per batch and reacts to completions."""

    def __init__(
        self,
        load_more_items: LoadMoreItems,
        get_visible_range: Callable[[], Optional[VisibleRange]],
        on_range_loaded: Callable[[LoadRange], None],
        on_range_failed: Optional[Callable[[LoadRange], None]] = None,
    ):
        """Initialize RequestDispatcher.

        Args:
            load_more_items: External loader called with inclusive bounds
            get_visible_range: Returns the visible range at the time it is called
            on_range_loaded: Refresh hook for a completed, still visible range
            on_range_failed: Called when a range could not be issued to the loader
        """
        self.load_more_items = load_more_items
        self.get_visible_range = get_visible_range
        self.on_range_loaded = on_range_loaded
        self.on_range_failed = on_range_failed
        self._pending: List[PendingRequest] = []

    @property
    def pending_requests(self) -> List[PendingRequest]:
        return list(self._pending)

    def is_pending(self, load_range: LoadRange) -> bool:
        return any(request.range == load_range for request in self._pending)

    def dispatch(
        self, load_ranges: Sequence[LoadRange], force: bool = False
    ) -> List[PendingRequest]:
        """Issue one loader call per range and return the new pending requests.

        Ranges equal to a request that is still in flight are skipped
        unless ``force`` is set.
        """
        issued = []
        for load_range in load_ranges:
            if not force and self.is_pending(load_range):
                logger.debug(
                    f"Skipping {load_range.start_index}-{load_range.stop_index}, "
                    "already pending"
                )
                continue

            logger.debug(
                f"Loading items {load_range.start_index}-{load_range.stop_index}"
            )
            try:
                result = self.load_more_items(
                    load_range.start_index, load_range.stop_index
                )
            except Exception as error:
                self._log_failure(load_range, error)
                self._notify_failed(load_range)
                continue

            if result is None:
                continue

            try:
                future = self._as_future(result)
            except TypeError:
                self._notify_failed(load_range)
                raise
            if future is None:
                logger.warning(
                    "No running event loop, load of items "
                    f"{load_range.start_index}-{load_range.stop_index} is not tracked"
                )
                self._notify_failed(load_range)
                continue

            request = PendingRequest(range=load_range, future=future)
            self._pending.append(request)
            request.future.add_done_callback(partial(self._on_settled, request))
            issued.append(request)
        return issued

    async def wait_for_pending(self) -> None:
        """Wait for every in-flight load; the first loader failure is re-raised."""
        futures = [request.future for request in self._pending]
        if futures:
            await asyncio.gather(*futures)

    def _as_future(self, result) -> Optional[asyncio.Future]:
        """Schedule a loader result on the running loop.

        Returns None when no loop is running; the result is then left
        untracked.
        """
        is_thread_future = isinstance(result, concurrent.futures.Future)
        if not (is_thread_future or inspect.isawaitable(result)):
            raise TypeError(
                f"load_more_items must return an awaitable or None, "
                f"got {type(result).__name__}"
            )

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(result):
                result.close()
            return None

        if is_thread_future:
            return asyncio.wrap_future(result, loop=loop)
        return asyncio.ensure_future(result, loop=loop)

    def _notify_failed(self, load_range: LoadRange) -> None:
        if self.on_range_failed is not None:
            self.on_range_failed(load_range)

    def _log_failure(self, load_range: LoadRange, error: BaseException) -> None:
        logger.warning(
            f"Load of items {load_range.start_index}-{load_range.stop_index} "
            f"failed: {type(error).__name__}: {error}"
        )

    def _on_settled(self, request: PendingRequest, future: asyncio.Future) -> None:
        if request in self._pending:
            self._pending.remove(request)

        load_range = request.range
        if future.cancelled():
            logger.info(
                f"Load of items {load_range.start_index}-{load_range.stop_index} "
                "was cancelled"
            )
            return

        error = future.exception()
        if error is not None:
            self._log_failure(load_range, error)
            return

        visible = self.get_visible_range()
        if visible is not None and is_range_visible(load_range, visible):
            self.on_range_loaded(load_range)
        else:
            logger.debug(
                f"Items {load_range.start_index}-{load_range.stop_index} loaded "
                "outside the visible range, skipping refresh"
            )
