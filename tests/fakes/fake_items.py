"""Fake item predicate and loader for testing."""
import asyncio
from typing import Callable, List, Optional, Set, Tuple


class RecordingIsItemLoaded:
    """is_item_loaded predicate that records every index it is asked about."""

    def __init__(self, predicate: Optional[Callable[[int], bool]] = None):
        """
        Initialize the predicate.

        Args:
            predicate: Overrides the default lookup in ``loaded``
        """
        self.loaded: Set[int] = set()
        self.calls: List[int] = []
        self._predicate = predicate

    def __call__(self, index: int) -> bool:
        self.calls.append(index)
        if self._predicate is not None:
            return self._predicate(index)
        return index in self.loaded


class FakeLoadMoreItems:
    """
    load_more_items fake.

    Every call marks its range as loaded on the given predicate, like a
    backend filling its cache before the request settles.

    Modes:
        sync: returns None
        auto: returns an already resolved future
        manual: returns a pending future, resolved through resolve()/fail()
    """

    def __init__(
        self,
        is_item_loaded: Optional[RecordingIsItemLoaded] = None,
        mode: str = "sync",
    ):
        self.is_item_loaded = is_item_loaded
        self.mode = mode
        self.calls: List[Tuple[int, int]] = []
        self.futures: List[asyncio.Future] = []

    def __call__(self, start_index: int, stop_index: int):
        self.calls.append((start_index, stop_index))
        if self.is_item_loaded is not None:
            self.is_item_loaded.loaded.update(range(start_index, stop_index + 1))

        if self.mode == "sync":
            return None

        future = asyncio.get_running_loop().create_future()
        self.futures.append(future)
        if self.mode == "auto":
            future.set_result(None)
        return future

    def resolve(self, position: int) -> None:
        self.futures[position].set_result(None)

    def fail(self, position: int, error: BaseException) -> None:
        self.futures[position].set_exception(error)

    def clear(self) -> None:
        self.calls.clear()
