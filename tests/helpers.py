"""Test helpers and utilities."""
import asyncio

from infinite_loader import InfiniteLoader
from tests.fakes.fake_items import FakeLoadMoreItems, RecordingIsItemLoaded
from tests.fakes.fake_list import FakeFixedSizeList


async def settle(rounds: int = 5) -> None:
    """Let pending done-callbacks and tasks run on the current loop."""
    for _ in range(rounds):
        await asyncio.sleep(0)


class LoaderTestContext:
    """Loader wired to a fake fixed-size list, predicate and backend."""

    def __init__(
        self,
        item_count: int = 100,
        threshold: int = 10,
        minimum_batch_size: int = 1,
        predicate=None,
        mode: str = "sync",
        height: int = 100,
        item_size: int = 20,
    ):
        """
        Initialize test context.

        Args:
            item_count: Items in the list
            threshold: Loader threshold
            minimum_batch_size: Loader minimum batch size
            predicate: Replaces the backend-driven loaded lookup
            mode: FakeLoadMoreItems mode
            height: Viewport height of the fake list
            item_size: Row height of the fake list
        """
        self.is_item_loaded = RecordingIsItemLoaded(predicate)
        self.load_more_items = FakeLoadMoreItems(self.is_item_loaded, mode=mode)
        self.list = FakeFixedSizeList(
            item_count=item_count, height=height, item_size=item_size
        )
        self.loader = InfiniteLoader(
            is_item_loaded=self.is_item_loaded,
            load_more_items=self.load_more_items,
            item_count=item_count,
            threshold=threshold,
            minimum_batch_size=minimum_batch_size,
            list_ref=self.list,
        )
        self.list.on_items_rendered = self.loader.on_items_rendered

    def render(self) -> "LoaderTestContext":
        self.list.render()
        return self
