"""Protocol definitions for the loader's external collaborators."""

from typing import Any, Awaitable, Optional, Protocol, runtime_checkable


class IsItemLoaded(Protocol):
    def __call__(self, index: int) -> bool: ...


class LoadMoreItems(Protocol):
    def __call__(
        self, start_index: int, stop_index: int
    ) -> Optional[Awaitable[Any]]: ...


class ListRef(Protocol):
    def force_update(self) -> None: ...


@runtime_checkable
class VariableSizeListRef(ListRef, Protocol):
    def reset_after_index(
        self, index: int, should_force_update: bool = True
    ) -> None: ...
