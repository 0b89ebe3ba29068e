"""Manager classes for loader state."""

from .memo_cache_manager import MemoCacheManager
from .request_dispatcher import PendingRequest, RequestDispatcher

__all__ = [
    "MemoCacheManager",
    "PendingRequest",
    "RequestDispatcher",
]
