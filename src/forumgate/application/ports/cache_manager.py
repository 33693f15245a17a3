"""Cache manager port - get-or-populate with explicit eviction."""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

T = TypeVar("T")


class CacheManager(Protocol):
    """Port for memoizing slow-changing lookups."""

    async def get_or_set(self, key: str, factory: Callable[[], Awaitable[T]]) -> T: ...

    def remove(self, key: str) -> None: ...

    def remove_prefix(self, prefix: str) -> None: ...

    def clear(self) -> None: ...
