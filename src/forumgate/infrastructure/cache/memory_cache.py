"""In-memory cache with single-flight population."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")

_MISSING = object()


class InMemoryCacheManager:
    """Process-local get-or-populate cache without expiry.

    Concurrent misses on one key share a single fill task. The fill runs
    detached from its callers: a cancelled caller stops waiting, the fill
    still completes and commits. Eviction drops the stored value and
    detaches any in-flight fill so that it cannot commit afterwards.
    A failed fill stores nothing.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._pending: dict[str, asyncio.Task] = {}

    async def get_or_set(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        """Return cached value for key, populating it once on miss."""
        value = self._values.get(key, _MISSING)
        if value is not _MISSING:
            return value

        task = self._pending.get(key)
        if task is None:
            task = asyncio.create_task(self._fill(key, factory), name=f"cache-fill:{key}")
            task.add_done_callback(_retrieve_exception)
            self._pending[key] = task
        return await asyncio.shield(task)

    async def _fill(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        current = asyncio.current_task()
        try:
            value = await factory()
        except Exception as e:
            logger.debug("cache_fill_failed", key=key, error=str(e))
            raise
        else:
            # Evicted while filling: hand the value to existing waiters only.
            if self._pending.get(key) is current:
                self._values[key] = value
            return value
        finally:
            if self._pending.get(key) is current:
                del self._pending[key]

    def remove(self, key: str) -> None:
        """Evict key and detach its in-flight fill."""
        self._values.pop(key, None)
        self._pending.pop(key, None)
        logger.debug("cache_evicted", key=key)

    def remove_prefix(self, prefix: str) -> None:
        """Evict every key starting with prefix."""
        for key in [k for k in self._values if k.startswith(prefix)]:
            del self._values[key]
        for key in [k for k in self._pending if k.startswith(prefix)]:
            del self._pending[key]
        logger.debug("cache_evicted_prefix", prefix=prefix)

    def clear(self) -> None:
        self._values.clear()
        self._pending.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)


def _retrieve_exception(task: asyncio.Task) -> None:
    # Fills whose callers all went away must not warn about unretrieved errors.
    if not task.cancelled():
        task.exception()
