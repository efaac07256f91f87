"""Key-addressed cache for fetched query results.

Entries are stored under tuple keys such as ``("/api/guests/wedding", 7)`` and
carry a stale flag. ``invalidate`` marks an entry (or every entry sharing a
key prefix) stale so the next ``fetch`` reloads it.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryKey = tuple[Any, ...]


@dataclass
class CacheEntry(Generic[T]):
    data: T
    stale: bool = False


class QueryCache:
    def __init__(self) -> None:
        self._entries: dict[QueryKey, CacheEntry] = {}

    def get(self, key: QueryKey) -> CacheEntry | None:
        return self._entries.get(key)

    def set(self, key: QueryKey, data: Any) -> None:
        self._entries[key] = CacheEntry(data=data)

    def is_stale(self, key: QueryKey) -> bool:
        """Missing entries count as stale."""
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def invalidate(self, key: QueryKey) -> int:
        """Mark every entry whose key starts with ``key`` as stale.

        Returns the number of entries marked.
        """
        marked = 0
        for entry_key, entry in self._entries.items():
            if entry_key[: len(key)] == key:
                entry.stale = True
                marked += 1
        logger.debug(f"Invalidated {marked} cache entries for {key}")
        return marked

    async def fetch(self, key: QueryKey, loader: Callable[[], Awaitable[T]]) -> T:
        """Return cached data for ``key``, calling ``loader`` when missing or stale."""
        entry = self._entries.get(key)
        if entry is not None and not entry.stale:
            return entry.data

        data = await loader()
        self.set(key, data)
        return data
