"""TTL cache for USDA search results and food payloads."""

import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class Cache(Protocol):
    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value for ``ttl_seconds``."""


@dataclass
class InMemoryCache(Cache):
    """Bounded process-local cache.

    Entries expire lazily on read. Once ``max_entries`` is reached the least
    recently used key is evicted, so arbitrary search queries cannot grow the
    cache without limit.
    """

    max_entries: int = 512
    clock: Callable[[], float] = time.monotonic
    _entries: "OrderedDict[str, tuple[float, object]]" = field(
        default_factory=OrderedDict, init=False, repr=False
    )

    def get(self, key: str) -> object | None:
        cached = self._entries.get(key)
        if cached is None:
            return None
        expires_at, value = cached
        if self.clock() >= expires_at:
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        self._entries[key] = (self.clock() + ttl_seconds, value)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def __len__(self) -> int:
        return len(self._entries)
