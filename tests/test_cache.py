"""Tests for the in-memory TTL cache."""

from macro_tracker.services.cache import InMemoryCache


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_entries_expire_after_ttl() -> None:
    clock = _Clock()
    cache = InMemoryCache(clock=clock)
    cache.set("fdc:food:1", {"fdcId": 1}, ttl_seconds=60)

    clock.now += 59
    assert cache.get("fdc:food:1") == {"fdcId": 1}

    clock.now += 1
    assert cache.get("fdc:food:1") is None
    assert len(cache) == 0


def test_least_recently_used_key_is_evicted() -> None:
    cache = InMemoryCache(max_entries=2)
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)
    assert cache.get("a") == 1

    cache.set("c", 3, ttl_seconds=60)

    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3
    assert len(cache) == 2
