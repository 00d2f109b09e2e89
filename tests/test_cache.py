"""Tests for the in-memory cache."""

from datetime import UTC, datetime, timedelta

from household_food_cost.services.cache import InMemoryCache


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2026, 1, 10, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


def test_cache_expires_entries() -> None:
    clock = _Clock()
    cache = InMemoryCache(clock=clock)

    cache.set("key", "value", ttl_seconds=60)
    assert cache.get("key") == "value"

    clock.now += timedelta(seconds=61)
    assert cache.get("key") is None


def test_cache_clear() -> None:
    cache = InMemoryCache()
    cache.set("key", 1, ttl_seconds=60)

    cache.clear()

    assert cache.get("key") is None
