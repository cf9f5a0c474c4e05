"""Tests for the in-memory TTL cache."""

from datetime import UTC, datetime, timedelta

from foodwise.services.cache import InMemoryCache


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


def test_entries_expire_after_ttl() -> None:
    clock = _Clock()
    cache = InMemoryCache(clock=clock)

    cache.set("places:key", ["cafe"], ttl_seconds=300)
    clock.now += timedelta(seconds=299)
    assert cache.get("places:key") == ["cafe"]

    clock.now += timedelta(seconds=1)
    assert cache.get("places:key") is None


def test_missing_and_cleared_keys() -> None:
    cache = InMemoryCache()

    assert cache.get("absent") is None
    cache.set("present", 1, ttl_seconds=60)
    cache.clear()
    assert cache.get("present") is None
