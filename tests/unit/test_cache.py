"""Test the in-memory cache."""

from unittest.mock import AsyncMock

import pytest

from movie_dashboard.core.models import Genre
from movie_dashboard.infrastructure import MemoryCache, cache_with_loader, generate_cache_key


@pytest.fixture
def cache(clock):
    """Cache driven by the fixed clock."""
    return MemoryCache(clock)


def test_set_and_get(cache):
    """Test storing and reading values."""
    cache.set("key", {"value": 1}, ttl_seconds=60)

    assert cache.get("key") == {"value": 1}
    assert cache.has("key")
    assert cache.get("missing") is None
    assert not cache.has("missing")


def test_entries_expire(cache, clock):
    """Test entries expire once their TTL has elapsed."""
    cache.set("key", "value", ttl_seconds=60)

    clock.advance(seconds=59)
    assert cache.get("key") == "value"

    clock.advance(seconds=1)
    assert cache.get("key") is None
    # Expired entries are dropped on read
    assert cache.get_stats().total_entries == 0


def test_invalidate(cache):
    """Test removing single keys."""
    cache.set("key", "value", ttl_seconds=60)

    assert cache.invalidate("key")
    assert not cache.invalidate("key")
    assert cache.get("key") is None


def test_invalidate_tags(cache):
    """Test removing entries by tag."""
    cache.set("genres", "g", ttl_seconds=60, tags=["tmdb", "genres"])
    cache.set("movies", "m", ttl_seconds=60, tags=["tmdb", "movies"])
    cache.set("other", "o", ttl_seconds=60)

    assert cache.invalidate_tags(["genres"]) == 1
    assert cache.get("genres") is None
    assert cache.get("movies") == "m"

    assert cache.invalidate_tags(["tmdb"]) == 1
    assert cache.get("movies") is None
    assert cache.get("other") == "o"


def test_clear_and_cleanup(cache, clock):
    """Test clearing and eager expiry."""
    cache.set("short", 1, ttl_seconds=10)
    cache.set("long", 2, ttl_seconds=100)

    clock.advance(seconds=30)
    assert cache.cleanup() == 1
    assert cache.get_stats().total_entries == 1

    cache.clear()
    assert cache.get_stats().total_entries == 0


def test_get_stats(cache, clock):
    """Test statistics and memory estimate."""
    cache.set("k", {"a": 1}, ttl_seconds=10)
    cache.set("genres", [Genre(id=28, name="Action")], ttl_seconds=100)

    clock.advance(seconds=20)
    stats = cache.get_stats()

    assert stats.total_entries == 2
    assert stats.valid_entries == 1
    assert stats.expired_entries == 1
    assert stats.memory_usage > len("k") + len('{"a": 1}')


def test_generate_cache_key_ignores_parameter_order():
    """Test keys are stable across parameter order."""
    first = generate_cache_key("tmdb:movies:discover", {"page": 1, "language": "en-US"})
    second = generate_cache_key("tmdb:movies:discover", {"language": "en-US", "page": 1})
    other = generate_cache_key("tmdb:movies:discover", {"language": "en-US", "page": 2})

    assert first == second
    assert first != other
    assert first.startswith("tmdb:movies:discover:")


@pytest.mark.asyncio
async def test_cache_with_loader(cache, clock):
    """Test the loader runs only on misses."""
    loader = AsyncMock(return_value=["Action"])

    first = await cache_with_loader(cache, "genres", 60, loader, ["genres"])
    second = await cache_with_loader(cache, "genres", 60, loader, ["genres"])

    assert first == second == ["Action"]
    assert loader.await_count == 1

    clock.advance(seconds=60)
    await cache_with_loader(cache, "genres", 60, loader)

    assert loader.await_count == 2
