"""In-memory response cache."""

import base64
import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar

from ..core.interfaces import ICache, IClock
from ..core.models import CacheStats
from .logging import LoggerMixin

T = TypeVar("T")


@dataclass
class CacheEntry:
    """Stored value with its expiry."""

    value: Any
    expires_at: float
    tags: List[str] = field(default_factory=list)

    def is_expired(self, now: float) -> bool:
        """Check whether the entry has expired at the given time."""
        return now >= self.expires_at


class MemoryCache(ICache, LoggerMixin):
    """Dictionary backed cache with lazy expiry.

    Expiry is checked on read against the injected clock; ``cleanup`` drops
    expired entries eagerly.
    """

    def __init__(self, clock: IClock) -> None:
        """Initialize cache.

        Args:
            clock: Clock used to compute expiry.
        """
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        """Get a cached value.

        Args:
            key: Cache key.

        Returns:
            Cached value or None if missing or expired.
        """
        entry = self._entries.get(key)
        if entry is None:
            self.logger.debug(f"Cache miss: {key}")
            return None

        if entry.is_expired(self._clock.timestamp()):
            del self._entries[key]
            self.logger.debug(f"Cache expired: {key}")
            return None

        self.logger.debug(f"Cache hit: {key}")
        return entry.value

    def set(
        self, key: str, value: Any, ttl_seconds: float, tags: Optional[List[str]] = None
    ) -> None:
        """Store a value.

        Args:
            key: Cache key.
            value: Value to store.
            ttl_seconds: Time to live in seconds.
            tags: Tags used for group invalidation.
        """
        self._entries[key] = CacheEntry(
            value=value,
            expires_at=self._clock.timestamp() + ttl_seconds,
            tags=list(tags or []),
        )
        self.logger.debug(f"Cache set: {key} (ttl {ttl_seconds}s)")

    def has(self, key: str) -> bool:
        """Check whether a key holds a live value."""
        return self.get(key) is not None

    def invalidate(self, key: str) -> bool:
        """Remove a single key."""
        return self._entries.pop(key, None) is not None

    def invalidate_tags(self, tags: List[str]) -> int:
        """Remove every entry carrying any of the given tags."""
        wanted = set(tags)
        keys = [key for key, entry in self._entries.items() if wanted.intersection(entry.tags)]
        for key in keys:
            del self._entries[key]

        if keys:
            self.logger.debug(f"Invalidated {len(keys)} cache entries for tags {sorted(wanted)}")
        return len(keys)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def cleanup(self) -> int:
        """Remove expired entries."""
        now = self._clock.timestamp()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def get_stats(self) -> CacheStats:
        """Get cache statistics.

        Memory usage is estimated from the JSON size of keys and values.
        """
        now = self._clock.timestamp()
        expired = sum(1 for entry in self._entries.values() if entry.is_expired(now))
        memory_usage = sum(
            len(key) + len(json.dumps(_jsonable(entry.value), default=str))
            for key, entry in self._entries.items()
        )

        return CacheStats(
            total_entries=len(self._entries),
            valid_entries=len(self._entries) - expired,
            expired_entries=expired,
            memory_usage=memory_usage,
        )


def _jsonable(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def generate_cache_key(prefix: str, params: Dict[str, Any]) -> str:
    """Build a cache key that does not depend on parameter order.

    Args:
        prefix: Key namespace, e.g. ``tmdb:movies:discover``.
        params: Request parameters.

    Returns:
        ``<prefix>:<base64 of the sorted compact JSON params>``.
    """
    serialized = json.dumps(params, sort_keys=True, separators=(",", ":"), default=str)
    encoded = base64.b64encode(serialized.encode("utf-8")).decode("ascii")
    return f"{prefix}:{encoded}"


async def cache_with_loader(
    cache: ICache,
    key: str,
    ttl_seconds: float,
    loader: Callable[[], Awaitable[T]],
    tags: Optional[List[str]] = None,
) -> T:
    """Return the cached value for a key, loading and storing it on a miss.

    Args:
        cache: Cache to use.
        key: Cache key.
        ttl_seconds: Time to live for a freshly loaded value.
        loader: Coroutine factory producing the value.
        tags: Tags for the stored entry.

    Returns:
        Cached or freshly loaded value.
    """
    cached = cache.get(key)
    if cached is not None:
        return cached  # type: ignore

    value = await loader()
    cache.set(key, value, ttl_seconds, tags)
    return value
