"""Cache interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..models import CacheStats


class ICache(ABC):
    """Interface for key/value caches with expiry and tags."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get a cached value.

        Args:
            key: Cache key.

        Returns:
            Cached value or None if missing or expired.
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether a key holds a live value."""
        pass

    @abstractmethod
    def invalidate(self, key: str) -> bool:
        """Remove a single key.

        Returns:
            True if the key existed.
        """
        pass

    @abstractmethod
    def invalidate_tags(self, tags: List[str]) -> int:
        """Remove every entry carrying any of the given tags.

        Returns:
            Number of removed entries.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""
        pass

    @abstractmethod
    def cleanup(self) -> int:
        """Remove expired entries.

        Returns:
            Number of removed entries.
        """
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Get cache statistics."""
        pass
