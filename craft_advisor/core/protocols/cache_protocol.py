"""
Cache Protocol Definition

Defines the interface for all cache implementations.
"""

from typing import Protocol, Optional, Any, Hashable, runtime_checkable


@runtime_checkable
class CacheProtocol(Protocol):
    """Protocol for cache implementations."""

    async def get(self, key: Hashable) -> Optional[Any]:
        """
        Retrieve a value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        ...

    async def set(self, key: Hashable, value: Any) -> bool:
        """
        Store a value in cache, replacing any existing value.

        Args:
            key: Cache key
            value: Value to cache

        Returns:
            True if successful, False otherwise
        """
        ...

    async def set_if_absent(self, key: Hashable, value: Any) -> Any:
        """
        Store a value only if the key is not cached yet.

        Args:
            key: Cache key
            value: Candidate value

        Returns:
            The value held by the cache after the call (the existing
            value when another writer got there first)
        """
        ...

    async def delete(self, key: Hashable) -> bool:
        """
        Delete a value from cache.

        Args:
            key: Cache key

        Returns:
            True if deleted, False otherwise
        """
        ...

    async def exists(self, key: Hashable) -> bool:
        """
        Check if a key exists in cache.

        Args:
            key: Cache key

        Returns:
            True if exists, False otherwise
        """
        ...

    async def clear(self) -> int:
        """
        Clear all cache entries.

        Returns:
            Number of entries cleared
        """
        ...
