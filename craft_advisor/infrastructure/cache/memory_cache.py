"""
Memory Cache Implementation

Lock-guarded in-process map shared between concurrent command tasks and
host event callbacks.
"""

import logging
import threading
from typing import Optional, Any, Dict, Hashable

from ...core.protocols import CacheProtocol

logger = logging.getLogger(__name__)


class MemoryCache(CacheProtocol):
    """
    In-memory cache implementation.

    Entries never expire; they live until ``delete`` or ``clear``. A
    ``threading.Lock`` guards the map so callbacks delivered on a host
    thread can write while command tasks read on the event loop. No
    critical section awaits, so the lock is never held across a
    suspension point.
    """

    def __init__(self, name: str = "cache"):
        """
        Initialize memory cache.

        Args:
            name: Label used in logs and stats
        """
        self.name = name
        self._cache: Dict[Hashable, Any] = {}
        self._lock = threading.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0
        }

    async def get(self, key: Hashable) -> Optional[Any]:
        """Retrieve a value from cache."""
        with self._lock:
            if key in self._cache:
                self._stats["hits"] += 1
                return self._cache[key]

            self._stats["misses"] += 1
            return None

    async def set(self, key: Hashable, value: Any) -> bool:
        """Store a value in cache."""
        with self._lock:
            self._cache[key] = value
            self._stats["sets"] += 1
        return True

    async def set_if_absent(self, key: Hashable, value: Any) -> Any:
        """Store a value unless another writer already did."""
        with self._lock:
            existing = self._cache.get(key)
            if existing is not None:
                return existing

            self._cache[key] = value
            self._stats["sets"] += 1
            return value

    async def delete(self, key: Hashable) -> bool:
        """Delete a value from cache."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                self._stats["deletes"] += 1
                return True

        return False

    async def exists(self, key: Hashable) -> bool:
        """Check if a key exists in cache."""
        with self._lock:
            return key in self._cache

    async def clear(self) -> int:
        """Clear all cache entries."""
        with self._lock:
            count = len(self._cache)
            self._cache.clear()

        logger.info(f"{self.name}: cleared {count} entries")
        return count

    def put_nowait(self, key: Hashable, value: Any) -> None:
        """Synchronous overwrite for callers outside the event loop."""
        with self._lock:
            self._cache[key] = value
            self._stats["sets"] += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    async def get_stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            hits = self._stats["hits"]
            misses = self._stats["misses"]
            size = len(self._cache)
            sets = self._stats["sets"]
            deletes = self._stats["deletes"]

        total = hits + misses
        hit_rate = (hits / total * 100) if total > 0 else 0.0

        return {
            "name": self.name,
            "type": "memory",
            "size": size,
            "hits": hits,
            "misses": misses,
            "sets": sets,
            "deletes": deletes,
            "hit_rate": hit_rate
        }
