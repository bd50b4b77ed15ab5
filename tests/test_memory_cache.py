"""Tests for MemoryCache: lock-guarded map semantics."""

import asyncio

from craft_advisor.core.protocols import CacheProtocol
from craft_advisor.infrastructure.cache import MemoryCache


async def test_get_set_and_stats():
    cache = MemoryCache(name="test")
    assert await cache.get(1) is None
    assert await cache.set(1, "a") is True
    assert await cache.get(1) == "a"

    stats = await cache.get_stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["size"] == 1


async def test_set_if_absent_first_writer_wins():
    cache = MemoryCache()
    assert await cache.set_if_absent("k", 1) == 1
    assert await cache.set_if_absent("k", 2) == 1
    assert await cache.get("k") == 1


async def test_set_overwrites():
    cache = MemoryCache()
    await cache.set("k", 1)
    await cache.set("k", 2)
    assert await cache.get("k") == 2


async def test_delete_exists_clear():
    cache = MemoryCache()
    await cache.set("a", 1)
    await cache.set("b", 2)
    assert await cache.exists("a")
    assert await cache.delete("a") is True
    assert await cache.delete("a") is False
    assert not await cache.exists("a")
    assert await cache.clear() == 1
    assert len(cache) == 0


async def test_concurrent_first_population_single_winner():
    cache = MemoryCache()
    winners = await asyncio.gather(*(cache.set_if_absent("k", n) for n in range(50)))
    assert len(set(winners)) == 1
    assert await cache.get("k") == winners[0]


def test_put_nowait_from_sync_code():
    cache = MemoryCache()
    cache.put_nowait("k", 3)
    assert len(cache) == 1


def test_conforms_to_protocol():
    assert isinstance(MemoryCache(), CacheProtocol)
