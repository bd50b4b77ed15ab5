"""
Price Cache

Last known unit price per item, fetched on demand from the market board
and overwritten by purchases observed in game.
"""

import asyncio
import logging
from typing import Dict, Iterable, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import APIError
from ...core.protocols import PriceSourceProtocol
from ...domain.market.models import PriceEntry, PriceSource
from ...infrastructure.cache import MemoryCache

logger = logging.getLogger(__name__)


class PriceCache:
    """
    Item id -> last known unit price.

    Fetched prices are written with ``set_if_absent`` so that a price
    observed while a fetch was in flight is never replaced by the older
    estimate. Observed prices always overwrite.
    """

    def __init__(
        self,
        source: PriceSourceProtocol,
        cache: Optional[MemoryCache] = None,
        max_concurrency: int = 8
    ):
        self._source = source
        self._cache = cache if cache is not None else MemoryCache(name="prices")
        self._max_concurrency = max(1, max_concurrency)
        self._fetches = 0
        self._failures = 0

    async def get_price(self, item_id: int) -> int:
        """
        Cached unit price, fetching it on a miss.

        Failures are logged and yield 0 without caching anything, so the
        next call retries.
        """
        entry = await self._cache.get(item_id)
        if entry is not None:
            return entry.price

        self._fetches += 1
        try:
            price = await self._source.get_cheapest_listing(item_id)
        except (APIError, httpx.HTTPError, PydanticValidationError, ValueError) as e:
            self._failures += 1
            logger.warning(f"Price lookup failed for item {item_id}: {e}")
            return 0

        if price is None or price < 0:
            self._failures += 1
            logger.warning(f"Discarding invalid price {price!r} for item {item_id}")
            return 0

        stored = await self._cache.set_if_absent(
            item_id,
            PriceEntry(item_id=item_id, price=int(price))
        )
        return stored.price

    async def get_prices(self, item_ids: Iterable[int]) -> Dict[int, int]:
        """
        Look up many prices concurrently.

        Each lookup is isolated: an unexpected error for one item logs and
        degrades that item to 0 without cancelling the others.
        """
        unique_ids = list(dict.fromkeys(item_ids))
        if not unique_ids:
            return {}

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _bounded(item_id: int) -> int:
            async with semaphore:
                return await self.get_price(item_id)

        results = await asyncio.gather(
            *(_bounded(item_id) for item_id in unique_ids),
            return_exceptions=True
        )

        prices: Dict[int, int] = {}
        for item_id, result in zip(unique_ids, results):
            if isinstance(result, Exception):
                logger.warning(
                    f"Price lookup for item {item_id} raised "
                    f"{type(result).__name__}: {result}"
                )
                prices[item_id] = 0
            else:
                prices[item_id] = result
        return prices

    async def observe_price(self, item_id: int, price: int) -> None:
        """Record a completed market purchase. Always wins over fetched prices."""
        entry = self._observed_entry(item_id, price)
        if entry is not None:
            await self._cache.set(item_id, entry)

    def observe_price_nowait(self, item_id: int, price: int) -> None:
        """Same as ``observe_price`` for callers on a host thread."""
        entry = self._observed_entry(item_id, price)
        if entry is not None:
            self._cache.put_nowait(item_id, entry)

    def _observed_entry(self, item_id: int, price: int) -> Optional[PriceEntry]:
        if price < 0:
            logger.warning(f"Ignoring negative observed price {price} for item {item_id}")
            return None

        logger.debug(f"Observed purchase: item {item_id} at {price}")
        return PriceEntry(item_id=item_id, price=price, source=PriceSource.OBSERVED)

    async def get_entry(self, item_id: int) -> Optional[PriceEntry]:
        """Cached entry without fetching."""
        return await self._cache.get(item_id)

    async def clear(self) -> int:
        """Drop every cached price."""
        return await self._cache.clear()

    async def get_stats(self) -> dict:
        stats = await self._cache.get_stats()
        stats["fetches"] = self._fetches
        stats["failures"] = self._failures
        return stats
