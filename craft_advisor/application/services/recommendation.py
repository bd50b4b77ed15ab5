"""
Recommendation Service

Runs the full pipeline for one request against the shared caches.
"""

import logging
from typing import List, Optional

from ...core.protocols import GameDataProtocol
from ...domain.crafting.models import Recommendation
from .catalog import CatalogCache
from .filters import FilterEngine
from .inventory import InventoryAggregator
from .matcher import CraftabilityMatcher
from .pricing import PriceCache
from .profitability import ProfitabilityAnalyzer

logger = logging.getLogger(__name__)


class RecommendationService:
    """
    Pipeline context shared by every command task.

    The price and catalog caches are the only shared state; inventory
    snapshots and results stay local to each ``recommend`` call.
    """

    def __init__(
        self,
        game_data: GameDataProtocol,
        price_cache: PriceCache,
        catalog: CatalogCache,
        filter_engine: Optional[FilterEngine] = None
    ):
        self.price_cache = price_cache
        self.catalog = catalog
        self.aggregator = InventoryAggregator(game_data)
        self.matcher = CraftabilityMatcher()
        self.analyzer = ProfitabilityAnalyzer(price_cache, self.aggregator)
        self.filter_engine = filter_engine or FilterEngine()

    async def recommend(self, criteria: str = "") -> List[Recommendation]:
        """Most profitable craftable items first."""
        inventory = self.aggregator.collect_inventory()
        recipes = await self.catalog.get_recipes()

        craftable = self.matcher.match(inventory, recipes)
        recommendations = await self.analyzer.analyze(craftable, inventory)
        recommendations = self.filter_engine.filter(recommendations, criteria)

        return sorted(
            recommendations,
            key=lambda rec: rec.profitability,
            reverse=True
        )

    async def refresh(self) -> None:
        """Drop all cached prices and master data."""
        prices = await self.price_cache.clear()
        catalog = await self.catalog.clear()
        logger.info(f"Caches refreshed ({prices} prices, {catalog} catalog entries dropped)")
