"""
Profitability Analyzer

Prices each craftable recipe against the market board.
"""

import logging
from typing import Dict, List, Mapping, Optional

from ...domain.crafting.models import (
    InventoryEntry,
    MaterialCost,
    RecipeDef,
    Recommendation,
)
from .inventory import InventoryAggregator
from .pricing import PriceCache

logger = logging.getLogger(__name__)


class ProfitabilityAnalyzer:
    """Computes crafted value minus material cost for each recipe."""

    def __init__(self, price_cache: PriceCache, aggregator: InventoryAggregator):
        self._prices = price_cache
        self._aggregator = aggregator

    async def analyze(
        self,
        craftable: Mapping[int, RecipeDef],
        inventory: Optional[List[InventoryEntry]] = None
    ) -> List[Recommendation]:
        """
        Build one recommendation per craftable recipe.

        Args:
            craftable: Result item id -> recipe, as produced by the matcher
            inventory: Snapshot the recipes were matched against. When
                omitted a fresh snapshot is collected for the location
                breakdown.

        Returns:
            Recommendations in ``craftable`` iteration order
        """
        if not craftable:
            return []

        if inventory is None:
            inventory = self._aggregator.collect_inventory()
        locations = InventoryAggregator.locations(inventory)

        material_ids = [
            material.item.item_id
            for recipe in craftable.values()
            for material in recipe.materials
        ]
        material_prices = await self._prices.get_prices(material_ids)
        crafted_prices = await self._prices.get_prices(craftable.keys())

        recommendations = [
            self._build(
                recipe,
                crafted_prices.get(result_id, 0),
                material_prices,
                locations
            )
            for result_id, recipe in craftable.items()
        ]

        logger.info(
            f"Analyzed {len(recommendations)} recipes "
            f"({len(material_prices)} distinct materials priced)"
        )
        return recommendations

    @staticmethod
    def _build(
        recipe: RecipeDef,
        crafted_price: int,
        material_prices: Dict[int, int],
        locations: Dict[int, List[int]]
    ) -> Recommendation:
        materials = []
        material_locations: Dict[int, List[int]] = {}
        for requirement in recipe.materials:
            material_id = requirement.item.item_id
            held_at = list(locations.get(material_id, []))
            materials.append(
                MaterialCost(
                    item=requirement.item,
                    quantity=requirement.quantity,
                    name=requirement.item.name,
                    unit_price=material_prices.get(material_id, 0),
                    locations=held_at
                )
            )
            material_locations[material_id] = held_at

        material_cost = sum(material.total_cost for material in materials)

        return Recommendation(
            item=recipe.result,
            crafting_class=recipe.crafting_class or recipe.result.crafting_class,
            crafted_price=crafted_price,
            material_cost=material_cost,
            profitability=crafted_price - material_cost,
            materials=materials,
            material_locations=material_locations
        )
