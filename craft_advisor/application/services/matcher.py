"""
Craftability Matcher

Finds the recipes the player can craft right now.
"""

import logging
from typing import Dict, Iterable, List

from ...domain.crafting.models import InventoryEntry, RecipeDef
from .inventory import InventoryAggregator

logger = logging.getLogger(__name__)


class CraftabilityMatcher:
    """Intersects aggregated inventory with recipe requirements."""

    def match(
        self,
        inventory: List[InventoryEntry],
        recipes: Iterable[RecipeDef]
    ) -> Dict[int, RecipeDef]:
        """
        Recipes fully covered by on-hand materials, keyed by result item id.

        Quantities are summed across all locations. Every material must be
        covered; there is no partial credit. A later recipe for the same
        result item replaces an earlier one.
        """
        totals = InventoryAggregator.totals(inventory)

        craftable: Dict[int, RecipeDef] = {}
        for recipe in recipes:
            if self.is_craftable(recipe, totals):
                craftable[recipe.result_item_id] = recipe

        logger.debug(f"{len(craftable)} craftable recipes")
        return craftable

    @staticmethod
    def is_craftable(recipe: RecipeDef, totals: Dict[int, int]) -> bool:
        for material in recipe.materials:
            on_hand = totals.get(material.item.item_id, 0)
            if on_hand <= 0 or on_hand < material.quantity:
                return False
        return True
