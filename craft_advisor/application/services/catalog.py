"""
Catalog Cache

Lazily parsed recipe and item master data.
"""

import logging
from typing import Any, List, Mapping, Optional

from ...core.exceptions import NotFoundError
from ...core.protocols import GameDataProtocol
from ...domain.crafting.models import (
    ItemRef,
    MaterialRequirement,
    RecipeDef,
    MAX_INGREDIENTS,
)
from ...infrastructure.cache import MemoryCache

logger = logging.getLogger(__name__)


class CatalogCache:
    """
    Recipe and item metadata keyed by id.

    Entries are loaded on first access and kept until ``clear``. When two
    tasks load the same key at once the first stored value wins; the
    other load is wasted work.
    """

    def __init__(
        self,
        game_data: GameDataProtocol,
        recipes: Optional[MemoryCache] = None,
        items: Optional[MemoryCache] = None
    ):
        self._game_data = game_data
        self._recipes = recipes if recipes is not None else MemoryCache(name="recipes")
        self._items = items if items is not None else MemoryCache(name="items")

    async def get_item(self, item_id: int) -> ItemRef:
        """Item metadata; unknown items resolve to an empty placeholder."""
        cached = await self._items.get(item_id)
        if cached is not None:
            return cached

        try:
            item = self._parse_item(item_id, self._load_item(item_id))
        except NotFoundError as e:
            logger.debug(str(e))
            return ItemRef.unknown(item_id)

        return await self._items.set_if_absent(item_id, item)

    async def get_recipe(self, recipe_id: int) -> Optional[RecipeDef]:
        """Recipe definition, or None when master data has no such recipe."""
        cached = await self._recipes.get(recipe_id)
        if cached is not None:
            return cached

        row = self._game_data.get_recipe(recipe_id)
        if row is None:
            logger.debug(f"Recipe not found: {recipe_id}")
            return None

        recipe = await self._parse_recipe(recipe_id, row)
        return await self._recipes.set_if_absent(recipe_id, recipe)

    async def get_recipes(self) -> List[RecipeDef]:
        """Every recipe known to master data, in master-data order."""
        recipes = []
        for recipe_id in self._game_data.iter_recipes():
            recipe = await self.get_recipe(recipe_id)
            if recipe is not None:
                recipes.append(recipe)
        return recipes

    async def clear(self) -> int:
        """Drop all cached recipes and items."""
        return await self._recipes.clear() + await self._items.clear()

    def _load_item(self, item_id: int) -> Mapping[str, Any]:
        row = self._game_data.get_item(item_id)
        if row is None:
            raise NotFoundError("Item", item_id)
        return row

    @staticmethod
    def _parse_item(item_id: int, row: Mapping[str, Any]) -> ItemRef:
        return ItemRef(
            item_id=item_id,
            name=str(row.get("name") or ""),
            level=int(row.get("level") or 0),
            crafting_class=str(row.get("crafting_class") or "")
        )

    async def _parse_recipe(self, recipe_id: int, row: Mapping[str, Any]) -> RecipeDef:
        crafting_class = str(row.get("crafting_class") or "")

        result = await self.get_item(int(row.get("result_item_id") or 0))
        if not result.crafting_class and crafting_class:
            result = result.model_copy(update={"crafting_class": crafting_class})

        slots = list(row.get("ingredients") or [])
        if len(slots) > MAX_INGREDIENTS:
            logger.warning(
                f"Recipe {recipe_id} has {len(slots)} ingredient slots, "
                f"keeping the first {MAX_INGREDIENTS}"
            )
            slots = slots[:MAX_INGREDIENTS]

        materials = []
        for slot in slots:
            item_id, quantity = int(slot[0]), int(slot[1])
            # Empty slots are padded with zeros in master data
            if item_id <= 0 or quantity <= 0:
                continue
            materials.append(
                MaterialRequirement(item=await self.get_item(item_id), quantity=quantity)
            )

        return RecipeDef(
            recipe_id=recipe_id,
            result=result,
            crafting_class=crafting_class,
            materials=tuple(materials)
        )
