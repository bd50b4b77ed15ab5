"""In-memory stand-ins for the game client and the pricing service."""

import asyncio
from typing import Dict, Iterable, List, Optional

from craft_advisor.core.exceptions import APIError


class FakeGameData:
    """Game client double driven by plain dicts and lists."""

    def __init__(
        self,
        inventory: Optional[List] = None,
        retainers: Optional[List[List]] = None,
        saddlebag: Optional[List] = None,
        items: Optional[Dict[int, dict]] = None,
        recipes: Optional[Dict[int, dict]] = None,
    ):
        self.inventory = list(inventory or [])
        self.retainers = [list(r) for r in (retainers or [])]
        self.saddlebag = list(saddlebag or [])
        self.items = dict(items or {})
        self.recipes = dict(recipes or {})
        self.item_loads = 0
        self.recipe_loads = 0
        self.inventory_reads = 0

    def get_inventory(self):
        self.inventory_reads += 1
        return list(self.inventory)

    def get_retainer_count(self):
        return len(self.retainers)

    def get_retainer_inventory(self, index):
        return list(self.retainers[index])

    def get_saddlebag(self):
        return list(self.saddlebag)

    def get_recipe(self, recipe_id):
        self.recipe_loads += 1
        return self.recipes.get(recipe_id)

    def iter_recipes(self) -> Iterable[int]:
        return list(self.recipes)

    def get_item(self, item_id):
        self.item_loads += 1
        return self.items.get(item_id)


class FakePriceSource:
    """Price source returning canned prices and counting calls."""

    def __init__(
        self,
        prices: Optional[Dict[int, int]] = None,
        failing: Iterable[int] = (),
        delay: float = 0.0,
    ):
        self.prices = dict(prices or {})
        self.failing = set(failing)
        self.delay = delay
        self.calls: List[int] = []

    async def get_cheapest_listing(self, item_id: int) -> int:
        self.calls.append(item_id)
        if self.delay:
            await asyncio.sleep(self.delay)
        if item_id in self.failing:
            raise APIError(f"boom {item_id}", status_code=500)
        return self.prices.get(item_id, 0)


# Material A (1), material B (2), crafted item X (100)
SCENARIO_ITEMS = {
    1: {"name": "Material A", "level": 1},
    2: {"name": "Material B", "level": 5},
    100: {"name": "Item X", "level": 50},
}
SCENARIO_RECIPES = {
    10: {
        "result_item_id": 100,
        "crafting_class": "Blacksmith",
        "ingredients": [[1, 5], [2, 5]],
    },
}
SCENARIO_PRICES = {1: 10, 2: 20, 100: 500}
