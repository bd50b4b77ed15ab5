"""
Snapshot Game Data Adapter

Serves inventory and master data from a JSON snapshot exported from the
game client, e.g.::

    {
        "inventory": [[5057, 12]],
        "retainers": [[[5057, 3]], []],
        "saddlebag": [[5058, 4]],
        "items": {"5057": {"name": "Iron Ore", "level": 1}},
        "recipes": {"10": {"result_item_id": 5058,
                           "crafting_class": "Blacksmith",
                           "ingredients": [[5057, 5]]}}
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..core.exceptions import SnapshotError
from ..core.protocols.game_data_protocol import ItemStack

logger = logging.getLogger(__name__)


class SnapshotGameData:
    """Read-only game data backed by a dict."""

    def __init__(self, data: Mapping[str, Any]):
        self._inventory = self._stacks(data.get("inventory", []), "inventory")
        self._retainers = [
            self._stacks(stacks, f"retainers[{index}]")
            for index, stacks in enumerate(data.get("retainers", []))
        ]
        self._saddlebag = self._stacks(data.get("saddlebag", []), "saddlebag")
        self._items: Dict[int, Mapping[str, Any]] = {
            int(key): value for key, value in (data.get("items") or {}).items()
        }
        self._recipes: Dict[int, Mapping[str, Any]] = {
            int(key): value for key, value in (data.get("recipes") or {}).items()
        }

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SnapshotGameData":
        """Load a snapshot from a JSON file."""
        path = Path(path)
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)

        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a JSON object", section=str(path))

        snapshot = cls(data)
        logger.info(
            f"Loaded snapshot {path.name}: {len(snapshot._items)} items, "
            f"{len(snapshot._recipes)} recipes, {len(snapshot._retainers)} retainers"
        )
        return snapshot

    @staticmethod
    def _stacks(raw: Iterable[Any], section: str) -> List[ItemStack]:
        stacks = []
        for stack in raw:
            try:
                item_id, quantity = int(stack[0]), int(stack[1])
            except (TypeError, ValueError, IndexError) as e:
                raise SnapshotError(
                    f"Invalid item stack in {section}", section=section, value=stack
                ) from e
            stacks.append((item_id, quantity))
        return stacks

    def get_inventory(self) -> List[ItemStack]:
        return list(self._inventory)

    def get_retainer_count(self) -> int:
        return len(self._retainers)

    def get_retainer_inventory(self, index: int) -> List[ItemStack]:
        return list(self._retainers[index])

    def get_saddlebag(self) -> List[ItemStack]:
        return list(self._saddlebag)

    def get_recipe(self, recipe_id: int) -> Optional[Mapping[str, Any]]:
        return self._recipes.get(recipe_id)

    def iter_recipes(self) -> Iterable[int]:
        return list(self._recipes)

    def get_item(self, item_id: int) -> Optional[Mapping[str, Any]]:
        return self._items.get(item_id)
