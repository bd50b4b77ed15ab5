"""
Game Data Protocol Definition

Capability interface over the game client: player storage and master data.
"""

from typing import Protocol, Iterable, Mapping, Any, Optional, Tuple, List


# (item_id, quantity)
ItemStack = Tuple[int, int]


class GameDataProtocol(Protocol):
    """Protocol for game client access."""

    def get_inventory(self) -> List[ItemStack]:
        """Contents of the personal bag."""
        ...

    def get_retainer_count(self) -> int:
        """Number of retainers the player has."""
        ...

    def get_retainer_inventory(self, index: int) -> List[ItemStack]:
        """Contents of the retainer at ``index`` (0-based)."""
        ...

    def get_saddlebag(self) -> List[ItemStack]:
        """Contents of the saddlebag."""
        ...

    def get_recipe(self, recipe_id: int) -> Optional[Mapping[str, Any]]:
        """
        Raw recipe row.

        The row carries ``result_item_id``, ``crafting_class`` and
        ``ingredients`` as a list of up to 10 ``[item_id, quantity]``
        slots. Returns None when the recipe does not exist.
        """
        ...

    def iter_recipes(self) -> Iterable[int]:
        """IDs of every known recipe."""
        ...

    def get_item(self, item_id: int) -> Optional[Mapping[str, Any]]:
        """
        Raw item row with ``name``, ``level`` and optional
        ``crafting_class``. Returns None when the item does not exist.
        """
        ...
