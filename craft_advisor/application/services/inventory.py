"""
Inventory Aggregator

Collects every item stack the player holds into one location-tagged list.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from ...core.protocols import GameDataProtocol
from ...core.protocols.game_data_protocol import ItemStack
from ...domain.crafting.models import (
    InventoryEntry,
    PERSONAL_BAG_LOCATION,
    SADDLEBAG_LOCATION,
    retainer_location,
)

logger = logging.getLogger(__name__)


class InventoryAggregator:
    """Reads personal bag, retainers and saddlebag from the game client."""

    def __init__(self, game_data: GameDataProtocol):
        self._game_data = game_data

    def collect_inventory(self) -> List[InventoryEntry]:
        """
        Snapshot of all storage.

        Duplicate item/location pairs are kept as-is; consumers sum them.
        """
        entries = self._tag(self._game_data.get_inventory(), PERSONAL_BAG_LOCATION)

        retainer_count = self._game_data.get_retainer_count()
        for index in range(retainer_count):
            entries.extend(
                self._tag(
                    self._game_data.get_retainer_inventory(index),
                    retainer_location(index)
                )
            )

        entries.extend(self._tag(self._game_data.get_saddlebag(), SADDLEBAG_LOCATION))

        logger.debug(
            f"Collected {len(entries)} inventory entries "
            f"across {retainer_count} retainers"
        )
        return entries

    @staticmethod
    def _tag(stacks: Iterable[ItemStack], location_id: int) -> List[InventoryEntry]:
        return [
            InventoryEntry(item_id=item_id, quantity=quantity, location_id=location_id)
            for item_id, quantity in stacks
        ]

    @staticmethod
    def totals(entries: Iterable[InventoryEntry]) -> Dict[int, int]:
        """Quantity per item id, summed across locations."""
        totals: Dict[int, int] = defaultdict(int)
        for entry in entries:
            totals[entry.item_id] += entry.quantity
        return dict(totals)

    @staticmethod
    def locations(entries: Iterable[InventoryEntry]) -> Dict[int, List[int]]:
        """Distinct location ids holding each item, in first-seen order."""
        locations: Dict[int, List[int]] = defaultdict(list)
        for entry in entries:
            if entry.quantity <= 0:
                continue
            held = locations[entry.item_id]
            if entry.location_id not in held:
                held.append(entry.location_id)
        return dict(locations)
