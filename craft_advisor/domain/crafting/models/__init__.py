"""
Crafting Domain Models

Items, recipes, inventory and the recommendations built from them.
"""

from .item import ItemRef
from .inventory import (
    InventoryEntry,
    PERSONAL_BAG_LOCATION,
    SADDLEBAG_LOCATION,
    retainer_location,
)
from .recipe import MaterialRequirement, RecipeDef, MAX_INGREDIENTS
from .recommendation import MaterialCost, Recommendation
from .history import HistoryEntry, HistorySummary

__all__ = [
    "ItemRef",
    "InventoryEntry",
    "PERSONAL_BAG_LOCATION",
    "SADDLEBAG_LOCATION",
    "retainer_location",
    "MaterialRequirement",
    "RecipeDef",
    "MAX_INGREDIENTS",
    "MaterialCost",
    "Recommendation",
    "HistoryEntry",
    "HistorySummary",
]
