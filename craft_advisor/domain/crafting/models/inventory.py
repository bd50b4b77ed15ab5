"""
Inventory Entry Model

One stack of items at one storage location.
"""

from pydantic import BaseModel, ConfigDict, Field

PERSONAL_BAG_LOCATION = 0
SADDLEBAG_LOCATION = 9999


def retainer_location(index: int) -> int:
    """Location id of the retainer at ``index`` (0-based)."""
    return index + 1


class InventoryEntry(BaseModel):
    """Quantity of an item held at a location."""

    model_config = ConfigDict(frozen=True)

    item_id: int = Field(ge=0)
    quantity: int = Field(ge=0)
    location_id: int
