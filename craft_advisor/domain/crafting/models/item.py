"""
Item Reference Model

Resolved item master data.
"""

from pydantic import BaseModel, ConfigDict, Field


class ItemRef(BaseModel):
    """Item identity and display data, immutable once resolved."""

    model_config = ConfigDict(frozen=True)

    item_id: int = Field(ge=0)
    name: str = ""
    level: int = 0
    crafting_class: str = ""

    @classmethod
    def unknown(cls, item_id: int) -> "ItemRef":
        """Placeholder for an item missing from master data."""
        return cls(item_id=item_id)
