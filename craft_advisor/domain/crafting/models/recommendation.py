"""
Recommendation Models

Per-request profitability results. Never cached.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from .item import ItemRef


class MaterialCost(BaseModel):
    """Denormalized view of one recipe ingredient for display."""

    item: ItemRef
    quantity: int
    name: str = ""
    unit_price: int = 0
    locations: List[int] = Field(default_factory=list)

    @property
    def total_cost(self) -> int:
        return self.unit_price * self.quantity


class Recommendation(BaseModel):
    """A craftable item and how much crafting it is worth."""

    item: ItemRef
    crafting_class: str = ""
    crafted_price: int = 0
    material_cost: int = 0
    # crafted_price - material_cost, never clamped
    profitability: int = 0
    materials: List[MaterialCost] = Field(default_factory=list)
    material_locations: Dict[int, List[int]] = Field(default_factory=dict)

    @property
    def item_id(self) -> int:
        return self.item.item_id

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def level(self) -> int:
        return self.item.level
