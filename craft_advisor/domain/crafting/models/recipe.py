"""
Recipe Model

Master-data recipe definition.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .item import ItemRef

MAX_INGREDIENTS = 10


class MaterialRequirement(BaseModel):
    """One ingredient slot of a recipe."""

    model_config = ConfigDict(frozen=True)

    item: ItemRef
    quantity: int = Field(gt=0)


class RecipeDef(BaseModel):
    """A recipe: the item it produces and the materials it consumes."""

    model_config = ConfigDict(frozen=True)

    recipe_id: int
    result: ItemRef
    crafting_class: str = ""
    materials: Tuple[MaterialRequirement, ...] = Field(
        default=(),
        max_length=MAX_INGREDIENTS
    )

    @property
    def result_item_id(self) -> int:
        return self.result.item_id
