"""
Universalis API Models

Pydantic models for market board responses. Listing data that does not
have the expected shape reads as "no price" (0) instead of failing the
whole response.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Listing(BaseModel):
    """A single market board listing."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    price_per_unit: int = Field(0, alias="pricePerUnit", ge=0)

    @field_validator("price_per_unit", mode="before")
    @classmethod
    def malformed_price_is_zero(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return 0
        return value


class MarketBoardResponse(BaseModel):
    """Current listings for one item."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    listings: List[Listing] = Field(default_factory=list)

    @field_validator("listings", mode="before")
    @classmethod
    def malformed_listings_are_empty(cls, value: Any) -> List[Any]:
        if not isinstance(value, list):
            return []
        return [item if isinstance(item, dict) else {} for item in value]

    @property
    def cheapest_price(self) -> int:
        """Unit price of the first listing, 0 when there is none."""
        if not self.listings:
            return 0
        return self.listings[0].price_per_unit
