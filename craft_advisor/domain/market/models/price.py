"""
Price Entry Model

Last known unit price of an item.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PriceSource(str, Enum):
    """Where a cached price came from."""
    FETCHED = "fetched"
    OBSERVED = "observed"


class PriceEntry(BaseModel):
    """Unit price of an item; 0 means unknown or unlisted."""

    model_config = ConfigDict(frozen=True)

    item_id: int
    price: int = Field(ge=0)
    source: PriceSource = PriceSource.FETCHED
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
