"""
Crafting History Models

Completed crafts and their per-item aggregates.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HistoryEntry(BaseModel):
    """A completed craft."""

    model_config = ConfigDict(frozen=True)

    item_id: int
    profit: int
    timestamp: datetime = Field(default_factory=_utcnow)


class HistorySummary(BaseModel):
    """Total profit and craft count for one item."""

    item_id: int
    total_profit: int
    count: int

    @property
    def average_profit(self) -> float:
        if self.count > 0:
            return self.total_profit / self.count
        return 0.0
