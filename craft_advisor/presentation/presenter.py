"""
Presenter

Pagination and text formatting for recommendations and history.
"""

import math
from dataclasses import dataclass
from typing import Any, Generic, List, TypeVar

from ..core.config import AdvisorConfig
from ..domain.crafting.models import (
    HistorySummary,
    ItemRef,
    PERSONAL_BAG_LOCATION,
    Recommendation,
    SADDLEBAG_LOCATION,
)

T = TypeVar('T')


@dataclass
class Page(Generic[T]):
    """One page of results."""
    items: List[T]
    number: int
    total_pages: int
    start_index: int = 0
    total_items: int = 0

    @property
    def header(self) -> str:
        return f"Page {self.number}/{self.total_pages}"


class Paginator:
    """Splits result lists into fixed-size pages."""

    def __init__(self, page_size: int = 10):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size

    def total_pages(self, total_items: int) -> int:
        return max(1, math.ceil(total_items / self.page_size))

    def paginate(self, items: List[T], page: Any = 1) -> Page[T]:
        """
        Slice out ``page`` (1-based).

        Any page outside 1..total_pages, or one that is not a number,
        falls back to page 1.
        """
        total_pages = self.total_pages(len(items))
        number = self._parse_page(page)
        if number > total_pages:
            number = 1

        start = (number - 1) * self.page_size
        return Page(
            items=items[start:start + self.page_size],
            number=number,
            total_pages=total_pages,
            start_index=start,
            total_items=len(items)
        )

    @staticmethod
    def _parse_page(page: Any) -> int:
        try:
            number = int(page)
        except (TypeError, ValueError):
            return 1
        return number if number >= 1 else 1


def profit_tier(profit: int, config: AdvisorConfig) -> str:
    """Display tier used to colour a profit value."""
    if profit >= config.high_profit_threshold:
        return "high"
    if profit >= config.medium_profit_threshold:
        return "medium"
    return "low"


def describe_location(location_id: int) -> str:
    if location_id == PERSONAL_BAG_LOCATION:
        return "Inventory"
    if location_id == SADDLEBAG_LOCATION:
        return "Saddlebag"
    return f"Retainer {location_id}"


def format_recommendations(page: Page[Recommendation], config: AdvisorConfig) -> List[str]:
    """Render a page of recommendations as chat lines."""
    if not page.total_items:
        return ["No craftable items found with current materials."]

    lines = [page.header]
    for offset, rec in enumerate(page.items, start=page.start_index + 1):
        name = rec.name or f"Item #{rec.item_id}"
        tier = profit_tier(rec.profitability, config)
        lines.append(f"{offset}. {name} - Profit: {rec.profitability:,} gil [{tier}]")
        for material in rec.materials:
            held_at = ", ".join(describe_location(loc) for loc in material.locations) or "-"
            material_name = material.name or f"Item #{material.item.item_id}"
            lines.append(
                f"    {material.quantity}x {material_name} "
                f"@ {material.unit_price:,} ({held_at})"
            )
    return lines


def format_history(summaries: List[HistorySummary], items: List[ItemRef]) -> List[str]:
    """
    Render per-item history totals.

    ``items`` holds the resolved item for each summary, in the same order.
    """
    if not summaries:
        return ["No crafting history."]

    lines = ["Crafting history:"]
    for summary, item in zip(summaries, items):
        name = item.name or f"Item #{summary.item_id}"
        noun = "craft" if summary.count == 1 else "crafts"
        lines.append(f"{name}: {summary.total_profit:,} gil ({summary.count} {noun})")
    return lines
