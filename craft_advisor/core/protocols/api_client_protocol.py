"""
API Client Protocol Definition

Defines the interface for market price sources.
"""

from typing import Protocol


class PriceSourceProtocol(Protocol):
    """Protocol for remote price lookups."""

    async def get_cheapest_listing(self, item_id: int) -> int:
        """
        Fetch the unit price of the cheapest current listing.

        Args:
            item_id: Item ID

        Returns:
            Unit price, or 0 when the item has no listings

        Raises:
            APIError: If the request fails
        """
        ...
