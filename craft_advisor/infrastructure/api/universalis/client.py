"""
Universalis API Client

Looks up current market board listings.
"""

import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from ....core.config import PricingConfig
from ....core.exceptions import APIError
from ..base_client import BaseAPIClient
from .models import MarketBoardResponse

logger = logging.getLogger(__name__)


class UniversalisClient(BaseAPIClient):
    """Market board client scoped to one region and language."""

    def __init__(
        self,
        base_url: str = "https://universalis.app/api/v2",
        region: str = "Japan",
        language: str = "en",
        entries: int = 1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs
    ):
        """
        Initialize market board client.

        Args:
            base_url: Pricing service base URL
            region: World, data center or region name
            language: Response language
            entries: Listings requested per item
            transport: Optional httpx transport
            **kwargs: Additional arguments for base client
        """
        super().__init__(base_url=base_url, transport=transport, **kwargs)

        self.region = region
        self.language = language
        self.entries = entries

    @classmethod
    def from_config(
        cls,
        config: PricingConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "UniversalisClient":
        """Build a client from pricing settings."""
        return cls(
            base_url=config.base_url,
            region=config.region,
            language=config.language,
            entries=config.entries,
            timeout=config.timeout,
            max_attempts=config.max_attempts,
            rate_limit=config.max_concurrency,
            transport=transport
        )

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        return {
            "Accept": "application/json",
            "User-Agent": "CraftAdvisor/1.0"
        }

    async def get_market_board(self, item_id: int) -> MarketBoardResponse:
        """Get current listings for an item."""
        endpoint = f"/{self.region}/{item_id}"
        params = {"entries": self.entries, "language": self.language}
        data = await self.get(endpoint, params=params)

        if not isinstance(data, dict):
            raise APIError(
                f"Unexpected payload for item {item_id}",
                endpoint=endpoint
            )

        try:
            return MarketBoardResponse.model_validate(data)
        except PydanticValidationError as e:
            raise APIError(
                f"Malformed listings for item {item_id}",
                endpoint=endpoint
            ) from e

    async def get_cheapest_listing(self, item_id: int) -> int:
        """Unit price of the cheapest current listing (0 if none)."""
        board = await self.get_market_board(item_id)
        return board.cheapest_price
