"""
Universalis Market Board API

Client and response models for the market board pricing service.
"""

from .client import UniversalisClient
from .models import Listing, MarketBoardResponse

__all__ = [
    "UniversalisClient",
    "Listing",
    "MarketBoardResponse",
]
