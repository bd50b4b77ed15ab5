"""
Core Protocol Definitions

This module defines the interfaces that all implementations must follow.
"""

from .cache_protocol import CacheProtocol
from .api_client_protocol import PriceSourceProtocol
from .game_data_protocol import GameDataProtocol

__all__ = [
    "CacheProtocol",
    "PriceSourceProtocol",
    "GameDataProtocol",
]
