"""
Market Domain Models

Models related to market board prices.
"""

from .price import PriceEntry, PriceSource

__all__ = [
    "PriceEntry",
    "PriceSource",
]
