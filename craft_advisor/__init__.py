"""
Craft Advisor - Crafting Profitability Recommendations

Recommends which craftable items yield the highest profit from the
materials a player currently holds, using live market board prices.
"""

__version__ = "1.0.0"
__author__ = "Craft Advisor Team"

# Public API exports
from .core.config import Settings
from .core.exceptions import CraftAdvisorError

__all__ = [
    "Settings",
    "CraftAdvisorError",
]
