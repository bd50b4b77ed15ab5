"""
Application Services

Recommendation pipeline stages, leaf-first.
"""

from .pricing import PriceCache
from .catalog import CatalogCache
from .inventory import InventoryAggregator
from .matcher import CraftabilityMatcher
from .profitability import ProfitabilityAnalyzer
from .filters import FilterEngine
from .history import HistoryTracker
from .recommendation import RecommendationService

__all__ = [
    "PriceCache",
    "CatalogCache",
    "InventoryAggregator",
    "CraftabilityMatcher",
    "ProfitabilityAnalyzer",
    "FilterEngine",
    "HistoryTracker",
    "RecommendationService",
]
