"""
Filter Engine

Narrows recommendations with a ``key:value;key:value`` criteria string.

Supported keys (case-insensitive):

    itemlevel:<int>        item level at least <int>
    craftingclass:<name>   crafting discipline equals <name>, any case

Clauses apply in order, each narrowing the previous result. Malformed
clauses, non-numeric levels and unknown keys are skipped.
"""

import logging
import re
from typing import Callable, Dict, List, Optional

from ...domain.crafting.models import Recommendation

logger = logging.getLogger(__name__)

ClauseFilter = Callable[[List[Recommendation], str], Optional[List[Recommendation]]]

LEVEL_PATTERN = re.compile(r"-?[0-9]+")


class FilterEngine:
    """Applies criteria clauses to a recommendation list."""

    def __init__(self):
        self._filters: Dict[str, ClauseFilter] = {
            "itemlevel": self._filter_item_level,
            "craftingclass": self._filter_crafting_class,
        }

    def register(self, key: str, clause_filter: ClauseFilter) -> None:
        """
        Add or replace a clause key.

        The filter returns the narrowed list, or None to skip the clause.
        """
        self._filters[key.strip().lower()] = clause_filter

    def filter(
        self,
        recommendations: List[Recommendation],
        criteria: Optional[str]
    ) -> List[Recommendation]:
        if not criteria or not criteria.strip():
            return recommendations

        result = list(recommendations)
        for clause in criteria.split(";"):
            parts = clause.split(":", 1)
            if len(parts) != 2:
                if clause.strip():
                    logger.debug(f"Skipping malformed filter clause {clause!r}")
                continue

            key, value = parts[0].strip().lower(), parts[1].strip()
            clause_filter = self._filters.get(key)
            if clause_filter is None:
                logger.debug(f"Ignoring unknown filter key {key!r}")
                continue

            narrowed = clause_filter(result, value)
            if narrowed is not None:
                result = narrowed

        return result

    @staticmethod
    def _filter_item_level(
        recommendations: List[Recommendation],
        value: str
    ) -> Optional[List[Recommendation]]:
        if not LEVEL_PATTERN.fullmatch(value):
            logger.debug(f"Skipping itemlevel clause with non-numeric value {value!r}")
            return None
        min_level = int(value)
        return [rec for rec in recommendations if rec.level >= min_level]

    @staticmethod
    def _filter_crafting_class(
        recommendations: List[Recommendation],
        value: str
    ) -> Optional[List[Recommendation]]:
        if not value:
            return None
        wanted = value.casefold()
        return [
            rec for rec in recommendations
            if rec.crafting_class.casefold() == wanted
        ]
