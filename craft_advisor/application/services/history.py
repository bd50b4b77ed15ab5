"""
History Tracker

Bounded in-memory log of completed crafts.
"""

import logging
import threading
from collections import OrderedDict
from typing import List

from ...domain.crafting.models import HistoryEntry, HistorySummary

logger = logging.getLogger(__name__)


class HistoryTracker:
    """Append-only craft log; the oldest entry is evicted past the cap."""

    def __init__(self, max_entries: int = 100):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._entries: List[HistoryEntry] = []
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @max_entries.setter
    def max_entries(self, value: int) -> None:
        if value < 1:
            raise ValueError("max_entries must be at least 1")
        with self._lock:
            self._max_entries = value
            while len(self._entries) > self._max_entries:
                self._entries.pop(0)

    def record(self, item_id: int, profit: int) -> HistoryEntry:
        """Append a craft, evicting the oldest entry if over the cap."""
        entry = HistoryEntry(item_id=item_id, profit=profit)
        with self._lock:
            self._entries.append(entry)
            if len(self._entries) > self._max_entries:
                evicted = self._entries.pop(0)
                logger.debug(f"History full, evicted craft of item {evicted.item_id}")
        return entry

    def entries(self) -> List[HistoryEntry]:
        """Oldest first."""
        with self._lock:
            return list(self._entries)

    def summarize(self) -> List[HistorySummary]:
        """Total profit and craft count per item."""
        groups: "OrderedDict[int, HistorySummary]" = OrderedDict()
        for entry in self.entries():
            summary = groups.get(entry.item_id)
            if summary is None:
                groups[entry.item_id] = HistorySummary(
                    item_id=entry.item_id,
                    total_profit=entry.profit,
                    count=1
                )
            else:
                summary.total_profit += entry.profit
                summary.count += 1
        return list(groups.values())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
