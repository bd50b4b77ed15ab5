"""
Command Handler

Runs each chat command as an independent task against the shared
recommendation service. Every failure is contained here: the user sees a
single message and the process keeps running.
"""

import asyncio
import logging
from typing import Any, Callable, List, Optional, Set

from ...application.services import CatalogCache, HistoryTracker, RecommendationService
from ...core.config import AdvisorConfig
from ...domain.crafting.models import HistoryEntry
from ..export import export_csv
from ..presenter import Paginator, format_history, format_recommendations

logger = logging.getLogger(__name__)

RECOMMEND_FAILED_MESSAGE = "Failed to generate recommendations."

OutputFn = Callable[[str], None]


class CommandHandler:
    """Chat command surface."""

    COMMANDS = ("recommend", "refresh", "export", "history", "filter")

    def __init__(
        self,
        service: RecommendationService,
        history: HistoryTracker,
        catalog: CatalogCache,
        advisor_config: AdvisorConfig,
        output: Optional[OutputFn] = None
    ):
        """
        Initialize command handler.

        Args:
            service: Recommendation pipeline
            history: Craft history log
            catalog: Catalog used to name history entries
            advisor_config: Display and filter settings; ``filter``
                updates ``filter_criteria`` in place
            output: Receives lines from spawned commands (logs by default)
        """
        self.service = service
        self.history_tracker = history
        self.catalog = catalog
        self.config = advisor_config
        self.paginator = Paginator(advisor_config.page_size)
        self._output = output or (lambda line: logger.info(line))
        self._tasks: Set[asyncio.Task] = set()

    async def recommend(self, page: Any = 1) -> List[str]:
        """Page of recommendations under the saved filter."""
        try:
            recommendations = await self.service.recommend(self.config.filter_criteria)
        except Exception as e:
            logger.error(f"Recommendation pipeline failed: {e}", exc_info=True)
            return [RECOMMEND_FAILED_MESSAGE]

        return format_recommendations(
            self.paginator.paginate(recommendations, page),
            self.config
        )

    async def refresh(self) -> List[str]:
        await self.service.refresh()
        return ["Price and recipe caches cleared."]

    async def export(self) -> List[str]:
        try:
            recommendations = await self.service.recommend(self.config.filter_criteria)
            path = export_csv(recommendations, self.config.export_dir)
        except Exception as e:
            logger.error(f"Export failed: {e}", exc_info=True)
            return ["Failed to export recommendations."]

        return [f"Exported {len(recommendations)} recommendations to {path}"]

    async def history(self) -> List[str]:
        summaries = self.history_tracker.summarize()
        items = [await self.catalog.get_item(summary.item_id) for summary in summaries]
        return format_history(summaries, items)

    async def filter(self, criteria: str = "") -> List[str]:
        """Save the criteria used by later ``recommend`` calls."""
        self.config.filter_criteria = (criteria or "").strip()
        if not self.config.filter_criteria:
            return ["Filter cleared."]
        return [f"Filter set to: {self.config.filter_criteria}"]

    def record_craft(self, item_id: int, profit: int) -> HistoryEntry:
        """Called by the host when a craft completes."""
        return self.history_tracker.record(item_id, profit)

    def on_market_purchase(self, item_id: int, price_per_unit: int) -> None:
        """
        Called by the host for every completed market purchase.

        Safe to call from the host's network thread.
        """
        self.service.price_cache.observe_price_nowait(item_id, price_per_unit)

    def spawn(self, command: str, *args: Any) -> asyncio.Task:
        """
        Run a command as its own task and send its lines to the output.

        Must be called from inside the running event loop.
        """
        if command not in self.COMMANDS:
            raise ValueError(f"Unknown command: {command}")
        handler = getattr(self, command)

        task = asyncio.get_running_loop().create_task(
            self._run(command, handler, *args),
            name=f"command:{command}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, command: str, handler: Callable, *args: Any) -> List[str]:
        try:
            lines = await handler(*args)
        except Exception as e:
            logger.error(f"Command {command} failed: {e}", exc_info=True)
            lines = [f"Command {command} failed."]

        for line in lines:
            self._output(line)
        return lines
