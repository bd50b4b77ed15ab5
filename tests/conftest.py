"""Shared fixtures for the craft advisor test suite."""

import logging

import pytest

from craft_advisor.application.services import (
    CatalogCache,
    HistoryTracker,
    PriceCache,
    RecommendationService,
)
from craft_advisor.core.config import AdvisorConfig, ConfigLoader
from craft_advisor.presentation.commands import CommandHandler
from tests.fakes import (
    FakeGameData,
    FakePriceSource,
    SCENARIO_ITEMS,
    SCENARIO_PRICES,
    SCENARIO_RECIPES,
)

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def reset_config_loader():
    """ConfigLoader is a process-wide singleton."""
    ConfigLoader._settings = None
    yield
    ConfigLoader._settings = None


@pytest.fixture
def game_data():
    """10 of A and 5 of B, split across storage; one recipe for X."""
    return FakeGameData(
        inventory=[(1, 6), (2, 2)],
        retainers=[[(1, 4)], [(2, 3)]],
        saddlebag=[],
        items=SCENARIO_ITEMS,
        recipes=SCENARIO_RECIPES,
    )


@pytest.fixture
def price_source():
    return FakePriceSource(SCENARIO_PRICES)


@pytest.fixture
def price_cache(price_source):
    return PriceCache(price_source, max_concurrency=4)


@pytest.fixture
def catalog(game_data):
    return CatalogCache(game_data)


@pytest.fixture
def service(game_data, price_cache, catalog):
    return RecommendationService(game_data, price_cache, catalog)


@pytest.fixture
def advisor_config(tmp_path):
    return AdvisorConfig(
        high_profit_threshold=1000,
        medium_profit_threshold=100,
        filter_criteria="",
        max_history_entries=5,
        page_size=10,
        export_dir=str(tmp_path),
    )


@pytest.fixture
def history():
    return HistoryTracker(max_entries=5)


@pytest.fixture
def handler(service, history, catalog, advisor_config):
    return CommandHandler(service, history, catalog, advisor_config)
