"""
Dependency Injection Container

Central container for managing application dependencies.
"""

import logging
from typing import Optional

from dependency_injector import containers, providers

from .config import ConfigLoader, Settings
from .protocols import GameDataProtocol
from ..application.services import (
    CatalogCache,
    FilterEngine,
    HistoryTracker,
    PriceCache,
    RecommendationService,
)
from ..infrastructure.api import UniversalisClient
from ..presentation.commands import CommandHandler

logger = logging.getLogger(__name__)


class Container(containers.DeclarativeContainer):
    """Main DI container for the application."""

    # Load settings
    settings = providers.Singleton(
        ConfigLoader.load_config
    )

    # Game client, supplied by the host
    game_data = providers.Dependency()

    # Infrastructure - Pricing API Client
    pricing_client = providers.Singleton(
        UniversalisClient.from_config,
        config=settings.provided.pricing,
    )

    # Services - shared caches
    price_cache = providers.Singleton(
        PriceCache,
        source=pricing_client,
        max_concurrency=settings.provided.pricing.max_concurrency,
    )

    catalog = providers.Singleton(
        CatalogCache,
        game_data=game_data,
    )

    history = providers.Singleton(
        HistoryTracker,
        max_entries=settings.provided.advisor.max_history_entries,
    )

    filter_engine = providers.Singleton(FilterEngine)

    recommendation_service = providers.Singleton(
        RecommendationService,
        game_data=game_data,
        price_cache=price_cache,
        catalog=catalog,
        filter_engine=filter_engine,
    )

    # Presentation
    command_handler = providers.Singleton(
        CommandHandler,
        service=recommendation_service,
        history=history,
        catalog=catalog,
        advisor_config=settings.provided.advisor,
    )


def create_container(
    game_data: GameDataProtocol,
    settings: Optional[Settings] = None
) -> Container:
    """
    Build a container bound to a game client.

    Args:
        game_data: Host game client
        settings: Settings to use instead of loading them from the environment

    Returns:
        Configured container
    """
    container = Container()
    container.game_data.override(providers.Object(game_data))

    if settings is not None:
        container.settings.override(providers.Object(settings))

    logger.info("Container initialized")
    return container


async def shutdown_container(container: Container) -> None:
    """Close network resources held by the container."""
    client = container.pricing_client()
    await client.close()

    logger.info("Container shutdown complete")
