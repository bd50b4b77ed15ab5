"""End-to-end pipeline tests against fake game data and prices."""

from craft_advisor.application.services import (
    CatalogCache,
    PriceCache,
    RecommendationService,
)
from tests.fakes import (
    FakeGameData,
    FakePriceSource,
    SCENARIO_ITEMS,
    SCENARIO_PRICES,
    SCENARIO_RECIPES,
)


async def test_craftable_item_profit(service):
    [rec] = await service.recommend()

    assert rec.item_id == 100
    assert rec.name == "Item X"
    assert rec.profitability == 350
    # A is in the bag and retainer 1, B in the bag and retainer 2
    assert rec.material_locations == {1: [0, 1], 2: [0, 2]}


async def test_insufficient_material_excludes_recipe():
    game_data = FakeGameData(
        inventory=[(1, 10), (2, 3)],
        items=SCENARIO_ITEMS,
        recipes=SCENARIO_RECIPES,
    )
    service = RecommendationService(
        game_data,
        PriceCache(FakePriceSource(SCENARIO_PRICES)),
        CatalogCache(game_data),
    )
    assert await service.recommend() == []


async def test_sorted_by_profit_descending():
    items = {i: {"name": f"Item {i}", "level": i} for i in range(1, 6)}
    recipes = {
        r: {"result_item_id": r + 1, "crafting_class": "Cook", "ingredients": [[1, 1]]}
        for r in range(1, 5)
    }
    prices = {1: 0, 2: 30, 3: 10, 4: 50, 5: 20}
    game_data = FakeGameData(inventory=[(1, 1)], items=items, recipes=recipes)
    service = RecommendationService(
        game_data, PriceCache(FakePriceSource(prices)), CatalogCache(game_data)
    )

    recs = await service.recommend()
    assert [r.item_id for r in recs] == [4, 2, 5, 3]


async def test_filter_applied(service):
    assert len(await service.recommend("craftingclass:blacksmith")) == 1
    assert await service.recommend("itemlevel:51") == []


async def test_inventory_read_once_per_request(service, game_data):
    await service.recommend()
    assert game_data.inventory_reads == 1


async def test_refresh_clears_caches(service, price_source):
    await service.recommend()
    await service.refresh()
    await service.recommend()

    assert sorted(price_source.calls) == [1, 1, 2, 2, 100, 100]


async def test_observed_price_used_in_next_request(service):
    await service.recommend()
    await service.price_cache.observe_price(100, 1000)

    [rec] = await service.recommend()
    assert rec.profitability == 850
