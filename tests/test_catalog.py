"""Tests for CatalogCache: lazy loading and missing master data."""

from craft_advisor.application.services import CatalogCache
from craft_advisor.domain.crafting.models import ItemRef
from tests.fakes import FakeGameData


def make_game_data():
    return FakeGameData(
        items={
            1: {"name": "Iron Ore", "level": 1},
            2: {"name": "Coke", "level": 3},
            3: {"name": "Iron Ingot", "level": 5},
        },
        recipes={
            7: {
                "result_item_id": 3,
                "crafting_class": "Blacksmith",
                "ingredients": [[1, 3], [0, 0], [2, 1], [1, 0]],
            },
        },
    )


async def test_item_loaded_once():
    game_data = make_game_data()
    catalog = CatalogCache(game_data)

    first = await catalog.get_item(1)
    second = await catalog.get_item(1)

    assert first == ItemRef(item_id=1, name="Iron Ore", level=1)
    assert second is first
    assert game_data.item_loads == 1


async def test_missing_item_degrades_to_placeholder():
    catalog = CatalogCache(make_game_data())
    item = await catalog.get_item(404)
    assert item.item_id == 404
    assert item.name == ""
    assert item.level == 0


async def test_recipe_parsing_drops_empty_slots():
    catalog = CatalogCache(make_game_data())
    recipe = await catalog.get_recipe(7)

    assert recipe.result_item_id == 3
    assert recipe.crafting_class == "Blacksmith"
    assert [(m.item.item_id, m.quantity) for m in recipe.materials] == [(1, 3), (2, 1)]
    assert recipe.materials[0].item.name == "Iron Ore"


async def test_result_item_inherits_recipe_class():
    catalog = CatalogCache(make_game_data())
    recipe = await catalog.get_recipe(7)
    assert recipe.result.crafting_class == "Blacksmith"


async def test_missing_recipe_is_none():
    catalog = CatalogCache(make_game_data())
    assert await catalog.get_recipe(99) is None


async def test_ingredient_slots_capped_at_ten():
    game_data = FakeGameData(
        recipes={1: {"result_item_id": 50, "ingredients": [[i, 1] for i in range(1, 13)]}},
    )
    recipe = await CatalogCache(game_data).get_recipe(1)
    assert len(recipe.materials) == 10


async def test_get_recipes_and_clear():
    game_data = make_game_data()
    catalog = CatalogCache(game_data)

    recipes = await catalog.get_recipes()
    assert [r.recipe_id for r in recipes] == [7]
    await catalog.get_recipes()
    assert game_data.recipe_loads == 1

    assert await catalog.clear() > 0
    await catalog.get_recipes()
    assert game_data.recipe_loads == 2
