"""Tests for CraftabilityMatcher: all-or-nothing material coverage."""

from craft_advisor.application.services import CraftabilityMatcher
from craft_advisor.domain.crafting.models import (
    InventoryEntry,
    ItemRef,
    MaterialRequirement,
    RecipeDef,
)


def recipe(recipe_id, result_id, *materials):
    return RecipeDef(
        recipe_id=recipe_id,
        result=ItemRef(item_id=result_id),
        materials=tuple(
            MaterialRequirement(item=ItemRef(item_id=item_id), quantity=quantity)
            for item_id, quantity in materials
        ),
    )


def entry(item_id, quantity, location_id=0):
    return InventoryEntry(item_id=item_id, quantity=quantity, location_id=location_id)


def test_craftable_when_every_material_covered():
    inventory = [entry(1, 10), entry(2, 5)]
    craftable = CraftabilityMatcher().match(inventory, [recipe(10, 100, (1, 5), (2, 5))])
    assert list(craftable) == [100]


def test_no_partial_match():
    inventory = [entry(1, 10), entry(2, 3)]
    craftable = CraftabilityMatcher().match(inventory, [recipe(10, 100, (1, 5), (2, 5))])
    assert craftable == {}


def test_quantities_summed_across_locations():
    inventory = [entry(1, 2, 0), entry(1, 2, 1), entry(1, 1, 9999)]
    craftable = CraftabilityMatcher().match(inventory, [recipe(10, 100, (1, 5))])
    assert 100 in craftable


def test_absent_material_fails():
    craftable = CraftabilityMatcher().match([entry(1, 10)], [recipe(10, 100, (1, 1), (3, 1))])
    assert craftable == {}


def test_later_recipe_for_same_result_wins():
    first = recipe(10, 100, (1, 1))
    second = recipe(11, 100, (1, 2))
    craftable = CraftabilityMatcher().match([entry(1, 5)], [first, second])
    assert craftable[100].recipe_id == 11


def test_property_matches_totals():
    """A recipe qualifies iff each requirement is within the summed stock."""
    inventory = [entry(1, 3, 0), entry(1, 4, 1), entry(2, 1, 2)]
    totals = {1: 7, 2: 1}
    recipes = [
        recipe(r, 100 + r, (1, q1), (2, q2))
        for r, (q1, q2) in enumerate([(1, 1), (7, 1), (8, 1), (7, 2), (3, 1)])
    ]
    craftable = CraftabilityMatcher().match(inventory, recipes)

    for r in recipes:
        expected = all(totals.get(m.item.item_id, 0) >= m.quantity for m in r.materials)
        assert (r.result_item_id in craftable) == expected
