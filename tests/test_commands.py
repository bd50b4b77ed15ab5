"""Tests for CommandHandler: command boundary, export and host callbacks."""

import csv

import pytest

from craft_advisor.presentation.commands import RECOMMEND_FAILED_MESSAGE


async def test_recommend_shows_first_page(handler):
    lines = await handler.recommend()
    assert lines[0] == "Page 1/1"
    assert lines[1].startswith("1. Item X - Profit: 350 gil")


async def test_recommend_failure_is_contained(handler, service, caplog):
    async def explode(criteria=""):
        raise RuntimeError("catalog offline")

    service.recommend = explode
    lines = await handler.recommend()

    assert lines == [RECOMMEND_FAILED_MESSAGE]
    assert "catalog offline" in caplog.text


async def test_filter_persists_for_recommend(handler, advisor_config):
    assert await handler.filter("itemlevel:60") == ["Filter set to: itemlevel:60"]
    assert advisor_config.filter_criteria == "itemlevel:60"

    lines = await handler.recommend()
    assert lines == ["No craftable items found with current materials."]

    assert await handler.filter("") == ["Filter cleared."]
    assert (await handler.recommend())[0] == "Page 1/1"


async def test_refresh(handler, price_source):
    await handler.recommend()
    assert await handler.refresh() == ["Price and recipe caches cleared."]
    await handler.recommend()
    assert price_source.calls.count(100) == 2


async def test_export_writes_csv(handler, tmp_path):
    [message] = await handler.export()
    [path] = list(tmp_path.glob("craft_recommendations_*.csv"))

    assert str(path) in message
    with open(path, newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == ["Item Name", "Profitability", "Material Locations"]
    assert rows[1] == ["Item X", "350", "0|1|2"]


async def test_history_command(handler):
    assert await handler.history() == ["No crafting history."]

    handler.record_craft(100, 350)
    handler.record_craft(100, 300)
    lines = await handler.history()
    assert lines == ["Crafting history:", "Item X: 650 gil (2 crafts)"]


async def test_market_purchase_updates_price(handler, service):
    handler.on_market_purchase(100, 2000)
    lines = await handler.recommend()
    assert "Profit: 1,850 gil [high]" in lines[1]


async def test_spawn_runs_command_as_task(handler):
    output = []
    handler._output = output.append

    lines = await handler.spawn("recommend", 1)

    assert lines == output
    assert output[0] == "Page 1/1"


async def test_spawn_contains_unexpected_failures(handler, service):
    async def explode():
        raise RuntimeError("boom")

    service.refresh = explode
    lines = await handler.spawn("refresh")
    assert lines == ["Command refresh failed."]


async def test_spawn_rejects_unknown_command(handler):
    with pytest.raises(ValueError):
        handler.spawn("shutdown")
