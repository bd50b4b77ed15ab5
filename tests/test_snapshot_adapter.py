"""Tests for SnapshotGameData."""

import json

import pytest

from craft_advisor.adapters import SnapshotGameData
from craft_advisor.core.exceptions import SnapshotError

SNAPSHOT = {
    "inventory": [[1, 10]],
    "retainers": [[[2, 3]], []],
    "saddlebag": [[2, 2]],
    "items": {"1": {"name": "Material A"}, "2": {"name": "Material B"}},
    "recipes": {"10": {"result_item_id": 100, "ingredients": [[1, 5]]}},
}


def test_from_file(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT))

    data = SnapshotGameData.from_file(path)

    assert data.get_inventory() == [(1, 10)]
    assert data.get_retainer_count() == 2
    assert data.get_retainer_inventory(0) == [(2, 3)]
    assert data.get_retainer_inventory(1) == []
    assert data.get_saddlebag() == [(2, 2)]
    assert data.get_item(1) == {"name": "Material A"}
    assert data.get_item(3) is None
    assert list(data.iter_recipes()) == [10]
    assert data.get_recipe(10)["result_item_id"] == 100


def test_invalid_stack_rejected():
    with pytest.raises(SnapshotError) as exc_info:
        SnapshotGameData({"inventory": [["x"]]})

    assert exc_info.value.section == "inventory"
    assert exc_info.value.value == ["x"]


def test_non_object_file_rejected(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text("[]")
    with pytest.raises(SnapshotError):
        SnapshotGameData.from_file(path)
