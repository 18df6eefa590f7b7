import json

import pytest

from arenaquest.item import Item


def _write(tmp_path, name, data):
    target = tmp_path / name
    target.write_text(json.dumps(data), encoding="utf-8")
    return target


def test_default_item_is_unknown():
    item = Item()
    assert (item.name, item.type, item.strength, item.price) == ("Unknown", "Unknown", 0, 0)


def test_from_file_reads_all_fields(tmp_path):
    path = _write(
        tmp_path,
        "sword.json",
        {"name": "Sword", "type": "Weapon", "strength": 5, "price": 10},
    )
    item = Item.from_file(path)
    assert item == Item(name="Sword", type="Weapon", strength=5, price=10, path=str(path))


def test_from_file_accepts_string_path(tmp_path):
    path = _write(
        tmp_path,
        "potion.json",
        {"name": "Potion", "type": "Potion", "strength": 20, "price": 3},
    )
    assert Item.from_file(str(path)).path == str(path)


def test_missing_key_raises(tmp_path):
    path = _write(tmp_path, "bad.json", {"name": "Sword", "type": "Weapon", "strength": 5})
    with pytest.raises(ValueError, match="Invalid item format"):
        Item.from_file(path)


def test_wrong_value_type_raises(tmp_path):
    path = _write(
        tmp_path,
        "bad.json",
        {"name": "Sword", "type": "Weapon", "strength": "5", "price": 10},
    )
    with pytest.raises(ValueError):
        Item.from_file(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Item.from_file(tmp_path / "nope.json")


def test_malformed_json_raises(tmp_path):
    target = tmp_path / "broken.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        Item.from_file(target)