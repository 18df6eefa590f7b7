import json

import pytest

from arenaquest.creature import Creature
from arenaquest.item import Item


def _write(tmp_path, name, data):
    target = tmp_path / name
    target.write_text(json.dumps(data), encoding="utf-8")
    return target


@pytest.fixture
def sword_path(tmp_path):
    return _write(
        tmp_path,
        "sword.json",
        {"name": "Sword", "type": "Weapon", "strength": 5, "price": 10},
    )


def test_from_file_reads_stats_dialogues_and_inventory(tmp_path, sword_path):
    path = _write(
        tmp_path,
        "hero.json",
        {
            "Name": "Hero",
            "Strength": "12",
            "Hp": "100",
            "Armor": "3",
            "Money": "50",
            "Dialogues": {"StartFight": ["Hi", "Yo"], "Empty": []},
            "Inventory": [str(sword_path)],
        },
    )
    texts = {"InventoryEmpty": "nothing"}
    hero = Creature.from_file(path, texts)
    assert (hero.name, hero.strength, hero.hp, hero.armor, hero.money) == (
        "Hero", 12, 100, 3, 50,
    )
    assert hero.dialogues == {"StartFight": ["Hi", "Yo"]}
    assert [item.name for item in hero.inventory.items] == ["Sword"]
    assert hero.inventory.texts == texts
    assert (hero.temp_armor, hero.attack_boost, hero.attack_penalty) == (0, 0, 0)


def test_missing_stats_default_to_zero(tmp_path):
    creature = Creature.from_file(_write(tmp_path, "blank.json", {}))
    assert (creature.name, creature.strength, creature.hp, creature.armor, creature.money) == (
        "", 0, 0, 0, 0,
    )


def test_stat_strings_parse_leading_integer(tmp_path):
    creature = Creature.from_file(
        _write(tmp_path, "c.json", {"Strength": "12abc", "Hp": " 7"})
    )
    assert (creature.strength, creature.hp) == (12, 7)


def test_non_numeric_stat_raises(tmp_path):
    with pytest.raises(ValueError):
        Creature.from_file(_write(tmp_path, "c.json", {"Hp": "lots"}))


def test_stat_must_be_string(tmp_path):
    with pytest.raises(ValueError):
        Creature.from_file(_write(tmp_path, "c.json", {"Hp": 10}))


def test_bad_item_is_reported_and_skipped(tmp_path, sword_path, capsys):
    path = _write(
        tmp_path,
        "c.json",
        {"Inventory": [str(tmp_path / "missing.json"), str(sword_path), 5]},
    )
    creature = Creature.from_file(path)
    assert [item.name for item in creature.inventory.items] == ["Sword"]
    assert "Failed to load item from" in capsys.readouterr().err


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Creature.from_file(tmp_path / "nobody.json")


def test_attack_uses_and_clears_boost_and_penalty():
    creature = Creature(strength=10)
    creature.boost_next_attack(4)
    assert creature.attack() == 10 + 4
    assert creature.attack() == 10
    creature.reduce_attack_temporarily(3)
    assert creature.attack() == 10 - 3
    assert creature.attack() == 10


def test_take_damage_without_armor_subtracts_amount():
    creature = Creature(hp=50)
    creature.take_damage(7)
    assert creature.hp == 50 - 7


def test_take_damage_with_armor_pinned():
    creature = Creature(hp=100, armor=3)
    creature.set_temporary_armor(2)
    creature.take_damage(20)
    assert creature.hp == 90
    assert creature.temp_armor == 0


def test_armor_absorbs_small_hits_completely():
    creature = Creature(hp=40, armor=5)
    creature.take_damage(10)
    creature.take_damage(1)
    assert creature.hp == 40


def test_total_armor_includes_temporary():
    creature = Creature(armor=4)
    creature.set_temporary_armor(6)
    assert creature.total_armor == 4 + 6
    assert creature.armor == 4


def test_weapon_swap_replaces_strength_bonus():
    creature = Creature(strength=10)
    creature.set_active_weapon(Item(name="Sword", type="Weapon", strength=5))
    assert creature.strength == 10 + 5
    creature.set_active_weapon(Item(name="Axe", type="Weapon", strength=8))
    assert creature.strength == 10 + 8
    assert creature.active_weapon.name == "Axe"


def test_armor_swap_replaces_armor_bonus():
    creature = Creature(armor=2)
    creature.set_active_armor(Item(name="Mail", type="Armor", strength=4))
    creature.set_active_armor(Item(name="Plate", type="Armor", strength=6))
    assert creature.armor == 2 + 6
    assert creature.active_armor.name == "Plate"


def test_heal_money_and_alive():
    creature = Creature(hp=0, money=30)
    assert not creature.is_alive()
    creature.heal(15)
    creature.spend_money(12)
    assert creature.hp == 15
    assert creature.money == 30 - 12
    assert creature.is_alive()


def test_add_and_remove_item():
    creature = Creature()
    potion = Item(name="Potion", type="Potion", strength=20, price=3)
    creature.add_item(potion)
    assert creature.inventory.has_item("Potion")
    assert creature.remove_item("Potion") is True
    assert creature.inventory.items == []