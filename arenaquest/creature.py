"""Players, enemies and bosses: stats, equipment and combat arithmetic."""

from __future__ import annotations

import json
import os
import re
import sys
from dataclasses import dataclass, field
from typing import Any

from arenaquest.inventory import Inventory
from arenaquest.item import Item

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def _stoi(value: Any, key: str) -> int:
    """Parse the leading integer of a string stat, as the save format stores them."""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    match = _INT_PREFIX.match(value)
    if match is None:
        raise ValueError(f"{key}: invalid integer {value!r}")
    number = int(match.group(1))
    if not -(2**31) <= number < 2**31:
        raise OverflowError(f"{key}: integer out of range {value!r}")
    return number


@dataclass
class Creature:
    """A combatant with stats, equipped gear, dialogue lines and an inventory."""

    name: str = ""
    hp: int = 0
    armor: int = 0
    money: int = 0
    strength: int = 0
    temp_armor: int = 0
    attack_boost: int = 0
    attack_penalty: int = 0
    active_weapon: Item = field(default_factory=Item)
    active_armor: Item = field(default_factory=Item)
    dialogues: dict[str, list[str]] = field(default_factory=dict)
    inventory: Inventory = field(default_factory=Inventory)

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike[str],
        inventory_texts: dict[str, Any] | None = None,
    ) -> Creature:
        """Load a creature from JSON; unloadable inventory items are reported and skipped."""
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Creature file {os.fspath(path)} must hold a JSON object")

        creature = cls(inventory=Inventory(texts=inventory_texts or {}))

        if "Name" in data:
            if not isinstance(data["Name"], str):
                raise ValueError("Name must be a string")
            creature.name = data["Name"]
        for key, attr in (
            ("Strength", "strength"),
            ("Hp", "hp"),
            ("Armor", "armor"),
            ("Money", "money"),
        ):
            setattr(creature, attr, _stoi(data[key], key) if key in data else 0)

        dialogues = data.get("Dialogues")
        if isinstance(dialogues, dict):
            for key, phrases in dialogues.items():
                if not isinstance(phrases, list):
                    continue
                for phrase in phrases:
                    if not isinstance(phrase, str):
                        raise ValueError(f"Dialogue {key!r} holds a non-string phrase")
                    creature.dialogues.setdefault(key, []).append(phrase)

        entries = data.get("Inventory")
        if isinstance(entries, list):
            for entry in entries:
                if not isinstance(entry, str):
                    continue
                try:
                    creature.inventory.add_item(Item.from_file(entry))
                except (OSError, ValueError) as exc:
                    print(f"Failed to load item from {entry}: {exc}", file=sys.stderr)

        return creature

    @property
    def total_armor(self) -> int:
        """Permanent armour plus this turn's temporary armour."""
        return self.armor + self.temp_armor

    def add_item(self, item: Item) -> None:
        self.inventory.add_item(item)

    def remove_item(self, name: str) -> bool:
        return self.inventory.remove_item(name)

    def set_active_weapon(self, weapon: Item) -> None:
        self.strength += weapon.strength - self.active_weapon.strength
        self.active_weapon = weapon

    def set_active_armor(self, armor: Item) -> None:
        self.armor += armor.strength - self.active_armor.strength
        self.active_armor = armor

    def attack(self) -> int:
        """Return this attack's power and clear one-shot boosts and penalties."""
        total = self.strength + self.attack_boost - self.attack_penalty
        self.attack_boost = 0
        self.attack_penalty = 0
        return total

    def take_damage(self, amount: int) -> None:
        """Apply a hit; armour soaks it twice over, then temporary armour expires."""
        effective_armor = self.total_armor
        damage = amount - self.total_armor
        self.hp -= max(0, damage - effective_armor)
        self.temp_armor = 0

    def is_alive(self) -> bool:
        return self.hp > 0

    def spend_money(self, value: int) -> None:
        self.money -= value

    def set_temporary_armor(self, value: int) -> None:
        self.temp_armor = value

    def heal(self, amount: int) -> None:
        self.hp += amount

    def boost_next_attack(self, amount: int) -> None:
        self.attack_boost = amount

    def reduce_attack_temporarily(self, amount: int) -> None:
        self.attack_penalty = amount