"""The world map: choosing to fight, shop, use items or save."""

from __future__ import annotations

import json
import os
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from arenaquest import dice
from arenaquest.battle import CLEAR_SCREEN, BattleManager
from arenaquest.creature import Creature
from arenaquest.market import Market
from arenaquest.saves import SaveManager

EXIT_WORD = "Exit"
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def _read_word(input_fn: Callable[[], str]) -> str:
    while True:
        words = input_fn().split()
        if words:
            return words[0]


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _path_value(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"World entry {key!r} must be a path string")
    return value


@dataclass
class World:
    """One world: its enemies, boss and market, and the player's menu."""

    texts: dict[str, Any]
    player: Creature
    save: SaveManager
    battles: BattleManager
    enemies: list[Creature] = field(default_factory=list)
    boss: Creature = field(default_factory=Creature)
    market: Market = field(default_factory=Market)
    input_fn: Callable[[], str] = input
    out: TextIO | None = None

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike[str],
        player: Creature,
        save: SaveManager,
        battles: BattleManager,
        inventory_texts: dict[str, Any] | None = None,
        input_fn: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> World:
        """Load a world description; enemies, boss and market load only if PathEnemy1 exists."""
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"World file {os.fspath(path)} must hold a JSON object")

        world = cls(
            texts=data,
            player=player,
            save=save,
            battles=battles,
            input_fn=input_fn or input,
            out=out,
        )
        if "PathEnemy1" in data:
            for key, value in sorted(data.items()):
                if "PathEnemy" in key:
                    world.enemies.append(
                        Creature.from_file(_path_value(key, value), inventory_texts)
                    )
                elif "PathBoss" in key:
                    world.boss = Creature.from_file(_path_value(key, value), inventory_texts)
                elif "PathMarket" in key:
                    world.market = Market.from_file(_path_value(key, value), inventory_texts)
        return world

    def _write(self, text: str) -> None:
        (self.out or sys.stdout).write(text)

    def get_text(self, key: str) -> str:
        """The text for ``key``, or a visible marker when it is missing."""
        if key not in self.texts:
            return f"[Missing string: {key}]"
        value = self.texts[key]
        if not isinstance(value, str):
            raise ValueError(f"World text {key!r} must be a string")
        return value

    def use_item(self) -> None:
        """Equip weapons and armour or drink potions until the player types ``Exit``."""
        inventory = self.player.inventory
        while True:
            inventory.list_items(self.out or sys.stdout)
            self._write("- Exit\n")
            name = _read_word(self.input_fn)
            if name == EXIT_WORD:
                return

            item = inventory.get_item(name)
            self._write(CLEAR_SCREEN)
            if item is None:
                self._write("You entered an incorrect item name\n")
                continue

            if item.type == "Weapon":
                self.player.set_active_weapon(item)
                self._write(f"You equipped weapon: {item.name}\n")
            elif item.type == "Armor":
                self.player.set_active_armor(item)
                self._write(f"You equipped armor: {item.name}\n")
            elif item.type == "Potion":
                self.player.heal(item.strength)
                self._write(f"You used potion: {item.name}\n")
                self.player.remove_item(name)
            else:
                self._write("Unknown item type.\n")

    def _read_choice(self) -> int:
        while True:
            choices = self.texts["Choices"]
            if not isinstance(choices, str):
                raise ValueError("World text 'Choices' must be a string")
            self._write(choices + "\n")
            self._write(self.get_text("EnterText"))
            choice = _leading_int(self.input_fn())
            if choice is not None and 1 <= choice <= 5:
                return choice
            self._write(self.get_text("InvalidInput") + "\n")
            self.input_fn()
            self._write(CLEAR_SCREEN)

    def choose_way(self) -> bool:
        """Run one menu choice; return False once the player has saved and quit.

        Battles that end the game raise ``GameOver``.
        """
        self._write(self.get_text("StartPromt"))
        self.input_fn()

        choice = self._read_choice()
        if choice == 1:
            index = dice.randint(0, len(self.enemies) - 1, self.battles.rng)
            self.battles.start_regular_battle(self.player, self.enemies[index])
        elif choice == 2:
            self.battles.start_boss_battle(self.player, self.boss)
        elif choice == 3:
            self._write(CLEAR_SCREEN)
            self.market.buy_item(self.player, self.input_fn, self.out)
            self._write(CLEAR_SCREEN)
        elif choice == 4:
            self._write(CLEAR_SCREEN)
            self.use_item()
            self._write(CLEAR_SCREEN)
        else:
            self._write(CLEAR_SCREEN)
            self.save.save_game(self.player)
            return False
        return True