"""The shop where the player spends money on items."""

from __future__ import annotations

import dataclasses
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from arenaquest.battle import CLEAR_SCREEN
from arenaquest.creature import Creature
from arenaquest.inventory import Inventory
from arenaquest.item import Item

EXIT_WORD = "Exit"


def _read_word(input_fn: Callable[[], str]) -> str:
    """Read the next whitespace-separated word, skipping blank lines."""
    while True:
        words = input_fn().split()
        if words:
            return words[0]


@dataclass
class Market:
    """A stock of items for sale plus the shop's texts."""

    texts: dict[str, Any] = field(default_factory=dict)
    stock: Inventory = field(default_factory=Inventory)

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike[str],
        inventory_texts: dict[str, Any] | None = None,
    ) -> Market:
        """Load shop texts and stock every item whose key contains ``ItemPath``."""
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Market file {os.fspath(path)} must hold a JSON object")

        market = cls(texts=data, stock=Inventory(texts=inventory_texts or {}))
        for key, value in sorted(data.items()):
            if "ItemPath" not in key:
                continue
            if not isinstance(value, str):
                raise ValueError(f"Market entry {key!r} must be a path string")
            market.stock.add_item(Item.from_file(value))
        return market

    def get_text(self, key: str) -> str:
        """The text for ``key``, or a visible marker when it is missing."""
        if key not in self.texts:
            return f"[Missing string: {key}]"
        value = self.texts[key]
        if not isinstance(value, str):
            raise ValueError(f"Market text {key!r} must be a string")
        return value

    def display_items(self, out: TextIO | None = None) -> None:
        stream = out or sys.stdout
        stream.write(self.get_text("AvailableItems"))
        if self.stock.items:
            self.stock.list_items(stream)
        else:
            stream.write(self.get_text("Reach"))

    def buy_item(
        self,
        buyer: Creature,
        input_fn: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        """Let ``buyer`` purchase items by name until they type ``Exit``."""
        read = input_fn or input
        stream = out or sys.stdout
        while True:
            self.display_items(stream)
            stream.write(self.get_text("ExitText"))
            stream.write(f"Your money: {buyer.money}\n")
            name = _read_word(read)
            if name == EXIT_WORD:
                return

            stream.write(CLEAR_SCREEN)
            item = self.stock.get_item(name)
            if item is None:
                stream.write(self.get_text("WrongName"))
            elif item.price > buyer.money:
                stream.write(self.get_text("Broke"))
            else:
                stream.write(f"You buy: {name}\n")
                buyer.spend_money(item.price)
                buyer.add_item(dataclasses.replace(item))
                self.stock.remove_item(name)