"""A creature's or shop's collection of items and its listing text."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from arenaquest.item import Item

DEFAULT_TEXTS_PATH = "json/InventoryManagerText.json"

_EMPTY_DEFAULT = "Inventory is empty."
_ITEM_DEFAULT = "- {Name} (Type: {Type}, Strength: {Strength}, Price: {Price})"
_TYPE_ITEM_DEFAULT = "{Index}. {Name} ({Strength})"


def load_texts(path: str | os.PathLike[str] = DEFAULT_TEXTS_PATH) -> dict[str, Any]:
    """Read listing templates from JSON; report problems on stderr and fall back to {}."""
    path = os.fspath(path)
    try:
        fh = open(path, encoding="utf-8")
    except OSError:
        print(f"Failed to open inventory text JSON file: {path}", file=sys.stderr)
        return {}
    with fh:
        try:
            data = json.load(fh)
        except ValueError as exc:
            print(f"Failed to parse JSON: {exc}", file=sys.stderr)
            return {}
    return data if isinstance(data, dict) else {}


def _replace_required(line: str, placeholder: str, value: str) -> str:
    if placeholder not in line:
        raise ValueError(f"Template {line!r} has no {placeholder} placeholder")
    return line.replace(placeholder, value, 1)


@dataclass
class Inventory:
    """Ordered items plus the templates used to list them."""

    items: list[Item] = field(default_factory=list)
    texts: dict[str, Any] = field(default_factory=dict)

    def _text(self, key: str, default: str) -> str:
        value = self.texts.get(key, default)
        return value if isinstance(value, str) else default

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def remove_item(self, name: str) -> bool:
        """Remove every item with this name; return whether any was removed."""
        kept = [item for item in self.items if item.name != name]
        removed = len(kept) != len(self.items)
        self.items[:] = kept
        return removed

    def get_item(self, name: str) -> Item | None:
        return next((item for item in self.items if item.name == name), None)

    def has_item(self, name: str) -> bool:
        return any(item.name == name for item in self.items)

    def format_items(self) -> list[str]:
        """Lines describing every item, or the empty-inventory message."""
        if not self.items:
            return [self._text("InventoryEmpty", _EMPTY_DEFAULT)]
        lines = []
        for item in self.items:
            line = self._text("InventoryItem", _ITEM_DEFAULT)
            line = _replace_required(line, "{Name}", item.name)
            line = _replace_required(line, "{Type}", item.type)
            line = _replace_required(line, "{Strength}", str(item.strength))
            line = _replace_required(line, "{Price}", str(item.price))
            lines.append(line)
        return lines

    def format_type_items(self, item_type: str) -> list[str]:
        """Numbered lines for the items of one type."""
        if not self.items:
            return [self._text("InventoryEmpty", _EMPTY_DEFAULT)]
        matching = (item for item in self.items if item.type == item_type)
        lines = []
        for index, item in enumerate(matching, start=1):
            line = self._text("InventoryTypeItem", _TYPE_ITEM_DEFAULT)
            line = line.replace("{Index}", str(index), 1)
            line = line.replace("{Name}", item.name, 1)
            line = line.replace("{Strength}", str(item.strength), 1)
            lines.append(line)
        return lines

    def list_items(self, out: TextIO | None = None) -> None:
        for line in self.format_items():
            print(line, file=out or sys.stdout)

    def list_type_items(self, item_type: str, out: TextIO | None = None) -> None:
        for line in self.format_type_items(item_type):
            print(line, file=out or sys.stdout)