"""Items that creatures carry, equip and trade."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any


@dataclass
class Item:
    """A weapon, armour piece, potion or other carried object."""

    name: str = "Unknown"
    type: str = "Unknown"
    strength: int = 0
    price: int = 0
    path: str = ""

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Item:
        """Load an item from a JSON file with name, type, strength and price."""
        path = os.fspath(path)
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)

        if not isinstance(data, dict) or not all(
            key in data for key in ("name", "type", "strength", "price")
        ):
            raise ValueError(f"Invalid item format in file: {path}")

        return cls(
            name=_typed(data, "name", str, path),
            type=_typed(data, "type", str, path),
            strength=_typed(data, "strength", int, path),
            price=_typed(data, "price", int, path),
            path=path,
        )


def _typed(data: dict[str, Any], key: str, kind: type, path: str) -> Any:
    value = data[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(
            f"Invalid item format in file: {path}: {key!r} must be {kind.__name__}"
        )
    return value