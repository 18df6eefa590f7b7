"""Command-line entry point that runs the game."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from arenaquest.battle import BattleManager, GameOver
from arenaquest.creature import Creature
from arenaquest.inventory import load_texts
from arenaquest.saves import DEFAULT_TEXTS_PATH, SaveManager
from arenaquest.world import World

DEFAULT_WORLD = "json/World1Info.json"


def _load_save_texts(path: str) -> dict[str, Any] | None:
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def main(argv: list[str] | None = None) -> int:
    """Pick a save, load the world and play until the game ends or is saved."""
    parser = argparse.ArgumentParser(
        prog="arenaquest", description="Play the arena role-playing game."
    )
    parser.add_argument(
        "--world", default=DEFAULT_WORLD, help="world description file (JSON)"
    )
    args = parser.parse_args(argv)

    texts = _load_save_texts(DEFAULT_TEXTS_PATH)
    if texts is None:
        print("Failed to load save_text.json", file=sys.stderr)
        return 1

    try:
        save = SaveManager.select(texts)
        inventory_texts = load_texts()
        player = Creature.from_file(save.path, inventory_texts)
        battles = BattleManager.from_file()
        world = World.from_file(args.world, player, save, battles, inventory_texts)
        while world.choose_way():
            pass
    except GameOver:
        return 0
    except EOFError:
        return 0
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())