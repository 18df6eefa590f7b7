"""Choosing, creating and writing save files."""

from __future__ import annotations

import json
import os
import re
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TextIO

from arenaquest.battle import CLEAR_SCREEN, format_text
from arenaquest.creature import Creature

DEFAULT_TEXTS_PATH = "json/SaveManager.json"
DEFAULT_SAVE_DIR = "saves"
DEFAULT_TEMPLATE = "json/Player.json"

_NUMBER = re.compile(r"\+?([0-9]+)")


def _read_word(input_fn: Callable[[], str]) -> str:
    while True:
        words = input_fn().split()
        if words:
            return words[0]


def _parse_choice(word: str) -> int:
    match = _NUMBER.match(word)
    return int(match.group(1)) if match else 0


def _text(texts: dict[str, Any], key: str) -> str:
    value = texts[key]
    if not isinstance(value, str):
        raise ValueError(f"Save text {key!r} must be a string")
    return value


def _copy_new(source: str | os.PathLike[str], target: str) -> None:
    """Copy ``source`` to ``target``, refusing to overwrite an existing file."""
    with open(source, "rb") as src, open(target, "xb") as dst:
        shutil.copyfileobj(src, dst)


@dataclass
class SaveManager:
    """The save file in use and the texts shown when saving."""

    path: str
    texts: dict[str, Any] = field(default_factory=dict)
    out: TextIO | None = None

    @classmethod
    def select(
        cls,
        texts: dict[str, Any],
        save_dir: str | os.PathLike[str] = DEFAULT_SAVE_DIR,
        template: str | os.PathLike[str] = DEFAULT_TEMPLATE,
        input_fn: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> SaveManager:
        """Ask the player for an existing save slot or create a new save from ``template``."""
        read = input_fn or input
        stream = out or sys.stdout
        directory = Path(save_dir)
        directory.mkdir(exist_ok=True)
        save_files = sorted(p for p in directory.iterdir() if p.suffix == ".json")

        stream.write(_text(texts, "AvailableSaves") + "\n")
        for number, save_file in enumerate(save_files, start=1):
            stream.write(f"{number}. {save_file.name}\n")
        stream.write(f"{len(save_files) + 1}{_text(texts, 'CreateNewSaveOption')}\n")
        stream.write(_text(texts, "ChooseSaveSlot"))

        choice = _parse_choice(_read_word(read))
        if 1 <= choice <= len(save_files):
            path = str(save_files[choice - 1])
        else:
            stream.write(_text(texts, "EnterNewSaveName"))
            name = _read_word(read)
            path = str(directory / f"{name}.json")
            try:
                _copy_new(template, path)
                stream.write(format_text(_text(texts, "NewSaveCreated"), "path", path) + "\n")
            except OSError as exc:
                message = format_text(_text(texts, "FailedToCreateSave"), "error", str(exc))
                print(message, file=sys.stderr)

        stream.write(CLEAR_SCREEN)
        return cls(path=path, texts=texts, out=out)

    def save_game(self, player: Creature) -> None:
        """Write the player's stats and inventory paths to the save file."""
        data = {
            "Name": player.name,
            "Strength": str(player.strength),
            "Hp": str(player.hp),
            "Armor": str(player.armor),
            "Money": str(player.money),
            "Inventory": [item.path for item in player.inventory.items],
        }
        try:
            fh = open(self.path, "w", encoding="utf-8")
        except OSError:
            print(_text(self.texts, "FailedToOpenSave"), file=sys.stderr)
            return
        with fh:
            fh.write(json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False))

        message = format_text(_text(self.texts, "GameSaved"), "path", self.path)
        (self.out or sys.stdout).write(message + "\n")