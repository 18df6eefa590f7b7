"""Turn-based regular fights and timed combo boss fights."""

from __future__ import annotations

import json
import os
import random
import re
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from arenaquest import dice
from arenaquest.creature import Creature

DEFAULT_TEXTS_PATH = "json/BattleManager.json"

RESET = "\033[0m"
BLUE = "\033[34m"
GREEN = "\033[32m"
RED = "\033[31m"
CLEAR_SCREEN = "\033[2J\033[H"

_BORDER = "+----------------+----------+----------------+----------+\n"
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class GameOver(Exception):
    """Raised when a fight ends the game; ``won`` tells which way it went."""

    def __init__(self, won: bool) -> None:
        super().__init__("game won" if won else "game lost")
        self.won = won


def format_text(template: str, var: str, value: str) -> str:
    """Replace every ``{var}`` in ``template`` with ``value``."""
    pattern = re.compile(r"\{" + re.escape(var) + r"\}")
    return pattern.sub(lambda _match: value, template)


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    number = int(match.group(1))
    if not -(2**31) <= number < 2**31:
        return None
    return number


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _ascii_upper(text: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in text)


@dataclass
class BattleManager:
    """Runs fights between the player and an enemy, using texts from JSON."""

    texts: dict[str, Any] = field(default_factory=dict)
    rng: random.Random | None = None
    input_fn: Callable[[], str] = input
    out: TextIO | None = None
    clock: Callable[[], float] = time.monotonic

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike[str] = DEFAULT_TEXTS_PATH,
        rng: random.Random | None = None,
        input_fn: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> BattleManager:
        """Load battle texts; a missing file is reported and leaves the texts empty."""
        texts: dict[str, Any] = {}
        try:
            with open(path, encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, dict):
                texts = data
        except OSError:
            print("Could not open BattleText.json!", file=sys.stderr)
        return cls(texts=texts, rng=rng, input_fn=input_fn or input, out=out)

    def _write(self, text: str) -> None:
        (self.out or sys.stdout).write(text)

    def _roll(self, start: int, end: int) -> int:
        return dice.randint(start, end, self.rng)

    def get_text(self, key: str) -> str:
        """The text for ``key``, or a visible marker when it is missing."""
        if key not in self.texts:
            return f"[Missing string: {key}]"
        value = self.texts[key]
        if not isinstance(value, str):
            raise ValueError(f"Battle text {key!r} must be a string")
        return value

    def _config_int(self, key: str) -> int:
        value = self.texts[key]
        if not isinstance(value, str):
            raise ValueError(f"Battle setting {key!r} must be a string")
        number = _leading_int(value)
        if number is None:
            raise ValueError(f"Battle setting {key!r}: invalid integer {value!r}")
        return number

    def _dialogue(self, creature: Creature, key: str) -> str:
        lines = creature.dialogues[key]
        return lines[self._roll(0, len(lines) - 1)]

    def format_table(self, player: Creature, enemy: Creature) -> str:
        """The side-by-side stat table for both fighters."""

        def row(label: str, mine: int, theirs: int) -> str:
            return (
                f"| {BLUE}{label:<15}{RESET}| {GREEN}{mine:<8}{RESET} | "
                f"{BLUE}{label:<15}{RESET}| {RED}{theirs:<8}{RESET} |\n"
            )

        header = (
            f"|{BLUE} Your Stat      {RESET}| {GREEN}Value    {RESET}|"
            f"{BLUE} Enemy Stat     {RESET}| {RED}Value    {RESET}|\n"
        )
        return (
            _BORDER
            + header
            + _BORDER
            + row("HP", player.hp, enemy.hp)
            + row("Armor", player.armor, enemy.armor)
            + row("Strength", player.strength, enemy.strength)
            + _BORDER
        )

    def _show_table(self, player: Creature, enemy: Creature) -> None:
        self._write(self.format_table(player, enemy))

    def _read_choice(self, player: Creature, enemy: Creature) -> int:
        while True:
            self._write(self.get_text("ChooseAction") + "\n")
            for action in self.texts["Actions"]:
                self._write(f"{action}\n")
            self._write(self.get_text("EnterText"))
            choice = _leading_int(self.input_fn())
            if choice is not None and 1 <= choice <= 6:
                return choice
            self._write(self.get_text("InvalidInput") + "\n")
            self.input_fn()
            self._write(CLEAR_SCREEN)
            self._show_table(player, enemy)

    def _player_turn(self, choice: int, player: Creature, enemy: Creature) -> int:
        damage = 0
        if choice == 1:
            damage = player.attack()
            self._write(format_text(self.get_text("AttackDealt"), "value", str(damage)) + "\n")
        elif choice == 2:
            damage = _trunc_div(player.attack(), self._config_int("Block"))
            player.set_temporary_armor(self._config_int("TemporaryArmor"))
            self._write(format_text(self.get_text("CounterDealt"), "value", str(damage)) + "\n")
        elif choice == 3:
            player.heal(self._config_int("Heal"))
            self._write(self.get_text("HealUsed") + "\n")
        elif choice == 4:
            if self._roll(0, 1) == 1:
                damage = player.attack() * self._config_int("PowerHit")
                self._write(
                    format_text(self.get_text("AttackDealt"), "value", str(damage)) + "\n"
                )
            else:
                self._write(self.get_text("Missed") + "\n")
        elif choice == 5:
            enemy.reduce_attack_temporarily(self._config_int("ReduceAttackTemporarily"))
            self._write(self.get_text("TauntUsed") + "\n")
        elif choice == 6:
            player.boost_next_attack(self._config_int("BoostNextAttack"))
            self._write(self.get_text("FocusUsed") + "\n")
        return damage

    def _enemy_turn(self, player: Creature, enemy: Creature) -> int:
        choice = self._roll(1, 6)
        name = enemy.name
        damage = 0

        def named(key: str) -> str:
            return format_text(self.get_text(key), "enemy", name)

        def dealt(value: int) -> str:
            return format_text(self.get_text("EnemyDealt"), "value", str(value)) + "\n"

        if choice == 1:
            damage = enemy.attack()
            self._write(named("EnemyAttack") + dealt(damage))
        elif choice == 2:
            damage = _trunc_div(enemy.attack(), self._config_int("Block"))
            enemy.set_temporary_armor(self._config_int("TemporaryArmor"))
            self._write(named("EnemyCounter") + dealt(damage))
        elif choice == 3:
            enemy.heal(self._config_int("Heal"))
            self._write(named("EnemyHeal") + "\n")
        elif choice == 4:
            if self._roll(0, 1) == 1:
                damage = enemy.attack() * self._config_int("PowerHit")
                self._write(named("EnemyPowerHit") + dealt(damage))
            else:
                self._write(named("EnemyMissed") + "\n")
        elif choice == 5:
            player.reduce_attack_temporarily(self._config_int("ReduceAttackTemporarily"))
            self._write(named("EnemyTaunt") + "\n")
        else:
            enemy.boost_next_attack(self._config_int("BoostNextAttack"))
            self._write(named("EnemyFocus") + "\n")
        return damage

    def start_regular_battle(self, player: Creature, enemy: Creature) -> bool:
        """Fight to the end; return True on victory, raise GameOver on defeat."""
        self._write(self._dialogue(enemy, "StartFight") + "\n")
        self._write(self.get_text("StartFightPrompt") + "\n")
        self.input_fn()

        while player.hp > 0 and enemy.hp > 0:
            self._write(CLEAR_SCREEN)
            self._show_table(player, enemy)

            choice = self._read_choice(player, enemy)
            self._write("\n" + self.get_text("YourTurn") + "\n")
            enemy.take_damage(self._player_turn(choice, player, enemy))
            if enemy.hp <= 0:
                break

            self._write("\n" + format_text(self.get_text("EnemyTurn"), "enemy", enemy.name) + "\n")
            player.take_damage(self._enemy_turn(player, enemy))

            self._write("\n" + self.get_text("ContinuePrompt") + "\n")
            self.input_fn()

        self._write(CLEAR_SCREEN)
        if player.hp > 0:
            self._write(self._dialogue(enemy, "Victory") + "\n")
            player.money += enemy.money
            return True
        self._write(self._dialogue(enemy, "Defeat") + "\n")
        self._write(self.get_text("GameLose"))
        raise GameOver(won=False)

    def start_boss_battle(self, player: Creature, boss: Creature) -> None:
        """Timed letter-combo fight; always ends the game by raising GameOver."""
        self._write(self._dialogue(boss, "StartFight") + "\n")
        self._write(self.get_text("StartBossBattlePrompt") + "\n")
        self.input_fn()

        time_limit = self._config_int("timeLimitSeconds")
        max_len = self._config_int("maxLen")
        min_len = self._config_int("minLen")

        while player.hp > 0 and boss.hp > 0:
            combo_length = self._roll(min_len, max_len)
            self._write(CLEAR_SCREEN)
            self._show_table(player, boss)

            command = "".join(chr(ord("A") + self._roll(0, 25)) for _ in range(combo_length))
            self._write(format_text(self.get_text("BossComboPrompt"), "combo", command) + "\n")
            self._write(
                format_text(self.get_text("TimeLimitInfo"), "seconds", str(time_limit)) + "\n"
            )

            started = self.clock()
            typed = self.input_fn()
            elapsed = int(self.clock() - started)

            if _ascii_upper(typed) == command and elapsed <= time_limit:
                self._write(self.get_text("PlayerComboSuccess") + "\n")
                boss.take_damage(player.strength)
            else:
                self._write(self.get_text("PlayerComboFail") + "\n")

            if boss.hp <= 0:
                break

            boss_damage = boss.attack()
            player.take_damage(boss_damage)
            self._write(format_text(self.get_text("BossAttacks"), "enemy", boss.name))
            self._write(
                format_text(self.get_text("EnemyDealt"), "value", str(boss_damage)) + "\n"
            )
            self._write(self.get_text("ContinuePrompt") + "\n")
            self.input_fn()

        self._write(CLEAR_SCREEN)
        if player.hp > 0:
            self._write(self._dialogue(boss, "Victory") + "\n")
            self._write(self.get_text("GameWin"))
            raise GameOver(won=True)
        self._write(self._dialogue(boss, "Defeat") + "\n")
        self._write(self.get_text("GameLose"))
        raise GameOver(won=False)