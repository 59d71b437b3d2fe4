"""An army: a numbered line-up of randomly recruited creatures."""

from __future__ import annotations

import random
from collections.abc import Iterator

from armybattle.creatures import DEFAULT_NAME, Creature, Demon, Elf, Superdemon

MIN_STAT = 30
MAX_STAT = 90
TABLE_WIDTH = 55

_RECRUITS = (Elf, Demon, Superdemon)


def _roll_stat(rng) -> int:
    return MIN_STAT + rng.randrange(MAX_STAT - MIN_STAT + 1)


class Army:
    """A named army of creatures named Creature1, Creature2, ..."""

    def __init__(self, size: int = 0, name: str = DEFAULT_NAME, rng=None) -> None:
        if size < 0:
            raise ValueError(f"army size must not be negative, got {size}")
        rng = rng if rng is not None else random.Random()
        self.name = name
        self._creatures = [self._recruit(number, rng) for number in range(1, size + 1)]

    @staticmethod
    def _recruit(number: int, rng) -> Creature:
        kind = _RECRUITS[rng.randrange(len(_RECRUITS))]
        health = _roll_stat(rng)
        strength = _roll_stat(rng)
        return kind(f"Creature{number}", health, strength)

    def __len__(self) -> int:
        return len(self._creatures)

    def __getitem__(self, index: int) -> Creature:
        return self._creatures[index]

    def __iter__(self) -> Iterator[Creature]:
        return iter(self._creatures)

    def set_creature(self, index: int, name: str, health: int, strength: int) -> None:
        self._creatures[index].set_creature(name, health, strength)

    def set_creature_health(self, index: int, health: int) -> None:
        """Set one creature's health, never below zero."""
        creature = self._creatures[index]
        self.set_creature(index, creature.name, max(health, 0), creature.strength)

    def format_table(self) -> str:
        rule = "=" * TABLE_WIDTH
        header = f"{'Name':<14}{'Health':<10}{'Strength':<16}{'Type':<15}"
        lines = [header, rule, *(creature.row() for creature in self), rule]
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Army(name={self.name!r}, size={len(self)})"