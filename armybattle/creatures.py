"""Creature types that make up an army: elves, demons and superdemons."""

from __future__ import annotations

import random
import string

DEFAULT_NAME = "nameHere"
DEFAULT_HEALTH = 50
DEFAULT_STRENGTH = 50
DEFAULT_TYPE = "Creature"

MIN_NAME_CHARS = 3
_NAME_CHARS = frozenset(string.ascii_letters + string.digits)


class CreatureError(ValueError):
    """Raised when a creature is given an invalid name, health or strength."""


def _validate(name: str, health: int, strength: int) -> None:
    significant = name.split("@", 1)[0]
    if sum(char in _NAME_CHARS for char in significant) < MIN_NAME_CHARS:
        raise CreatureError(f"invalid creature name: {name!r}")
    if health < 0:
        raise CreatureError(f"invalid health: {health}")
    if strength < 0:
        raise CreatureError(f"invalid strength: {strength}")


class Creature:
    """A fighter with a name, a health pool and a strength that bounds its damage."""

    kind = DEFAULT_TYPE

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        health: int = DEFAULT_HEALTH,
        strength: int = DEFAULT_STRENGTH,
    ) -> None:
        self.set_creature(name, health, strength)

    def set_creature(self, name: str, health: int, strength: int) -> None:
        """Replace all attributes at once; nothing changes if any value is invalid."""
        _validate(name, health, strength)
        self.name = name
        self.health = health
        self.strength = strength

    def get_damage(self, rng=None) -> int:
        """Roll a damage value between 1 and the creature's strength."""
        rng = rng if rng is not None else random
        if self.strength <= 0:
            raise CreatureError(f"{self.name} has no strength to deal damage")
        return rng.randrange(self.strength) + 1

    def full_name(self) -> str:
        return f"{self.name} the {self.kind}"

    def row(self) -> str:
        """One line of an army table: name, health, strength and type."""
        core = f"{self.name:<10}{self.health:_>10}{self.strength:_>12}"
        return f"{core:_<40}{self.kind:_<15}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"health={self.health}, strength={self.strength})"
        )


class Elf(Creature):
    """An elf lands a double blow one time in twenty."""

    kind = "Elf"

    def get_damage(self, rng=None) -> int:
        rng = rng if rng is not None else random
        critical = rng.randrange(20) == 0
        damage = super().get_damage(rng)
        return damage * 2 if critical else damage


class Demon(Creature):
    """A demon adds 50 to its blow fifteen times in a hundred."""

    kind = "Demon"

    def get_damage(self, rng=None) -> int:
        rng = rng if rng is not None else random
        empowered = rng.randrange(100) < 15
        damage = super().get_damage(rng)
        return damage + 50 if empowered else damage


class Superdemon(Demon):
    """A superdemon strikes twice as a demon would."""

    kind = "Superdemon"

    def get_damage(self, rng=None) -> int:
        rng = rng if rng is not None else random
        return super().get_damage(rng) + super().get_damage(rng)