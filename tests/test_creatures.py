import random

import pytest

from armybattle.creatures import (
    Creature,
    CreatureError,
    Demon,
    Elf,
    Superdemon,
)


class ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        if not 0 <= value < stop:
            raise AssertionError(f"scripted value {value} outside range({stop})")
        return value


def test_defaults():
    elf = Elf()
    assert (elf.name, elf.health, elf.strength) == ("nameHere", 50, 50)


def test_rows_match_table_format():
    assert Superdemon("Creature1", 75, 81).row() == (
        "Creature1 ________75__________81________Superdemon_____"
    )
    assert Elf("Creature3", 47, 30).row() == (
        "Creature3 ________47__________30________Elf____________"
    )
    assert Superdemon("Creature10", 45, 39).row() == (
        "Creature10________45__________39________Superdemon_____"
    )
    assert Demon("Creature2", 0, 77).row() == (
        "Creature2 _________0__________77________Demon__________"
    )


def test_full_names():
    assert Elf("Creature3").full_name() == "Creature3 the Elf"
    assert Demon("Creature3").full_name() == "Creature3 the Demon"
    assert Superdemon("Creature3").full_name() == "Creature3 the Superdemon"


@pytest.mark.parametrize("name", ["ab", "a-b", "a@bcdef", "@Creature", "!!!??"])
def test_short_names_rejected(name):
    with pytest.raises(CreatureError):
        Elf(name, 10, 10)


def test_name_counts_characters_before_at_sign():
    elf = Elf("abc@x", 10, 10)
    assert elf.name == "abc@x"


def test_negative_health_and_strength_rejected():
    with pytest.raises(CreatureError):
        Demon("Creature1", -1, 10)
    with pytest.raises(CreatureError):
        Demon("Creature1", 10, -1)


def test_failed_update_keeps_old_state():
    demon = Demon("Creature1", 40, 60)
    with pytest.raises(CreatureError):
        demon.set_creature("Creature2", -5, 70)
    assert (demon.name, demon.health, demon.strength) == ("Creature1", 40, 60)


def test_set_creature_updates_all_fields():
    elf = Elf("Creature1", 40, 60)
    elf.set_creature("Renamed", 0, 0)
    assert (elf.name, elf.health, elf.strength) == ("Renamed", 0, 0)


def test_base_damage_within_strength():
    rng = random.Random(7)
    creature = Creature("Creature1", 50, 13)
    rolls = {creature.get_damage(rng) for _ in range(500)}
    assert min(rolls) >= 1
    assert max(rolls) <= 13


def test_no_strength_cannot_deal_damage():
    with pytest.raises(CreatureError):
        Creature("Creature1", 50, 0).get_damage(random.Random(0))


def test_elf_critical_doubles_damage():
    elf = Elf("Creature1", 50, 30)
    plain = elf.get_damage(ScriptedRng([3, 4]))
    critical = elf.get_damage(ScriptedRng([0, 4]))
    assert critical == 2 * plain


def test_demon_bonus_adds_fifty():
    demon = Demon("Creature1", 50, 30)
    plain = demon.get_damage(ScriptedRng([15, 4]))
    empowered = demon.get_damage(ScriptedRng([14, 4]))
    assert empowered - plain == 50


def test_superdemon_strikes_twice():
    superdemon = Superdemon("Creature1", 50, 30)
    demon = Demon("Creature1", 50, 30)
    first = demon.get_damage(ScriptedRng([50, 4]))
    second = demon.get_damage(ScriptedRng([10, 2]))
    assert superdemon.get_damage(ScriptedRng([50, 4, 10, 2])) == first + second