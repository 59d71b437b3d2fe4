# armybattle

A small console game in which two armies fight. Each army is made of
randomly recruited creatures (elves, demons and superdemons) with a random
health and strength between 30 and 90. The creatures at the same position in
each army duel until one of them has no health left. When every duel is over,
the army with the most health left wins.

## Installing

```
pip install .
```

## Playing

```
armybattle [SIZE] [--seed SEED]
```

If `SIZE` is not given you are asked for it. A size that is not a whole
number, or is negative, is reported on standard error and the command exits
with status 1. `--seed` seeds the random generator, so the same seed gives the
same armies and the same battles.

Two armies of that size are recruited, named CHEESE and MAYO, and a menu is
shown:

1. Print Armies: shows each army as a table of name, health, strength and type.
2. Play Battle Game: runs the duels turn by turn, then prints both teams' scores
   and the winner, or a tie.
3. Exit

Any other answer prints "Invalid choice, try again". Reaching the end of input
ends the menu as Exit does.

Damage stays on the creatures, so a second battle starts from where the first
one left off.

## Creatures

Every creature has a name, a health and a strength. A name needs at least three
letters or digits before any `@`; health and strength may not be negative.
Invalid values raise `armybattle.creatures.CreatureError` and leave the
creature unchanged.

Each type has its own `get_damage(rng)`:

- **Elf**: between 1 and its strength; one roll in twenty is doubled.
- **Demon**: between 1 and its strength; fifteen percent of rolls add 50.
- **Superdemon**: two demon rolls added together.

In a battle, however, every blow is a plain roll between 1 and the attacker's
strength, whatever the creature's type.

## Using the library

```python
import random

from armybattle.army import Army
from armybattle.game import Game, team_score

rng = random.Random(7)
cheese = Army(5, "CHEESE", rng)
mayo = Army(5, "MAYO", rng)

print(cheese.format_table())
score_cheese, score_mayo = Game(cheese, mayo, rng).play()
print(team_score(cheese), team_score(mayo))
```

- `Army(size, name, rng)` recruits `Creature1` to `Creature<size>`; it can be
  indexed, iterated and measured with `len`. `set_creature_health` never sets
  health below zero. A negative size raises `ValueError`.
- `Game(army1, army2, rng, out)` raises `ValueError` if the armies differ in
  size; `play()` writes the battle to `out` (standard output by default) and
  returns both scores; `do_turn` deals one blow and returns its damage.
- `team_score(army)` is the army's total remaining health.
- `armybattle.cli.run_menu(size, rng, input_func, out)` runs the menu with any
  input function and output stream and returns the two armies.

## What it does not do

Armies live only as long as the program runs: they cannot be saved, loaded or
built by hand from the menu, and each run recruits new ones.

## Running the tests

```
pip install .[test]
pytest
```