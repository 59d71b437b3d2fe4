"""The battle: paired creatures of two armies fight until one of each pair falls."""

from __future__ import annotations

import random
import sys

from armybattle.army import Army
from armybattle.creatures import Creature

ROUND_RULE_WIDTH = 65

_TURN_HEADER = (
    f"{'ATTACKER':_<10}{'DAMAGE':_>10}{'TEAM':_>10}"
    " || "
    f"{'ATTACKER':_<10}{'HEALTH':_>10}{'TEAM':_>10}"
)


def team_score(army: Army) -> int:
    """Total remaining health of an army."""
    return sum(creature.health for creature in army)


class Game:
    """A battle between two armies of the same size, reported to a text stream."""

    def __init__(self, army1: Army, army2: Army, rng=None, out=None) -> None:
        if len(army1) != len(army2):
            raise ValueError("List Sizes are not Equal, please use equal list sizes.")
        self.army1 = army1
        self.army2 = army2
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)

    def play(self) -> tuple[int, int]:
        """Fight every round and report the result; return both teams' scores."""
        turn = self.rng.randrange(2)
        for index, (first, second) in enumerate(zip(self.army1, self.army2)):
            self._write(f"TURN {index + 1}\n{_TURN_HEADER}\n\n")
            while first.health > 0 and second.health > 0:
                if turn == 0:
                    turn = 1
                    self.do_turn(self.army1, self.army2, index)
                else:
                    turn = 0
                    self.do_turn(self.army2, self.army1, index)
            if first.health == 0:
                named, other = first.name, second.name
            else:
                named, other = second.name, first.name
            self._write(
                f"\n{named} WON THE ROUND!\n"
                f"{other} HAS 0 HEALTH SO THEY LOST THE ROUND...\n"
            )
            self._write("=" * ROUND_RULE_WIDTH + "\n\n")

        score1, score2 = team_score(self.army1), team_score(self.army2)
        if score1 > score2:
            self._report_win(self.army1, score1, self.army2, score2)
        elif score1 == score2:
            self._write(f"BOTH TEAMS TIED WITH {score1} POINTS!\n")
        else:
            self._report_win(self.army2, score2, self.army1, score1)
        return score1, score2

    def _report_win(self, winner: Army, win_score: int, loser: Army, lose_score: int) -> None:
        self._write(
            f"TEAM {winner.name} WINS WITH {win_score} POINTS!\n"
            f"TEAM {loser.name} LOST WITH {lose_score} POINTS...\n"
        )

    def do_turn(self, attacker: Army, defender: Army, index: int) -> int:
        """One blow from the attacker's creature at index; return the damage dealt."""
        striker = attacker[index]
        # Rounds are fought with the plain strength roll, whatever the creature type.
        damage = Creature.get_damage(striker, self.rng)
        defender.set_creature_health(index, defender[index].health - damage)
        target = defender[index]
        self._write(
            f"{striker.full_name():_<10}{damage:_>10}{attacker.name:_>10}"
            " || "
            f"{target.full_name():_<10}{target.health:_>10}{defender.name:_>10}\n"
        )
        return damage