"""Interactive menu: recruit two armies, print them and let them battle."""

from __future__ import annotations

import argparse
import random
import sys
from enum import IntEnum

from armybattle.army import Army
from armybattle.game import Game

FIRST_TEAM = "CHEESE"
SECOND_TEAM = "MAYO"

SIZE_PROMPT = "\n\nMenu:\nInput Army Size: "
MENU_PROMPT = (
    "\n\nMenu:\n"
    "1. Print Armies\n"
    "2. Play Battle Game\n"
    "3. Exit\n"
    "\nInput: "
)
INVALID_CHOICE = "Invalid choice, try again\n"


class Choice(IntEnum):
    PRINT = 1
    PLAY = 2
    QUIT = 3


def _parse_choice(text: str) -> Choice | None:
    try:
        return Choice(int(text.strip()))
    except ValueError:
        return None


def _ask(prompt: str, input_func, out) -> str:
    out.write(prompt)
    out.flush()
    return input_func()


def run_menu(size, rng=None, input_func=input, out=None):
    """Run the menu loop over two fresh armies of the given size; return the armies.

    Reaching the end of input ends the loop as choosing Exit would.
    """
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()
    army1 = Army(size, FIRST_TEAM, rng)
    army2 = Army(size, SECOND_TEAM, rng)

    while True:
        try:
            reply = _ask(MENU_PROMPT, input_func, out)
        except EOFError:
            break
        choice = _parse_choice(reply)
        if choice is Choice.PRINT:
            out.write(army1.format_table())
            out.write(army2.format_table())
        elif choice is Choice.PLAY:
            Game(army1, army2, rng, out).play()
        elif choice is Choice.QUIT:
            break
        else:
            out.write(INVALID_CHOICE)
    return army1, army2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="armybattle",
        description="Recruit two random armies and let them fight.",
    )
    parser.add_argument(
        "size", nargs="?", type=int, help="number of creatures in each army"
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    size = args.size
    if size is None:
        try:
            text = _ask(SIZE_PROMPT, input, sys.stdout)
            size = int(text.strip())
        except EOFError:
            return 0
        except ValueError:
            print("army size must be a whole number", file=sys.stderr)
            return 1
    if size < 0:
        print(f"army size must not be negative, got {size}", file=sys.stderr)
        return 1
    run_menu(size, rng, input, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())