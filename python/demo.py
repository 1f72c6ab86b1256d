"""
Command line entry point: shuffle a layout (or read one) and check it.

Usage:
    python demo.py [seed]                 shuffle and evaluate one layout
    python demo.py grid "STR SV ET|..."   evaluate the given layout
    python demo.py survey N [seed]        evaluate N shuffled layouts
    python demo.py interactive [seed]     browse shuffled layouts
Add -v for debug logging.
"""

from __future__ import annotations

import logging
import random
import sys
from collections import Counter

from ascii_render import render, render_result
from grid_parser import format_rooms, parse_rooms
from room_types import Room, Rooms
from solver import evaluate

logger = logging.getLogger(__name__)


def shuffled_rooms(rng: random.Random) -> Rooms:
    """A uniformly random placement of the nine rooms."""
    rooms = list(Room)
    rng.shuffle(rooms)
    return tuple(rooms)


def check_and_print(rooms: Rooms) -> None:
    print(render(rooms))
    result = evaluate(rooms)
    print(f"{render_result(result)}: {format_rooms(rooms)}")


def survey(count: int, rng: random.Random, max_states: int | None = None) -> Counter[str]:
    """Evaluate `count` shuffled layouts one after another and tally the verdicts."""
    tally: Counter[str] = Counter()
    for i in range(count):
        rooms = shuffled_rooms(rng)
        result = evaluate(rooms, max_states=max_states)
        tally[type(result).__name__] += 1
        logger.info("survey %d/%d: %s %s", i + 1, count, type(result).__name__, format_rooms(rooms))
    return tally


def _rng(seed: str | None) -> random.Random:
    return random.Random(int(seed)) if seed is not None else random.Random()


def main(argv: list[str]) -> int:
    verbose = "-v" in argv
    args = [a for a in argv if a != "-v"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    command = args[0] if args else None

    if command == "grid":
        if len(args) < 2:
            print(__doc__)
            return 2
        try:
            rooms = parse_rooms(args[1])
        except ValueError as e:
            print(f"Invalid layout:\n{e}")
            return 2
        check_and_print(rooms)
    elif command == "survey":
        if len(args) < 2:
            print(__doc__)
            return 2
        tally = survey(int(args[1]), _rng(args[2] if len(args) > 2 else None))
        for name, n in sorted(tally.items()):
            print(f"{name}: {n}")
    elif command == "interactive":
        from interactive_demo import InteractiveDemo

        InteractiveDemo(_rng(args[1] if len(args) > 1 else None)).run()
    elif command is None or command.isdigit():
        check_and_print(shuffled_rooms(_rng(command)))
    else:
        print(__doc__)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
