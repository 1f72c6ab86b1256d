"""
ASCII rendering for room layouts and search verdicts.
"""

from __future__ import annotations

from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from room_types import GRID_SIZE, Room, Rooms
from solver import SolveResult, Solvable, StructuralFailure, Undecided, Unsolvable

__all__ = ["render", "render_result", "room_color"]


_ROOM_COLORS: dict[Room, Callable[[str], str]] = {
    Room.START: chalk.green,
    Room.SKYVIEW: chalk.cyan,
    Room.EARTH_TEMPLE: chalk.yellow,
    Room.LANAYRU_MINING_FACILITY: chalk.blue,
    Room.MINI_BOSS: chalk.magenta,
    Room.ANCIENT_CISTERN: chalk.blueBright,
    Room.FIRE_SANCTUARY: chalk.red,
    Room.SANDSHIP: chalk.yellowBright,
}


def room_color(room: Room) -> Callable[[str], str]:
    return _ROOM_COLORS.get(room, lambda s: s)


def render(
    rooms: Rooms,
    cell_width: int = 5,
    highlight_tile: int | None = None,
    title: str = "rooms",
) -> str:
    """
    Render a layout as a bordered 3x3 grid, row-major.

    Args:
        rooms: Nine rooms in row-major order
        cell_width: Characters per cell (default 5)
        highlight_tile: Optional tile to show on a white background
        title: Text centered in the top border

    Returns:
        Rendered ASCII string with ANSI color codes
    """
    grid_width = GRID_SIZE * cell_width + 2
    label = f" {title} "

    lines: list[str] = []

    top = "┌" + "─" * (grid_width - 2) + "┐"
    if len(label) <= grid_width - 2:
        title_start = (grid_width - len(label)) // 2
        top = (
            "┌" +
            "─" * (title_start - 1) +
            label +
            "─" * (grid_width - title_start - len(label) - 1) +
            "┐"
        )
    lines.append(top)

    for start in range(0, len(rooms), GRID_SIZE):
        line_parts = ["│"]
        for tile in range(start, start + GRID_SIZE):
            room = rooms[tile]
            text = "" if room == Room.EMPTY else room.value
            content = text.center(cell_width)
            if tile == highlight_tile:
                content = chalk.bgWhite.black(content)
            else:
                content = room_color(room)(content)
            line_parts.append(content)
        line_parts.append("│")
        lines.append("".join(line_parts))

    lines.append("└" + "─" * (grid_width - 2) + "┘")
    return "\n".join(lines)


def render_result(result: SolveResult) -> str:
    """One-line verdict."""
    match result:
        case Solvable(states_explored=n):
            return chalk.green(f"possible ({n} states explored)")
        case Unsolvable(states_explored=n):
            return chalk.red(f"impossible ({n} states explored)")
        case StructuralFailure(reason=reason):
            return chalk.red(f"impossible ({reason})")
        case Undecided(states_explored=n):
            return chalk.yellow(f"undecided (gave up after {n} states)")
    raise TypeError(f"Not a search result: {result!r}")
