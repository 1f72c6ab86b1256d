"""
Shared type definitions for the room grid solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag


class Direction(Enum):
    """Side of a tile, also used as a direction of travel."""

    UP = "U"  # Decreasing row
    LEFT = "L"  # Decreasing col
    DOWN = "D"  # Increasing row
    RIGHT = "R"  # Increasing col

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.LEFT: Direction.RIGHT,
    Direction.DOWN: Direction.UP,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
}


class Room(Enum):
    """A room that can be placed on a tile. EMPTY is the sliding blank."""

    START = "STR"
    SKYVIEW = "SV"
    EARTH_TEMPLE = "ET"
    LANAYRU_MINING_FACILITY = "LMF"
    MINI_BOSS = "BOS"
    ANCIENT_CISTERN = "AC"
    FIRE_SANCTUARY = "FS"
    SANDSHIP = "SSH"
    EMPTY = "_"


class Entrance(Enum):
    """The 15 fixed exits. Each belongs to exactly one (Room, Direction)."""

    START_DOWN = "start_down"
    START_RIGHT = "start_right"
    SKYVIEW_LEFT = "skyview_left"
    SKYVIEW_UP = "skyview_up"
    EARTH_TEMPLE_RIGHT = "earth_temple_right"
    EARTH_TEMPLE_DOWN = "earth_temple_down"
    LANAYRU_MINING_FACILITY_DOWN = "lanayru_mining_facility_down"
    LANAYRU_MINING_FACILITY_UP = "lanayru_mining_facility_up"
    MINI_BOSS_LEFT = "mini_boss_left"
    MINI_BOSS_DOWN = "mini_boss_down"
    ANCIENT_CISTERN_RIGHT = "ancient_cistern_right"
    ANCIENT_CISTERN_DOWN = "ancient_cistern_down"
    FIRE_SANCTUARY_LEFT = "fire_sanctuary_left"
    FIRE_SANCTUARY_RIGHT = "fire_sanctuary_right"
    SANDSHIP_LEFT = "sandship_left"


class Gate(IntFlag):
    """Persistent unlock flags. Bits are only ever added during a search."""

    STARTING = 1 << 0
    EARTH_TEMPLE = 1 << 1
    MINI_BOSS = 1 << 2
    FIRE_SANCTUARY = 1 << 3


NO_GATES = Gate(0)


@dataclass(frozen=True)
class Position:
    """Player reference point: a tile and the side it is entered from."""

    tile: int
    direction: Direction


# Nine rooms in row-major tile order
Rooms = tuple[Room, ...]

GRID_SIZE = 3
TILE_COUNT = GRID_SIZE * GRID_SIZE


class InvalidGridError(ValueError):
    """Raised when a room layout breaks the nine-distinct-rooms invariant."""


def check_rooms(rooms: Rooms) -> Rooms:
    """
    Validate a room layout before it is handed to the solver.

    A layout must have exactly nine cells holding every Room value once, which
    implies exactly one EMPTY.

    Returns:
        The layout as a tuple

    Raises:
        InvalidGridError: If the layout breaks the invariant
    """
    rooms = tuple(rooms)
    if len(rooms) != TILE_COUNT:
        raise InvalidGridError(f"Expected {TILE_COUNT} tiles, got {len(rooms)}")

    not_rooms = [r for r in rooms if not isinstance(r, Room)]
    if not_rooms:
        raise InvalidGridError(f"Not a room: {not_rooms[0]!r}")

    seen: set[Room] = set()
    duplicates: list[Room] = []
    for room in rooms:
        if room in seen:
            duplicates.append(room)
        seen.add(room)
    if duplicates:
        error_msg = "Rooms must be distinct\n"
        for room in duplicates:
            tiles = [i for i, r in enumerate(rooms) if r == room]
            error_msg += f"  {room.name} appears on tiles {tiles}\n"
        missing = [room.name for room in Room if room not in seen]
        error_msg += f"  Missing: {', '.join(missing)}"
        raise InvalidGridError(error_msg)

    return rooms
