"""
Static room/entrance tables.

Each room exposes entrances on one or two of its sides. Walking through a room
links one entrance to the other, and some of those links stay shut until a gate
has been opened somewhere else.
"""

from __future__ import annotations

from room_types import Direction, Entrance, Gate, Room

__all__ = [
    "PANEL_TARGETS",
    "entrance_of",
    "entrance_to_room_direction",
    "has_control_panel",
    "opens_gate",
    "traverse_internal",
]


# =============================================================================
# Tables
# =============================================================================


_ENTRANCE_SIDES: dict[Entrance, tuple[Room, Direction]] = {
    Entrance.START_DOWN: (Room.START, Direction.DOWN),
    Entrance.START_RIGHT: (Room.START, Direction.RIGHT),
    Entrance.SKYVIEW_LEFT: (Room.SKYVIEW, Direction.LEFT),
    Entrance.SKYVIEW_UP: (Room.SKYVIEW, Direction.UP),
    Entrance.EARTH_TEMPLE_RIGHT: (Room.EARTH_TEMPLE, Direction.RIGHT),
    Entrance.EARTH_TEMPLE_DOWN: (Room.EARTH_TEMPLE, Direction.DOWN),
    Entrance.LANAYRU_MINING_FACILITY_DOWN: (Room.LANAYRU_MINING_FACILITY, Direction.DOWN),
    Entrance.LANAYRU_MINING_FACILITY_UP: (Room.LANAYRU_MINING_FACILITY, Direction.UP),
    Entrance.MINI_BOSS_LEFT: (Room.MINI_BOSS, Direction.LEFT),
    Entrance.MINI_BOSS_DOWN: (Room.MINI_BOSS, Direction.DOWN),
    Entrance.ANCIENT_CISTERN_RIGHT: (Room.ANCIENT_CISTERN, Direction.RIGHT),
    Entrance.ANCIENT_CISTERN_DOWN: (Room.ANCIENT_CISTERN, Direction.DOWN),
    Entrance.FIRE_SANCTUARY_LEFT: (Room.FIRE_SANCTUARY, Direction.LEFT),
    Entrance.FIRE_SANCTUARY_RIGHT: (Room.FIRE_SANCTUARY, Direction.RIGHT),
    Entrance.SANDSHIP_LEFT: (Room.SANDSHIP, Direction.LEFT),
}

_ENTRANCE_BY_SIDE: dict[tuple[Room, Direction], Entrance] = {
    side: entrance for entrance, side in _ENTRANCE_SIDES.items()
}

# entrance -> (other side of the room, gate required to walk through or None)
_INTERNAL_LINKS: dict[Entrance, tuple[Entrance, Gate | None]] = {
    Entrance.START_DOWN: (Entrance.START_RIGHT, None),
    Entrance.START_RIGHT: (Entrance.START_DOWN, Gate.STARTING),
    Entrance.SKYVIEW_LEFT: (Entrance.SKYVIEW_UP, None),
    Entrance.SKYVIEW_UP: (Entrance.SKYVIEW_LEFT, None),
    Entrance.EARTH_TEMPLE_RIGHT: (Entrance.EARTH_TEMPLE_DOWN, Gate.EARTH_TEMPLE),
    Entrance.EARTH_TEMPLE_DOWN: (Entrance.EARTH_TEMPLE_RIGHT, None),
    Entrance.LANAYRU_MINING_FACILITY_DOWN: (Entrance.LANAYRU_MINING_FACILITY_UP, None),
    Entrance.LANAYRU_MINING_FACILITY_UP: (Entrance.LANAYRU_MINING_FACILITY_DOWN, None),
    Entrance.MINI_BOSS_LEFT: (Entrance.MINI_BOSS_DOWN, Gate.MINI_BOSS),
    Entrance.MINI_BOSS_DOWN: (Entrance.MINI_BOSS_LEFT, None),
    Entrance.ANCIENT_CISTERN_RIGHT: (Entrance.ANCIENT_CISTERN_DOWN, None),
    Entrance.ANCIENT_CISTERN_DOWN: (Entrance.ANCIENT_CISTERN_RIGHT, None),
    Entrance.FIRE_SANCTUARY_LEFT: (Entrance.FIRE_SANCTUARY_RIGHT, Gate.FIRE_SANCTUARY),
    Entrance.FIRE_SANCTUARY_RIGHT: (Entrance.FIRE_SANCTUARY_LEFT, None),
    # SANDSHIP_LEFT is a dead end
}

_CONTROL_PANELS = frozenset(
    {
        Entrance.START_RIGHT,
        Entrance.LANAYRU_MINING_FACILITY_DOWN,
        Entrance.EARTH_TEMPLE_DOWN,
        Entrance.MINI_BOSS_LEFT,
    }
)

_GATE_OPENERS: dict[Entrance, Gate] = {
    Entrance.START_DOWN: Gate.STARTING,
    Entrance.EARTH_TEMPLE_DOWN: Gate.EARTH_TEMPLE,
    Entrance.MINI_BOSS_DOWN: Gate.MINI_BOSS,
    Entrance.FIRE_SANCTUARY_RIGHT: Gate.FIRE_SANCTUARY,
}

# Entrance a panel warp lands on, per room that can be warped to
PANEL_TARGETS: dict[Room, Entrance] = {
    Room.START: Entrance.START_DOWN,
    Room.LANAYRU_MINING_FACILITY: Entrance.LANAYRU_MINING_FACILITY_DOWN,
    Room.EARTH_TEMPLE: Entrance.EARTH_TEMPLE_DOWN,
    Room.MINI_BOSS: Entrance.MINI_BOSS_LEFT,
}


# =============================================================================
# Lookups
# =============================================================================


def entrance_of(room: Room, direction: Direction) -> Entrance | None:
    """Entrance on the given side of a room, or None if that side is a wall."""
    return _ENTRANCE_BY_SIDE.get((room, direction))


def entrance_to_room_direction(entrance: Entrance) -> tuple[Room, Direction]:
    return _ENTRANCE_SIDES[entrance]


def traverse_internal(entrance: Entrance, gates: Gate) -> Entrance | None:
    """
    Walk through the room from one entrance to its other side.

    Returns:
        The entrance on the other side, or None if the link needs a gate that
        is not open yet or the entrance has no link at all
    """
    link = _INTERNAL_LINKS.get(entrance)
    if link is None:
        return None
    target, required = link
    if required is not None and not gates & required:
        return None
    return target


def has_control_panel(entrance: Entrance) -> bool:
    return entrance in _CONTROL_PANELS


def opens_gate(entrance: Entrance) -> Gate | None:
    """Gate that visiting this entrance opens for good, if any."""
    return _GATE_OPENERS.get(entrance)
