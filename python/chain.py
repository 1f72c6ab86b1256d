"""
Chain-follow: walk linked entrances across rooms.

Starting on one side of a tile, the walk enters the room there, crosses to the
room's other entrance (if the link is open), steps into the neighboring tile
and repeats. It stops at a wall, a shut link, the edge of the grid, or when the
check callback returns a value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TypeVar

from room_graph import (
    entrance_of,
    entrance_to_room_direction,
    has_control_panel,
    opens_gate,
    traverse_internal,
)
from room_types import NO_GATES, Direction, Entrance, Gate, Rooms
from topology import move

T = TypeVar("T")


def follow(
    rooms: Rooms,
    gates: Gate,
    tile: int,
    direction: Direction,
    check: Callable[[Entrance, int], T | None],
) -> T | None:
    """
    Walk the chain starting at `tile`, entered from its `direction` side.

    Args:
        rooms: Current layout
        gates: Open gates; the walk never changes them
        tile: Starting tile
        direction: Side of the starting tile the walk enters from
        check: Callback run on every entrance reached

    Returns:
        The first non-None value returned by `check`, or None if the chain ran
        out first
    """
    while True:
        entrance = entrance_of(rooms[tile], direction)
        if entrance is None:
            return None
        found = check(entrance, tile)
        if found is not None:
            return found

        entrance = traverse_internal(entrance, gates)
        if entrance is None:
            return None
        found = check(entrance, tile)
        if found is not None:
            return found

        _, exit_direction = entrance_to_room_direction(entrance)
        step = move(tile, exit_direction)
        if step is None:
            return None
        tile, direction = step.tile, step.direction


def follow_both(
    rooms: Rooms,
    gates: Gate,
    tile: int,
    direction: Direction,
    check: Callable[[Entrance, int], T | None],
) -> T | None:
    """
    Like follow(), but if the direct walk finds nothing, retry from the tile
    one step further along `direction`.
    """
    found = follow(rooms, gates, tile, direction, check)
    if found is not None:
        return found
    step = move(tile, direction)
    if step is None:
        return None
    return follow(rooms, gates, step.tile, step.direction, check)


def find_entrance(
    rooms: Rooms,
    gates: Gate,
    tile: int,
    direction: Direction,
    target: Entrance,
) -> int | None:
    """Tile on which `target` is met by follow_both(), or None."""
    return follow_both(
        rooms,
        gates,
        tile,
        direction,
        lambda entrance, at: at if entrance == target else None,
    )


def find_control_panel(
    rooms: Rooms,
    gates: Gate,
    tile: int,
    direction: Direction,
) -> tuple[Entrance, int] | None:
    """First panel-hosting entrance met by follow(), with its tile."""
    return follow(
        rooms,
        gates,
        tile,
        direction,
        lambda entrance, at: (entrance, at) if has_control_panel(entrance) else None,
    )


@dataclass
class ChainScan:
    """Accumulator for a scanning walk: what it touched and what it unlocked."""

    visited: set[Entrance] = field(default_factory=set)
    opened: Gate = NO_GATES

    def record(self, entrance: Entrance, tile: int) -> None:
        self.visited.add(entrance)
        gate = opens_gate(entrance)
        if gate is not None:
            self.opened |= gate


def scan(rooms: Rooms, gates: Gate, tile: int, direction: Direction) -> ChainScan:
    """
    Walk the whole chain, recording every entrance and every gate it opens.

    Gates opened part way along do not affect the rest of this walk; the caller
    merges `opened` into its own gate set afterwards.
    """
    result = ChainScan()
    follow(rooms, gates, tile, direction, result.record)
    return result
