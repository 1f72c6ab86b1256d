"""
Search operators: panel warps and tile slides.
"""

from __future__ import annotations

from enum import Enum

from chain import find_entrance
from room_graph import PANEL_TARGETS, entrance_to_room_direction
from room_types import Direction, Gate, Position, Room, Rooms
from topology import find_room, move


class Operation(Enum):
    """Operators in the order the search tries them."""

    REACH_START = "reach_start"
    REACH_LANAYRU_MINING_FACILITY = "reach_lanayru_mining_facility"
    REACH_EARTH_TEMPLE = "reach_earth_temple"
    REACH_MINI_BOSS = "reach_mini_boss"
    MOVE_UP = "move_up"
    MOVE_LEFT = "move_left"
    MOVE_DOWN = "move_down"
    MOVE_RIGHT = "move_right"


OPERATIONS: tuple[Operation, ...] = tuple(Operation)

_REACH_ROOMS = {
    Operation.REACH_START: Room.START,
    Operation.REACH_LANAYRU_MINING_FACILITY: Room.LANAYRU_MINING_FACILITY,
    Operation.REACH_EARTH_TEMPLE: Room.EARTH_TEMPLE,
    Operation.REACH_MINI_BOSS: Room.MINI_BOSS,
}

_MOVE_DIRECTIONS = {
    Operation.MOVE_UP: Direction.UP,
    Operation.MOVE_LEFT: Direction.LEFT,
    Operation.MOVE_DOWN: Direction.DOWN,
    Operation.MOVE_RIGHT: Direction.RIGHT,
}


def slide(rooms: Rooms, position: Position, direction: Direction) -> Rooms | None:
    """
    Swap the empty tile with its neighbor in `direction`.

    Returns:
        The new layout, or None if there is no neighbor that way or the
        neighbor is the tile the player stands on
    """
    empty_tile = find_room(rooms, Room.EMPTY)
    step = move(empty_tile, direction)
    if step is None or step.tile == position.tile:
        return None
    swapped = list(rooms)
    swapped[empty_tile], swapped[step.tile] = swapped[step.tile], swapped[empty_tile]
    return tuple(swapped)


def reach_panel(rooms: Rooms, gates: Gate, position: Position, room: Room) -> Position | None:
    """
    Warp to a room's control panel if the chain from `position` gets there.

    The new position is the tile holding the panel entrance, facing that
    entrance's own side.
    """
    target = PANEL_TARGETS[room]
    tile = find_entrance(rooms, gates, position.tile, position.direction, target)
    if tile is None:
        return None
    _, direction = entrance_to_room_direction(target)
    return Position(tile, direction)


def apply_operation(
    operation: Operation,
    rooms: Rooms,
    position: Position,
    gates: Gate,
) -> tuple[Rooms, Position] | None:
    """Apply one operator. Returns the new (layout, position) or None if it does not apply."""
    if operation in _REACH_ROOMS:
        new_position = reach_panel(rooms, gates, position, _REACH_ROOMS[operation])
        if new_position is None:
            return None
        return (rooms, new_position)

    new_rooms = slide(rooms, position, _MOVE_DIRECTIONS[operation])
    if new_rooms is None:
        return None
    return (new_rooms, position)
