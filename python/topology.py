"""
Tile adjacency on the 3x3 row-major grid.
"""

from __future__ import annotations

from room_types import GRID_SIZE, Direction, Position, Room, Rooms


def move(tile: int, direction: Direction) -> Position | None:
    """
    Step from a tile to its neighbor.

    Args:
        tile: Tile index 0-8
        direction: Direction of travel

    Returns:
        The neighbor tile, facing back the way we came (so it names the side
        the neighbor is entered from), or None when stepping off the grid
    """
    dr, dc = direction.delta
    row, col = divmod(tile, GRID_SIZE)
    row, col = row + dr, col + dc
    if row < 0 or row >= GRID_SIZE or col < 0 or col >= GRID_SIZE:
        return None
    return Position(row * GRID_SIZE + col, direction.opposite())


def find_room(rooms: Rooms, room: Room) -> int:
    """Tile index holding the given room."""
    return rooms.index(room)
