"""
Room layout parsing.

Layouts are written row by row, e.g. "STR SV ET|LMF BOS AC|FS SSH _".
"""

from __future__ import annotations

from room_types import GRID_SIZE, Room, Rooms, check_rooms

__all__ = ["parse_rooms", "format_rooms"]


_ROOMS_BY_TOKEN: dict[str, Room] = {}
for _room in Room:
    _ROOMS_BY_TOKEN[_room.value.lower()] = _room
    _ROOMS_BY_TOKEN[_room.name.lower()] = _room
    _ROOMS_BY_TOKEN[_room.name.replace("_", "").lower()] = _room


def parse_rooms(definition: str) -> Rooms:
    """
    Parse a 3x3 room layout.

    Format:
    - Rows separated by |
    - Cells separated by whitespace
    - A cell is a room abbreviation (STR, SV, ET, LMF, BOS, AC, FS, SSH) or a
      room name (Skyview, EARTH_TEMPLE, LanayruMiningFacility, ...), case
      insensitive
    - _ marks the empty slot

    Example:
        "STR SV ET|LMF BOS AC|FS SSH _"

    Args:
        definition: Layout string

    Returns:
        Nine rooms in row-major order

    Raises:
        ValueError: If a cell is not a room or the shape is not 3x3
        InvalidGridError: If the rooms are not all distinct
    """
    row_strings = definition.strip().split("|")
    if len(row_strings) != GRID_SIZE:
        raise ValueError(
            f"Expected {GRID_SIZE} rows separated by '|', got {len(row_strings)}\n"
            f"  Layout: \"{definition}\""
        )

    rooms: list[Room] = []
    for row_idx, row_str in enumerate(row_strings):
        cell_strings = row_str.split()
        if len(cell_strings) != GRID_SIZE:
            raise ValueError(
                f"Expected {GRID_SIZE} cells in row {row_idx}, got {len(cell_strings)}\n"
                f"  Row {row_idx}: \"{row_str.strip()}\""
            )
        for col_idx, cell_str in enumerate(cell_strings):
            room = _ROOMS_BY_TOKEN.get(cell_str.lower())
            if room is None:
                valid = ", ".join(r.value for r in Room)
                error_msg = (
                    f"Invalid cell string: '{cell_str}'\n"
                    f"  Row {row_idx}: \"{row_str.strip()}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid abbreviations: {valid}"
                )
                raise ValueError(error_msg)
            rooms.append(room)

    return check_rooms(tuple(rooms))


def format_rooms(rooms: Rooms) -> str:
    """Inverse of parse_rooms()."""
    rows = []
    for start in range(0, len(rooms), GRID_SIZE):
        rows.append(" ".join(room.value for room in rooms[start : start + GRID_SIZE]))
    return "|".join(rows)
