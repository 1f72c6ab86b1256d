"""Tests for tile topology and the room/entrance tables."""

import itertools

import pytest

from room_graph import (
    PANEL_TARGETS,
    entrance_of,
    entrance_to_room_direction,
    has_control_panel,
    opens_gate,
    traverse_internal,
)
from room_types import NO_GATES, Direction, Entrance, Gate, Position, Room
from topology import find_room, move

ALL_GATE_SETS = [
    Gate(sum(bits))
    for n in range(len(Gate) + 1)
    for bits in itertools.combinations([g.value for g in Gate], n)
]


# =============================================================================
# Test Topology
# =============================================================================


class TestMove:
    """Tests for stepping between tiles."""

    @pytest.mark.parametrize(
        "tile,direction,expected",
        [
            (4, Direction.UP, Position(1, Direction.DOWN)),
            (4, Direction.LEFT, Position(3, Direction.RIGHT)),
            (4, Direction.DOWN, Position(7, Direction.UP)),
            (4, Direction.RIGHT, Position(5, Direction.LEFT)),
            (7, Direction.RIGHT, Position(8, Direction.LEFT)),
            (3, Direction.UP, Position(0, Direction.DOWN)),
        ],
    )
    def test_neighbors(self, tile: int, direction: Direction, expected: Position) -> None:
        """Each step lands on the adjacent tile facing back."""
        assert move(tile, direction) == expected

    @pytest.mark.parametrize(
        "tile,direction",
        [
            (0, Direction.UP),
            (2, Direction.UP),
            (0, Direction.LEFT),
            (3, Direction.LEFT),
            (6, Direction.LEFT),
            (6, Direction.DOWN),
            (7, Direction.DOWN),
            (2, Direction.RIGHT),
            (5, Direction.RIGHT),
            (8, Direction.RIGHT),
        ],
    )
    def test_off_grid(self, tile: int, direction: Direction) -> None:
        """Stepping over the border yields None."""
        assert move(tile, direction) is None

    def test_round_trip(self) -> None:
        """Stepping back along the returned facing returns to the start."""
        for tile in range(9):
            for direction in Direction:
                step = move(tile, direction)
                if step is None:
                    continue
                assert move(step.tile, step.direction) == Position(tile, direction)

    def test_opposite_is_involution(self) -> None:
        """opposite() applied twice is the identity."""
        for direction in Direction:
            assert direction.opposite() != direction
            assert direction.opposite().opposite() == direction

    def test_find_room(self) -> None:
        """find_room returns the tile index of a room."""
        rooms = tuple(Room)
        assert find_room(rooms, Room.START) == 0
        assert find_room(rooms, Room.EMPTY) == 8


# =============================================================================
# Test Room Graph
# =============================================================================


class TestEntranceTables:
    """Tests for the static room/entrance tables."""

    def test_fifteen_entrances(self) -> None:
        """There are exactly 15 entrances."""
        assert len(Entrance) == 15

    @pytest.mark.parametrize("entrance", list(Entrance))
    def test_lookup_round_trip(self, entrance: Entrance) -> None:
        """entrance_of inverts entrance_to_room_direction for every entrance."""
        room, direction = entrance_to_room_direction(entrance)
        assert entrance_of(room, direction) == entrance

    def test_sides_without_entrance(self) -> None:
        """Only 15 (room, side) pairs map to an entrance."""
        mapped = [
            (room, direction)
            for room in Room
            for direction in Direction
            if entrance_of(room, direction) is not None
        ]
        assert len(mapped) == 15

    def test_every_room_has_one_or_two_entrances(self) -> None:
        """Each non-empty room has one or two entrances; EMPTY has none."""
        for room in Room:
            count = sum(1 for d in Direction if entrance_of(room, d) is not None)
            if room == Room.EMPTY:
                assert count == 0
            else:
                assert count in (1, 2)

    def test_sandship(self) -> None:
        """Sandship only opens to the left and is a dead end."""
        assert entrance_of(Room.SANDSHIP, Direction.DOWN) is None
        assert entrance_of(Room.SANDSHIP, Direction.LEFT) == Entrance.SANDSHIP_LEFT
        full = Gate.STARTING | Gate.EARTH_TEMPLE | Gate.MINI_BOSS | Gate.FIRE_SANCTUARY
        assert traverse_internal(Entrance.SANDSHIP_LEFT, full) is None

    def test_control_panels(self) -> None:
        """Exactly four entrances host a control panel."""
        panels = {e for e in Entrance if has_control_panel(e)}
        assert panels == {
            Entrance.START_RIGHT,
            Entrance.LANAYRU_MINING_FACILITY_DOWN,
            Entrance.EARTH_TEMPLE_DOWN,
            Entrance.MINI_BOSS_LEFT,
        }

    def test_gate_openers(self) -> None:
        """Each gate is opened by exactly one entrance."""
        openers = {e: opens_gate(e) for e in Entrance if opens_gate(e) is not None}
        assert openers == {
            Entrance.START_DOWN: Gate.STARTING,
            Entrance.EARTH_TEMPLE_DOWN: Gate.EARTH_TEMPLE,
            Entrance.MINI_BOSS_DOWN: Gate.MINI_BOSS,
            Entrance.FIRE_SANCTUARY_RIGHT: Gate.FIRE_SANCTUARY,
        }

    def test_panel_targets_belong_to_their_room(self) -> None:
        """Warp targets are entrances of the room being warped to."""
        for room, entrance in PANEL_TARGETS.items():
            assert entrance_to_room_direction(entrance)[0] == room


class TestTraverseInternal:
    """Tests for walking through a room."""

    @pytest.mark.parametrize(
        "entrance,expected",
        [
            (Entrance.START_DOWN, Entrance.START_RIGHT),
            (Entrance.SKYVIEW_LEFT, Entrance.SKYVIEW_UP),
            (Entrance.SKYVIEW_UP, Entrance.SKYVIEW_LEFT),
            (Entrance.EARTH_TEMPLE_DOWN, Entrance.EARTH_TEMPLE_RIGHT),
            (Entrance.LANAYRU_MINING_FACILITY_DOWN, Entrance.LANAYRU_MINING_FACILITY_UP),
            (Entrance.LANAYRU_MINING_FACILITY_UP, Entrance.LANAYRU_MINING_FACILITY_DOWN),
            (Entrance.MINI_BOSS_DOWN, Entrance.MINI_BOSS_LEFT),
            (Entrance.ANCIENT_CISTERN_RIGHT, Entrance.ANCIENT_CISTERN_DOWN),
            (Entrance.ANCIENT_CISTERN_DOWN, Entrance.ANCIENT_CISTERN_RIGHT),
            (Entrance.FIRE_SANCTUARY_RIGHT, Entrance.FIRE_SANCTUARY_LEFT),
        ],
    )
    def test_open_links(self, entrance: Entrance, expected: Entrance) -> None:
        """Ungated links work with no gates open."""
        assert traverse_internal(entrance, NO_GATES) == expected

    @pytest.mark.parametrize(
        "entrance,gate,expected",
        [
            (Entrance.START_RIGHT, Gate.STARTING, Entrance.START_DOWN),
            (Entrance.EARTH_TEMPLE_RIGHT, Gate.EARTH_TEMPLE, Entrance.EARTH_TEMPLE_DOWN),
            (Entrance.MINI_BOSS_LEFT, Gate.MINI_BOSS, Entrance.MINI_BOSS_DOWN),
            (Entrance.FIRE_SANCTUARY_LEFT, Gate.FIRE_SANCTUARY, Entrance.FIRE_SANCTUARY_RIGHT),
        ],
    )
    def test_gated_links(self, entrance: Entrance, gate: Gate, expected: Entrance) -> None:
        """Gated links need their own gate and no other."""
        assert traverse_internal(entrance, NO_GATES) is None
        assert traverse_internal(entrance, gate) == expected
        others = Gate(sum(g.value for g in Gate if g != gate))
        assert traverse_internal(entrance, others) is None

    def test_links_stay_in_room(self) -> None:
        """A link never leaves the room it starts in."""
        full = Gate(sum(g.value for g in Gate))
        for entrance in Entrance:
            target = traverse_internal(entrance, full)
            if target is not None:
                assert entrance_to_room_direction(target)[0] == entrance_to_room_direction(entrance)[0]
                assert target != entrance

    def test_monotonic_in_gates(self) -> None:
        """Opening more gates never closes a link."""
        for entrance in Entrance:
            for small in ALL_GATE_SETS:
                for large in ALL_GATE_SETS:
                    if small | large != large:
                        continue
                    if traverse_internal(entrance, small) is not None:
                        assert traverse_internal(entrance, large) is not None
