"""
Solvability search for a shuffled room grid.

The player enters at the bottom of tile 7 and must, by sliding tiles and
warping between control panels, touch every one of the 15 entrances at least
once. evaluate() explores operator sequences depth first with an explicit
stack and reports whether that is possible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chain import find_control_panel, scan
from operators import OPERATIONS, apply_operation
from room_graph import entrance_of, entrance_to_room_direction
from room_types import NO_GATES, Direction, Entrance, Gate, Position, Rooms, check_rooms

logger = logging.getLogger(__name__)

ENTRY = Position(7, Direction.DOWN)

NO_ENTRANCE_AT_ENTRY = "no entrance at fixed entry point"
NO_PANEL_FROM_ENTRY = "no control panel reachable from entry"


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True)
class Solvable:
    """Every entrance can be reached."""

    states_explored: int


@dataclass(frozen=True)
class Unsolvable:
    """The whole reachable state space was explored without reaching every entrance."""

    states_explored: int


@dataclass(frozen=True)
class StructuralFailure:
    """The layout cannot even be entered properly; no search was run."""

    reason: str


@dataclass(frozen=True)
class Undecided:
    """The state budget ran out before a verdict; every budgeted state was expanded."""

    states_explored: int


SolveResult = Solvable | Unsolvable | StructuralFailure | Undecided


# =============================================================================
# Search
# =============================================================================


SearchKey = tuple[Rooms, Position]


@dataclass(frozen=True)
class Frame:
    """
    Backtracking point: the state an operator was applied to.

    On backtrack the state is restored and enumeration resumes with the
    operator after `operation_index`.
    """

    rooms: Rooms
    position: Position
    gates: Gate  # Gate set when the operator was applied
    operation_index: int


def evaluate(
    rooms: Rooms,
    *,
    prune: bool = True,
    max_states: int | None = None,
) -> SolveResult:
    """
    Decide whether a layout lets the player reach every entrance.

    Args:
        rooms: Nine rooms in row-major order, one of them EMPTY
        prune: Skip states already explored with an equal or larger gate set.
            When False, only exact (layout, position, gates) repeats are
            skipped; the verdict is the same, the search is slower.
        max_states: Optional cap on the number of states expanded

    Returns:
        Solvable, Unsolvable, StructuralFailure or (only with max_states)
        Undecided

    Raises:
        InvalidGridError: If the layout is not nine distinct rooms
    """
    rooms = check_rooms(rooms)

    if entrance_of(rooms[ENTRY.tile], ENTRY.direction) is None:
        logger.debug("%s: %s", NO_ENTRANCE_AT_ENTRY, rooms[ENTRY.tile].name)
        return StructuralFailure(NO_ENTRANCE_AT_ENTRY)

    panel = find_control_panel(rooms, NO_GATES, ENTRY.tile, ENTRY.direction)
    if panel is None:
        logger.debug("%s", NO_PANEL_FROM_ENTRY)
        return StructuralFailure(NO_PANEL_FROM_ENTRY)

    panel_entrance, panel_tile = panel
    _, panel_direction = entrance_to_room_direction(panel_entrance)
    start = Position(panel_tile, panel_direction)
    logger.debug("first panel %s on tile %d", panel_entrance.name, panel_tile)

    search = _Search(prune=prune, max_states=max_states)
    result = search.run(rooms, start)
    logger.info(
        "evaluate: %s after %d states (%d memo entries)",
        type(result).__name__,
        search.states_explored,
        len(search.memo) if prune else len(search.seen),
    )
    return result


class _Search:
    """State for one evaluate() call. Never shared between searches."""

    def __init__(self, prune: bool, max_states: int | None) -> None:
        self.prune = prune
        self.max_states = max_states
        self.memo: dict[SearchKey, Gate] = {}
        self.seen: set[tuple[Rooms, Position, Gate]] = set()
        self.unreachable: set[Entrance] = set(Entrance)
        self.states_explored = 0

    def visit(self, rooms: Rooms, position: Position, gates: Gate) -> tuple[bool, Gate]:
        """
        Scan a freshly entered state and consult the memo table.

        Returns:
            (explore, gates) where explore is False if the state should be
            treated as an operator failure, and gates is the gate set to
            explore it with
        """
        # The walk from the fixed entry keeps verdicts in line with the game;
        # scanning from the player position alone loses solvable layouts.
        for origin in (ENTRY, position):
            walk = scan(rooms, gates, origin.tile, origin.direction)
            self.unreachable -= walk.visited
            gates |= walk.opened

        if not self.prune:
            key = (rooms, position, gates)
            if key in self.seen:
                return (False, gates)
            self.seen.add(key)
            return (True, gates)

        stored = self.memo.get((rooms, position))
        if stored is None:
            self.memo[(rooms, position)] = gates
            return (True, gates)
        if gates | stored == stored:
            # Already explored here with at least these gates
            return (False, gates)
        gates |= stored
        self.memo[(rooms, position)] = gates
        return (True, gates)

    def restore_gates(self, frame: Frame) -> Gate:
        if not self.prune:
            return frame.gates
        return self.memo.get((frame.rooms, frame.position), NO_GATES)

    def run(self, rooms: Rooms, position: Position) -> SolveResult:
        stack: list[Frame] = []
        gates = NO_GATES
        fresh = True
        next_index = 0

        while True:
            if fresh:
                fresh = False
                if self.max_states is not None and self.states_explored >= self.max_states:
                    logger.info("evaluate: state budget of %d exhausted", self.max_states)
                    return Undecided(self.states_explored)
                self.states_explored += 1

                explore, gates = self.visit(rooms, position, gates)
                if not self.unreachable:
                    return Solvable(self.states_explored)
                next_index = 0 if explore else len(OPERATIONS)

            applied = None
            while next_index < len(OPERATIONS):
                applied = apply_operation(OPERATIONS[next_index], rooms, position, gates)
                if applied is not None:
                    break
                next_index += 1

            if applied is not None:
                stack.append(Frame(rooms, position, gates, next_index))
                rooms, position = applied
                fresh = True
                continue

            if not stack:
                remaining = sorted(e.name for e in self.unreachable)
                logger.debug("never reached: %s", ", ".join(remaining))
                return Unsolvable(self.states_explored)

            frame = stack.pop()
            rooms, position = frame.rooms, frame.position
            gates = self.restore_gates(frame)
            next_index = frame.operation_index + 1
