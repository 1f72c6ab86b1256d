"""
Interactive browser for shuffled room layouts.
Shows a layout and its verdict; keys reshuffle or quit.
"""

from __future__ import annotations

import random

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render, render_result
from demo import shuffled_rooms
from grid_parser import format_rooms
from room_types import Rooms
from solver import ENTRY, SolveResult, Solvable, evaluate


class InteractiveDemo:
    """Keyboard-driven loop over shuffled layouts."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.console = Console()
        self.history: list[tuple[Rooms, SolveResult]] = []
        self.status_message = "Ready"
        self.shuffle()

    @property
    def current(self) -> tuple[Rooms, SolveResult]:
        return self.history[-1]

    def shuffle(self) -> None:
        """Draw a new layout and evaluate it."""
        rooms = shuffled_rooms(self.rng)
        self.history.append((rooms, evaluate(rooms)))
        self.status_message = f"Layout #{len(self.history)}"

    def back(self) -> None:
        if len(self.history) > 1:
            self.history.pop()
            self.status_message = f"Layout #{len(self.history)}"
        else:
            self.status_message = "No earlier layout"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and verdict."""
        rooms, result = self.current

        status = Text()
        status.append(Text.from_ansi(render(rooms, highlight_tile=ENTRY.tile)))
        status.append("\n\n")
        status.append("Layout: ", style="bold")
        status.append(f"{format_rooms(rooms)}\n")
        status.append("Verdict: ", style="bold")
        status.append(Text.from_ansi(render_result(result)))
        status.append("\n\n")

        solved = sum(1 for _, r in self.history if isinstance(r, Solvable))
        status.append(f"Possible so far: {solved}/{len(self.history)}\n\n")

        status.append("Keys:\n", style="bold cyan")
        status.append("  N - New shuffle\n")
        status.append("  B - Back to previous layout\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Room Shuffle", border_style="green", width=60)

    def run(self) -> None:
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'n':
                        self.shuffle()
                    elif key.lower() == 'b':
                        self.back()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())
