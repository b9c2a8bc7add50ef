"""Rich terminal renderer for the critter world."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from critters.simulation.engine import TickRecord
    from critters.simulation.world import World

BOARD_STYLE = "on grey93"
EMPTY_CELL = "."


def _make_console() -> Console:
    """Create a Rich Console that works on Windows (force UTF-8)."""
    if sys.platform == "win32" and hasattr(sys.stdout, "buffer"):
        utf8_stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
        return Console(file=utf8_stdout, force_terminal=True)
    return Console()


class Renderer:
    """Draws the board, the population counts and the step counter."""

    def __init__(self, console: Console | None = None):
        self.console = console or _make_console()

    def render_board(self, world: World) -> Text:
        """The grid with each critter's glyph in its cached color.

        Cells are as wide as the widest glyph on the board so multi-letter
        glyphs stay aligned.
        """
        cells = {}
        for y in range(world.height):
            for x in range(world.width):
                occupant = world.occupant_at((x, y))
                if occupant is not None:
                    cells[(x, y)] = occupant
        cell_width = max((len(o.glyph) for o in cells.values()), default=1)

        board = Text(style=BOARD_STYLE)
        for y in range(world.height):
            for x in range(world.width):
                occupant = cells.get((x, y))
                if occupant is None:
                    board.append(EMPTY_CELL.center(cell_width), style="grey70")
                else:
                    board.append(occupant.glyph.center(cell_width), style=f"bold {occupant.color}")
                board.append(" ")
            if y < world.height - 1:
                board.append("\n")
        return board

    def render_counts(self, world: World) -> Table:
        """Per-species counts with the current leader in red."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("species")
        table.add_column("count", justify="right")
        leader = world.leader()
        for name, count in world.counts().items():
            style = "bold red" if name == leader else ""
            table.add_row(Text(name, style=style), Text(f"{count:4d}", style=style))
        table.add_row(Text("Step", style="blue"), Text(f"{world.tick_number:5d}", style="blue"))
        return table

    def render_frame(self, world: World, record: TickRecord | None = None) -> Group:
        """One full frame: board, counts and the last tick's infections."""
        parts: list = [self.render_board(world), Text(""), self.render_counts(world)]
        if record is not None and record.infections:
            parts.append(Text(f"  {len(record.infections)} infections this tick", style="dim"))
        if world.debug_mode:
            parts.append(Text("  debug: showing facing", style="dim"))
        return Group(*parts)

    def print_frame(self, world: World, record: TickRecord | None = None) -> None:
        """Clear and print one frame."""
        self.console.clear()
        self.console.print(self.render_frame(world, record))

    def print_summary(self, world: World) -> None:
        """Print end-of-simulation summary."""
        self.console.print("\n  [bold cyan]═══ CRITTERS SIMULATION COMPLETE ═══[/bold cyan]")
        self.console.print(f"  Steps: {world.tick_number}")
        self.console.print(f"  Critters alive: {world.total()}")
        leader = world.leader()
        for name, count in world.counts().items():
            marker = " ★" if name == leader else ""
            status = "[red]EXTINCT[/red]" if count == 0 else f"{count:4d}"
            self.console.print(f"  {name:>12}: {status}{marker}")
