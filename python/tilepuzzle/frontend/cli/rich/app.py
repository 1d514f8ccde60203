"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
session and engine as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilepuzzle.config import SolverConfig
from tilepuzzle.engine.session import SolveSession
from tilepuzzle.models.state import State

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(state: State) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(state.size * state.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(state.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(state.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif state.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(index: int, state: State) -> Panel:
    return Panel(
        _render_board(state),
        title=f"[cyan]{index}[/cyan]",
        border_style="dim",
        expand=False,
    )


# -- entry point --------------------------------------------------------------


def run(config: SolverConfig, initial: State | None = None) -> bool:
    """Solve *initial* (or a fresh scramble) and print the result.

    Returns True if a solution was found.
    """
    session = SolveSession(config, initial)
    size = config.size

    console.print(
        Panel(
            Align.center(_render_board(session.initial)),
            title=f"[bold cyan]Initial board  {size}×{size}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
            expand=False,
        )
    )

    with console.status("[cyan]Searching…[/cyan]"):
        solution = session.run()

    if not solution:
        console.print("[red]No solution found.[/red]")
        return False

    console.print(f"[bold green]Solution found with cost {session.cost}:[/bold green]")
    if session.cost:
        moves = Text("Moves: ", style="bold")
        moves.append(" ".join(d.value for d in session.directions), style="cyan")
        console.print(moves)
    console.print(
        f"[dim]{session.stats.iterations} iterations, "
        f"{session.stats.expanded} nodes expanded, "
        f"{session.elapsed:.3f}s[/dim]"
    )
    console.print(Columns([_step_panel(i, s) for i, s in enumerate(solution)]))
    return True
