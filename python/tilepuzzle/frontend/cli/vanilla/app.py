"""Plain-text solve report: start board, verdict, moves and every step."""

from __future__ import annotations

from tilepuzzle.config import SolverConfig
from tilepuzzle.engine.session import SolveSession
from tilepuzzle.models.state import State


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(state: State) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(state.size * state.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * state.size)

    lines: list[str] = [sep]
    for r, row in enumerate(state.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif state.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- entry point --------------------------------------------------------------


def run(config: SolverConfig, initial: State | None = None) -> bool:
    """Solve *initial* (or a fresh scramble) and print the result.

    Returns True if a solution was found.
    """
    session = SolveSession(config, initial)
    size = config.size

    print(f"  {_C}=== Sliding Puzzle ({size}×{size}) ==={_R}")
    print()
    print("Initial board:")
    print(_render_board(session.initial))
    print()

    solution = session.run()
    if not solution:
        print(f"{_Y}No solution found.{_R}")
        return False

    print(f"{_G}Solution found with cost {session.cost}:{_R}")
    if session.cost:
        print("Moves: " + " ".join(d.value for d in session.directions))
    print(
        f"{_DIM}{session.stats.iterations} iterations, "
        f"{session.stats.expanded} nodes expanded, "
        f"{session.elapsed:.3f}s{_R}"
    )
    print()
    for i, state in enumerate(solution):
        print(f"Step {i}:")
        print(_render_board(state))
        print()
    return True
