#!/usr/bin/env python3
"""Sliding Puzzle IDA* Solver.

Usage::

    python main.py                        # scramble a 4×4 board and solve it
    python main.py -f vanilla -s 3 -d 40  # plain output, 3×3, 40 scramble moves
    python main.py --board 1,2,3,4,5,6,7,0,8
    python main.py --seed 7 --max-depth 30 --log-level debug
"""

import importlib
import math
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilepuzzle.config import SolverConfig  # noqa: E402
from tilepuzzle.engine.scrambler import is_solvable  # noqa: E402
from tilepuzzle.log import LOG_LEVELS, setup_logging  # noqa: E402
from tilepuzzle.models.state import State  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "tilepuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "tilepuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_board(raw: str) -> State:
    """Parse a comma-separated row-major tile list into a ``State``."""
    try:
        flat = [int(v) for v in raw.replace(" ", "").split(",") if v]
    except ValueError:
        raise typer.BadParameter("Tiles must be integers.", param_hint="--board")
    size = math.isqrt(len(flat))
    if size * size != len(flat):
        raise typer.BadParameter(
            f"{len(flat)} tiles do not form a square board.", param_hint="--board"
        )
    try:
        return State.from_flat(size, flat)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--board")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        envvar="TILEPUZZLE_FRONTEND",
        help="Frontend used to print the result.",
    ),
    size: int = typer.Option(
        4, "-s", "--size",
        min=2, max=8,
        envvar="TILEPUZZLE_SIZE",
        help="Grid size (2-8). Ignored when --board is given.",
    ),
    depth: int = typer.Option(
        40, "-d", "--depth",
        min=0,
        envvar="TILEPUZZLE_DEPTH",
        help="Number of random moves used to scramble the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="TILEPUZZLE_SEED",
        help="Seed for the scrambler.",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth",
        min=0,
        envvar="TILEPUZZLE_MAX_DEPTH",
        help="Give up once the search bound exceeds this many moves.",
    ),
    board: Optional[str] = typer.Option(
        None, "--board",
        envvar="TILEPUZZLE_BOARD",
        help="Comma-separated row-major tiles (0 = blank) to solve instead of a scramble.",
    ),
    log_level: str = typer.Option(
        "warning", "--log-level",
        envvar="TILEPUZZLE_LOG_LEVEL",
        help=f"One of: {', '.join(LOG_LEVELS)}.",
    ),
) -> None:
    """Solve a sliding puzzle with IDA* and the Manhattan distance."""
    try:
        setup_logging(log_level.lower())
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    initial = _parse_board(board) if board is not None else None
    if initial is not None:
        size = initial.size
        if not is_solvable(initial):
            typer.echo("Board is unsolvable.", err=True)
            raise typer.Exit(code=1)

    config = SolverConfig(
        size=size, scramble_depth=depth, max_depth=max_depth, seed=seed
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    if not mod.run(config, initial):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
