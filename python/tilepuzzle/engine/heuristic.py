"""Distance estimates from a state to the goal."""

from __future__ import annotations

from typing import Callable

from tilepuzzle.models.state import State

Heuristic = Callable[[State], int]


def manhattan(state: State) -> int:
    """Sum of row and column distances of every tile from its goal cell.

    The blank is not counted, so the result is 0 exactly at the goal.
    """
    n = state.size
    dist = 0
    for idx, val in enumerate(state.tiles):
        if val == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(val - 1, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
