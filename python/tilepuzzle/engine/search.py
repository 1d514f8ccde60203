"""Iterative Deepening A* search.

Each iteration is a depth-first search that refuses to expand any node whose
``f = g + h`` exceeds the current bound. A failed iteration reports the
smallest ``f`` it had to prune, which becomes the next bound. No visited set
is kept: memory stays proportional to the current path, at the price of
re-expanding states reached along different paths.

A recursive call answers with either :class:`Found`, carrying the path from
the goal back to the node that received it, or :class:`Pruned`, carrying the
smallest pruned ``f`` in its subtree (``None`` when nothing was pruned).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from tilepuzzle.engine.heuristic import Heuristic, manhattan
from tilepuzzle.engine.moves import successors
from tilepuzzle.engine.scrambler import is_solvable
from tilepuzzle.models.state import State

logger = logging.getLogger(__name__)

SuccessorFn = Callable[[State], list[State]]


@dataclass
class Found:
    path: list[State]  # goal first


@dataclass(frozen=True)
class Pruned:
    bound: int | None


Outcome = Found | Pruned


@dataclass
class SearchStats:
    iterations: int = 0
    expanded: int = 0
    bounds: list[int] = field(default_factory=list)

    @property
    def final_bound(self) -> int | None:
        return self.bounds[-1] if self.bounds else None


class IDAStar:
    """IDA* over sliding-puzzle states with a pluggable heuristic.

    *heuristic* must be admissible and return 0 only at the goal; it is also
    the goal test. With the built-in successor function an unsolvable start
    returns ``[]`` without searching. *max_depth*, when set, stops the search
    with no solution once the bound would exceed it.
    """

    def __init__(
        self,
        heuristic: Heuristic = manhattan,
        successors_fn: SuccessorFn = successors,
        max_depth: int | None = None,
    ) -> None:
        self.heuristic = heuristic
        self.successors_fn = successors_fn
        self.max_depth = max_depth
        self.stats = SearchStats()

    def solve(self, initial: State) -> list[State]:
        """Return the states from *initial* to the goal, or ``[]``."""
        self.stats = SearchStats()
        logger.debug("Solving %dx%d board:\n%s", initial.size, initial.size, initial)
        if self.successors_fn is successors and not is_solvable(initial):
            logger.info("Board is unsolvable; not searching")
            return []
        bound: int | None = self.heuristic(initial)

        while True:
            if bound is None:
                logger.info("Search space exhausted without a solution")
                return []
            if self.max_depth is not None and bound > self.max_depth:
                logger.info(
                    "Bound %d exceeds max depth %d; giving up", bound, self.max_depth
                )
                return []

            self.stats.iterations += 1
            self.stats.bounds.append(bound)
            logger.debug("Iteration %d with bound %d", self.stats.iterations, bound)

            outcome = self._search(initial, 0, bound)
            if isinstance(outcome, Found):
                path = outcome.path[::-1]
                logger.info(
                    "Solved in %d moves (%d iterations, %d nodes expanded)",
                    len(path) - 1,
                    self.stats.iterations,
                    self.stats.expanded,
                )
                return path
            bound = outcome.bound

    def _search(self, state: State, g: int, bound: int) -> Outcome:
        h = self.heuristic(state)
        f = g + h
        if f > bound:
            return Pruned(f)
        if h == 0:
            return Found([state])

        self.stats.expanded += 1
        min_bound: int | None = None
        for child in self.successors_fn(state):
            if child == state:
                continue
            outcome = self._search(child, g + 1, bound)
            if isinstance(outcome, Found):
                outcome.path.append(state)
                return outcome
            if outcome.bound is not None and (
                min_bound is None or outcome.bound < min_bound
            ):
                min_bound = outcome.bound
        return Pruned(min_bound)


def ida_star_search(
    initial: State,
    heuristic: Heuristic = manhattan,
    *,
    max_depth: int | None = None,
) -> list[State]:
    """Solve *initial* with a fresh :class:`IDAStar`."""
    return IDAStar(heuristic, max_depth=max_depth).solve(initial)
