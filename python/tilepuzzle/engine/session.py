"""A single solve run: start state, search, timing and result."""

from __future__ import annotations

import time

from tilepuzzle.config import SolverConfig
from tilepuzzle.engine.heuristic import Heuristic, manhattan
from tilepuzzle.engine.moves import path_directions
from tilepuzzle.engine.scrambler import Scrambler
from tilepuzzle.engine.search import IDAStar, SearchStats
from tilepuzzle.models.state import Direction, State


class SolveSession:
    """Holds the start state and, once run, the solution and its timing."""

    def __init__(
        self,
        config: SolverConfig,
        initial: State | None = None,
        heuristic: Heuristic = manhattan,
    ) -> None:
        if initial is not None and initial.size != config.size:
            raise ValueError(
                f"Board is {initial.size}×{initial.size} but the configured "
                f"size is {config.size}."
            )
        self.config = config
        self.initial = initial if initial is not None else Scrambler.generate(config)
        self.engine = IDAStar(heuristic, max_depth=config.max_depth)
        self.solution: list[State] = []
        self.elapsed: float = 0.0

    def run(self) -> list[State]:
        start = time.perf_counter()
        self.solution = self.engine.solve(self.initial)
        self.elapsed = time.perf_counter() - start
        return self.solution

    # -- queries --------------------------------------------------------------

    @property
    def solved(self) -> bool:
        return bool(self.solution)

    @property
    def cost(self) -> int | None:
        return len(self.solution) - 1 if self.solution else None

    @property
    def directions(self) -> list[Direction]:
        return path_directions(self.solution)

    @property
    def stats(self) -> SearchStats:
        return self.engine.stats
