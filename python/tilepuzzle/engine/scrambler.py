"""Generates solvable sliding puzzle start states."""

from __future__ import annotations

import logging
import random

from tilepuzzle.config import SolverConfig
from tilepuzzle.engine.moves import successors
from tilepuzzle.models.state import State

logger = logging.getLogger(__name__)


class Scrambler:
    """Creates solvable puzzles by walking legal moves away from the goal."""

    @staticmethod
    def scramble(state: State, depth: int, rng: random.Random) -> State:
        """Apply *depth* random moves to *state*, never undoing the last one."""
        prev: State | None = None
        for _ in range(depth):
            candidates = successors(state)
            if prev in candidates and len(candidates) > 1:
                candidates.remove(prev)
            prev, state = state, rng.choice(candidates)
        return state

    @staticmethod
    def generate(config: SolverConfig) -> State:
        """Return a random solvable state for *config*."""
        rng = random.Random(config.seed)
        state = Scrambler.scramble(
            State.goal(config.size), config.scramble_depth, rng
        )
        logger.debug(
            "Scrambled %dx%d board with %d moves (seed=%s)",
            config.size,
            config.size,
            config.scramble_depth,
            config.seed,
        )
        return state


def is_solvable(state: State) -> bool:
    """Return True if *state* can reach the goal.

    Odd sizes need an even number of inversions. Even sizes need
    ``inversions + blank row counted from the bottom (1-based)`` to be odd.
    """
    flat = [v for v in state.tiles if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    if state.size % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = state.size - state.blank[0]
    return (inversions + blank_row_from_bottom) % 2 == 1
