"""Shared fixtures for the solver test suite."""

from __future__ import annotations

import random
from collections import deque
from typing import Callable

import pytest

from tilepuzzle.engine.moves import successors
from tilepuzzle.engine.scrambler import Scrambler
from tilepuzzle.models.state import State


def _bfs_distance(state: State, limit: int = 8) -> int | None:
    """Exact number of moves from *state* to the goal, by brute force."""
    if state.is_goal():
        return 0
    seen = {state}
    frontier = deque([(state, 0)])
    while frontier:
        s, d = frontier.popleft()
        if d >= limit:
            continue
        for nxt in successors(s):
            if nxt in seen:
                continue
            if nxt.is_goal():
                return d + 1
            seen.add(nxt)
            frontier.append((nxt, d + 1))
    return None


def _scrambled(size: int, depth: int, seed: int) -> State:
    return Scrambler.scramble(State.goal(size), depth, random.Random(seed))


@pytest.fixture
def goal4() -> State:
    return State.goal(4)


@pytest.fixture
def goal3() -> State:
    return State.goal(3)


@pytest.fixture
def shortest_distance() -> Callable[..., int | None]:
    return _bfs_distance


@pytest.fixture
def scrambled() -> Callable[[int, int, int], State]:
    return _scrambled
