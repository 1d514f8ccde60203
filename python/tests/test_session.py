"""Solve session and configuration tests."""

from __future__ import annotations

import pytest

from tilepuzzle.config import SolverConfig
from tilepuzzle.models.state import Direction, State
from tilepuzzle.engine.session import SolveSession


@pytest.mark.parametrize(
    "kwargs",
    [{"size": 1}, {"scramble_depth": -1}, {"max_depth": -1}],
    ids=["size", "scramble_depth", "max_depth"],
)
def test_config_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)


def test_session_uses_given_board(goal3: State) -> None:
    start = goal3.with_blank_at(2, 1)
    session = SolveSession(SolverConfig(size=3), start)
    assert session.initial == start
    assert session.run() == [start, goal3]
    assert session.solved
    assert session.cost == 1
    assert session.directions == [Direction.RIGHT]
    assert session.elapsed >= 0.0
    assert session.stats.iterations == 1


def test_session_scrambles_from_config() -> None:
    config = SolverConfig(size=3, scramble_depth=10, seed=3)
    first = SolveSession(config)
    second = SolveSession(config)
    assert first.initial == second.initial
    path = first.run()
    assert path[0] == first.initial
    assert path[-1].is_goal()
    assert first.cost == len(path) - 1


def test_session_rejects_size_mismatch(goal3: State) -> None:
    with pytest.raises(ValueError):
        SolveSession(SolverConfig(size=4), goal3)


def test_session_without_solution() -> None:
    state = State.from_flat(3, [1, 2, 3, 4, 5, 6, 8, 7, 0])
    session = SolveSession(SolverConfig(size=3, max_depth=4), state)
    assert session.run() == []
    assert not session.solved
    assert session.cost is None
    assert session.directions == []


def test_unsolvable_board_with_default_config() -> None:
    state = State.from_flat(3, [1, 2, 3, 4, 5, 6, 8, 7, 0])
    session = SolveSession(SolverConfig(size=3), state)
    assert session.config.max_depth is None
    assert session.run() == []
    assert not session.solved
    assert session.stats.iterations == 0
