"""State model tests."""

from __future__ import annotations

import pytest

from tilepuzzle.models.state import State


def test_goal_layout(goal4: State) -> None:
    assert goal4.tiles == (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0)
    assert goal4.blank == (3, 3)
    assert goal4.is_goal()
    assert goal4.rows[0] == [1, 2, 3, 4]
    assert goal4.rows[3] == [13, 14, 15, 0]


def test_goal_rejects_tiny_board() -> None:
    with pytest.raises(ValueError):
        State.goal(1)


def test_from_flat_derives_blank() -> None:
    state = State.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert state.blank == (2, 1)
    assert state.get_tile(2, 2) == 8
    assert not state.is_goal()


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
    ids=["short", "long", "duplicate", "no-blank"],
)
def test_from_flat_rejects_malformed(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        State.from_flat(3, flat)


def test_from_rows_matches_from_flat() -> None:
    rows = [[1, 2], [0, 3]]
    assert State.from_rows(rows) == State.from_flat(2, [1, 2, 0, 3])


def test_equality_is_by_value(goal4: State) -> None:
    assert State.from_flat(4, goal4.to_flat()) == goal4
    assert hash(State.from_flat(4, goal4.to_flat())) == hash(goal4)
    assert goal4.with_blank_at(3, 2) != goal4


def test_with_blank_at_returns_new_state(goal3: State) -> None:
    moved = goal3.with_blank_at(1, 2)
    assert moved.blank == (1, 2)
    assert moved.get_tile(1, 2) == 0
    assert moved.get_tile(2, 2) == 6
    # original untouched
    assert goal3.is_goal()


@pytest.mark.parametrize("target", [(0, 0), (2, 2), (1, 1)], ids=str)
def test_with_blank_at_rejects_non_adjacent(goal3: State, target: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        goal3.with_blank_at(*target)


def test_is_tile_correct() -> None:
    state = State.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert state.is_tile_correct(0, 0)
    assert not state.is_tile_correct(2, 2)
    assert not state.is_tile_correct(2, 1)


def test_str_renders_rows(goal3: State) -> None:
    assert str(goal3) == "1 2 3\n4 5 6\n7 8 0"
