"""Successor generation and move naming."""

from __future__ import annotations

from tilepuzzle.models.state import Direction, State

# Fixed expansion order: decrease row, increase row, decrease col, increase col.
_OFFSETS: tuple[tuple[Direction, int, int], ...] = (
    (Direction.UP, -1, 0),
    (Direction.DOWN, 1, 0),
    (Direction.LEFT, 0, -1),
    (Direction.RIGHT, 0, 1),
)


def moves(state: State) -> list[tuple[Direction, State]]:
    """Return every legal blank move from *state* with the resulting state."""
    br, bc = state.blank
    n = state.size
    out: list[tuple[Direction, State]] = []
    for direction, dr, dc in _OFFSETS:
        nr, nc = br + dr, bc + dc
        if 0 <= nr < n and 0 <= nc < n:
            out.append((direction, state.with_blank_at(nr, nc)))
    return out


def successors(state: State) -> list[State]:
    """Return the states reachable from *state* in exactly one move."""
    return [s for _, s in moves(state)]


def direction_between(a: State, b: State) -> Direction | None:
    """Return the blank move that turns *a* into *b*, or ``None``."""
    for direction, s in moves(a):
        if s == b:
            return direction
    return None


def path_directions(path: list[State]) -> list[Direction]:
    """Name the blank moves along *path*.

    Raises ``ValueError`` if two consecutive states are not one move apart.
    """
    directions: list[Direction] = []
    for i, (a, b) in enumerate(zip(path, path[1:])):
        direction = direction_between(a, b)
        if direction is None:
            raise ValueError(f"States {i} and {i + 1} are not one move apart.")
        directions.append(direction)
    return directions
