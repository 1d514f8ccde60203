"""State model for the sliding-tile puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Direction the *blank* travels in a single move.

    ``UP`` decreases the blank's row, ``DOWN`` increases it, ``LEFT`` and
    ``RIGHT`` do the same for the column.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class State:
    """One board configuration plus the cached blank coordinates.

    Tiles are stored as a flat row-major tuple. 0 represents the blank, and
    ``blank`` is its ``(row, col)``; the two always agree because every
    successor is built in a single constructor call.
    """

    size: int
    tiles: tuple[int, ...]
    blank: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def goal(cls, size: int) -> State:
        """Return the goal state (all tiles in order, blank bottom-right)."""
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        tiles = tuple(range(1, size * size)) + (0,)
        return cls(size=size, tiles=tiles, blank=(size - 1, size - 1))

    @classmethod
    def from_flat(cls, size: int, flat: list[int] | tuple[int, ...]) -> State:
        """Create a state from a flat row-major tile list.

        Example::

            State.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles = tuple(flat)
        pos = tiles.index(0)
        return cls(size=size, tiles=tiles, blank=divmod(pos, size))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> State:
        return cls.from_flat(len(rows), [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def to_flat(self) -> list[int]:
        return list(self.tiles)

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        return self.tiles[last] == 0 and all(
            v == i + 1 for i, v in enumerate(self.tiles[:last])
        )

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- moves ----------------------------------------------------------------

    def with_blank_at(self, row: int, col: int) -> State:
        """Return a new state with the blank swapped into ``(row, col)``.

        The target must be orthogonally adjacent to the current blank.
        """
        br, bc = self.blank
        if abs(row - br) + abs(col - bc) != 1:
            raise ValueError(
                f"Cell ({row}, {col}) is not adjacent to the blank at "
                f"({br}, {bc})."
            )
        n = self.size
        src = br * n + bc
        dst = row * n + col
        tiles = list(self.tiles)
        tiles[src], tiles[dst] = tiles[dst], tiles[src]
        return State(size=n, tiles=tuple(tiles), blank=(row, col))

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" for v in row) for row in self.rows
        )
