"""Run-time configuration shared by the engine and the frontends."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Puzzle dimension, scramble settings and the optional search ceiling.

    ``max_depth`` caps the IDA* bound; ``None`` searches without a ceiling.
    ``seed`` feeds the scrambler's ``random.Random``; ``None`` draws from
    the OS.
    """

    size: int = 4
    scramble_depth: int = 40
    max_depth: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        if self.scramble_depth < 0:
            raise ValueError(
                f"Scramble depth must be non-negative, got {self.scramble_depth}."
            )
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(
                f"Max depth must be non-negative, got {self.max_depth}."
            )
