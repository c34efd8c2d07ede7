"""Immutable record of a finished solve."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.grid import FrozenGrid, freeze_grid


@dataclass(frozen=True)
class SolveResult:
    """Outcome of one ``MazeSolver`` solve call.

    Grids are stored as tuples of tuples so a result can be shared, hashed
    into sets of snapshots, or persisted without later mutation leaking in.
    ``solution_steps`` is empty unless snapshot capture was requested.
    """

    solved: bool
    expanded_cells: int
    algorithm_name: str
    tiebreaker: str
    sight_radius: int
    maze_size: int
    original_maze: FrozenGrid
    start_position: Tuple[int, int]
    target_position: Tuple[int, int]
    solution_steps: Tuple[FrozenGrid, ...] = ()
    solution_time_ms: float = 0.0
    iterations: int = 0
    moves: int = 0

    def __post_init__(self) -> None:
        # Deserialised data arrives as nested lists.
        object.__setattr__(self, "original_maze", freeze_grid(self.original_maze))
        object.__setattr__(self, "start_position", tuple(self.start_position))
        object.__setattr__(self, "target_position", tuple(self.target_position))
        steps = self.solution_steps or ()
        object.__setattr__(self, "solution_steps", tuple(freeze_grid(s) for s in steps))

    @property
    def display_name(self) -> str:
        status = "Solved" if self.solved else "Unsolved"
        return f"{self.algorithm_name} (t:{self.tiebreaker}, r:{self.sight_radius}) - {status}"

    @property
    def final_snapshot(self) -> Optional[FrozenGrid]:
        return self.solution_steps[-1] if self.solution_steps else None

    def __str__(self) -> str:
        outcome = "was solved" if self.solved else "was found to be unsolvable"
        return (
            f"Maze {outcome} with {self.expanded_cells} expansions"
            f" using {self.algorithm_name}"
        )


__all__ = ["SolveResult"]
