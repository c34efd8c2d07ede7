"""Replay stored results and verify solver determinism."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from ..core.coordinates import to_index
from ..core.grid import FrozenGrid
from ..search.result import SolveResult
from ..search.solver import Algorithm, MazeSolver


# Builds a solver for a stored result; receives the result and the snapshot flag.
SolverFactory = Callable[[SolveResult, bool], MazeSolver]


def iter_snapshots(result: SolveResult) -> Iterator[FrozenGrid]:
    """Yield the belief snapshots captured for ``result`` in order."""

    yield from result.solution_steps


def solver_for(result: SolveResult, store_steps: bool = False) -> MazeSolver:
    """Return a fresh solver configured exactly as the one behind ``result``."""

    size = result.maze_size
    start = to_index(*result.start_position, size)
    target = to_index(*result.target_position, size)
    return MazeSolver(
        result.original_maze,
        start,
        target,
        tiebreaker=result.tiebreaker,
        sight_radius=result.sight_radius,
        store_steps=store_steps,
    )


def same_outcome(a: SolveResult, b: SolveResult) -> bool:
    """Return ``True`` if ``a`` and ``b`` describe the same search, ignoring timing."""

    return (
        a.solved == b.solved
        and a.expanded_cells == b.expanded_cells
        and a.iterations == b.iterations
        and a.moves == b.moves
        and a.solution_steps == b.solution_steps
    )


def replay(
    result: SolveResult,
    solver_factory: Optional[SolverFactory] = None,
) -> tuple[SolveResult, bool]:
    """Re-run the search recorded in ``result`` and check it is reproduced.

    Parameters
    ----------
    result:
        A stored result. Snapshots are compared only if it captured any.
    solver_factory:
        Optional callable building the solver; defaults to :func:`solver_for`.

    Returns
    -------
    tuple[SolveResult, bool]
        The new result and ``True`` if it matches ``result`` exactly apart
        from the elapsed time.
    """

    factory = solver_factory or solver_for
    solver = factory(result, bool(result.solution_steps))
    replayed = solver.solve(Algorithm.parse(result.algorithm_name))
    return replayed, same_outcome(result, replayed)


__all__ = ["SolverFactory", "iter_snapshots", "replay", "same_outcome", "solver_for"]
