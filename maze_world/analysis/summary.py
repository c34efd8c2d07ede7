"""Summary statistics over batches of solve results."""

from __future__ import annotations

import statistics
from dataclasses import dataclass
from typing import Sequence

from ..search.result import SolveResult


@dataclass(frozen=True)
class AlgorithmSummary:
    """Aggregate figures for one configuration across many mazes."""

    name: str
    runs: int
    solved: int
    expanded_min: int
    expanded_max: int
    expanded_mean: float
    expanded_total: int
    expanded_stdev: float
    time_min_ms: float
    time_max_ms: float
    time_mean_ms: float

    @property
    def solve_rate(self) -> float:
        """Fraction of runs that reached the target, 0.0 for no runs."""

        return self.solved / self.runs if self.runs else 0.0


def summarize(name: str, results: Sequence[SolveResult]) -> AlgorithmSummary:
    """Return an :class:`AlgorithmSummary` for ``results``.

    The standard deviation is the population deviation of expanded cells.
    """

    if not results:
        return AlgorithmSummary(name, 0, 0, 0, 0, 0.0, 0, 0.0, 0.0, 0.0, 0.0)

    expanded = [r.expanded_cells for r in results]
    times = [r.solution_time_ms for r in results]
    return AlgorithmSummary(
        name=name,
        runs=len(results),
        solved=sum(1 for r in results if r.solved),
        expanded_min=min(expanded),
        expanded_max=max(expanded),
        expanded_mean=statistics.fmean(expanded),
        expanded_total=sum(expanded),
        expanded_stdev=statistics.pstdev(expanded),
        time_min_ms=min(times),
        time_max_ms=max(times),
        time_mean_ms=statistics.fmean(times),
    )


__all__ = ["AlgorithmSummary", "summarize"]
