"""Run solver configurations over a batch of mazes and collect statistics."""

from __future__ import annotations

import csv
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.cells import VISITED_STATES
from ..core.grid import Grid
from ..search.result import SolveResult
from ..search.solver import Algorithm, MazeSolver
from .summary import AlgorithmSummary, summarize


logger = logging.getLogger(__name__)

# Called after each finished task with (completed, total).
ProgressCallback = Callable[[int, int], None]


@dataclass
class AlgorithmConfig:
    """A named solver configuration to compare against others."""

    name: str
    algorithm: str = "Forward"
    tiebreaker: str = "g"
    sight_radius: int = 1

    def __str__(self) -> str:
        abbrev = Algorithm.parse(self.algorithm).name[0].lower()
        return f"{self.name} (a:{abbrev}, t:{self.tiebreaker}, r:{self.sight_radius})"


# The g rule (larger g) and the h rule (smaller h) order equal-f nodes the same
# way, so the two Forward rows report identical counts.
DEFAULT_CONFIGS: Tuple[AlgorithmConfig, ...] = (
    AlgorithmConfig("Forward A* (g)", "Forward", "g", 1),
    AlgorithmConfig("Forward A* (h)", "Forward", "h", 1),
    AlgorithmConfig("Backward A* (g)", "Backward", "g", 1),
    AlgorithmConfig("Adaptive A* (g)", "Adaptive", "g", 1),
)


@dataclass
class AnalysisReport:
    """Results per configuration name plus exploration heatmap counts.

    ``exploration_counts[name][row][col]`` is the number of mazes in which
    that cell ended up explored (or was the start or target) under ``name``.
    """

    results: Dict[str, List[SolveResult]] = field(default_factory=dict)
    exploration_counts: Dict[str, List[List[int]]] = field(default_factory=dict)

    def summaries(self) -> Dict[str, AlgorithmSummary]:
        return {name: summarize(name, items) for name, items in self.results.items()}


def run_single(maze: Grid, config: AlgorithmConfig) -> Tuple[SolveResult, List[List[int]]]:
    """Solve ``maze`` corner to corner with ``config``.

    Returns the result and a 0/1 mask of the cells visited in the final
    belief grid.
    """

    solver = MazeSolver.for_batch(maze, config.tiebreaker, config.sight_radius)
    result = solver.solve(config.algorithm)
    mask = [[1 if cell in VISITED_STATES else 0 for cell in row] for row in solver.belief]
    return result, mask


def _run_task(task: Tuple[Grid, AlgorithmConfig]) -> Tuple[SolveResult, List[List[int]]]:
    maze, config = task
    return run_single(maze, config)


def run_analysis(
    mazes: Sequence[Grid],
    configs: Iterable[AlgorithmConfig] = DEFAULT_CONFIGS,
    *,
    workers: int = 1,
    progress: Optional[ProgressCallback] = None,
) -> AnalysisReport:
    """Solve every maze with every configuration.

    Parameters
    ----------
    mazes:
        Ground-truth grids, all of the same size.
    configs:
        Configurations to compare. Names must be unique.
    workers:
        Number of worker processes. ``1`` runs everything in this process.
    progress:
        Optional callback invoked after each solve.

    Returns
    -------
    AnalysisReport
        Results in maze order for every configuration name.
    """

    configs = list(configs)
    names = [c.name for c in configs]
    if len(set(names)) != len(names):
        raise ValueError(f"Configuration names must be unique: {names}")
    sizes = {len(m) for m in mazes}
    if len(sizes) > 1:
        raise ValueError(f"All mazes must share one size, got {sorted(sizes)}")
    size = sizes.pop() if sizes else 0

    report = AnalysisReport(
        results={c.name: [] for c in configs},
        exploration_counts={c.name: [[0] * size for _ in range(size)] for c in configs},
    )
    tasks = [(maze, config) for config in configs for maze in mazes]
    total = len(tasks)
    logger.info(
        "Analysing %d mazes of size %d with %d configurations (%d workers)",
        len(mazes), size, len(configs), workers,
    )

    if workers > 1:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            outcomes = pool.map(_run_task, tasks)
            _collect(report, tasks, outcomes, progress, total)
    else:
        _collect(report, tasks, map(_run_task, tasks), progress, total)

    for name, items in report.results.items():
        solved = sum(1 for r in items if r.solved)
        logger.info("%s: solved %d/%d", name, solved, len(items))
    return report


def _collect(
    report: AnalysisReport,
    tasks: Sequence[Tuple[Grid, AlgorithmConfig]],
    outcomes: Iterable[Tuple[SolveResult, List[List[int]]]],
    progress: Optional[ProgressCallback],
    total: int,
) -> None:
    for done, ((_, config), (result, mask)) in enumerate(zip(tasks, outcomes), 1):
        report.results[config.name].append(result)
        counts = report.exploration_counts[config.name]
        for row_counts, row_mask in zip(counts, mask):
            for c, visited in enumerate(row_mask):
                row_counts[c] += visited
        if progress is not None:
            progress(done, total)


SUMMARY_FIELDS = [
    "name",
    "runs",
    "solved",
    "solve_rate",
    "expanded_min",
    "expanded_max",
    "expanded_mean",
    "expanded_total",
    "expanded_stdev",
    "time_min_ms",
    "time_max_ms",
    "time_mean_ms",
]

RESULT_FIELDS = [
    "config",
    "maze",
    "algorithm",
    "tiebreaker",
    "sight_radius",
    "solved",
    "expanded_cells",
    "iterations",
    "moves",
    "solution_time_ms",
]


def write_summary_csv(report: AnalysisReport, path: str | Path) -> Path:
    """Write one row of summary statistics per configuration to ``path``."""

    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        for summary in report.summaries().values():
            writer.writerow({name: getattr(summary, name) for name in SUMMARY_FIELDS})
    return p


def write_results_csv(report: AnalysisReport, path: str | Path) -> Path:
    """Write one row per individual solve to ``path``."""

    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for name, items in report.results.items():
            for index, result in enumerate(items):
                writer.writerow({
                    "config": name,
                    "maze": index,
                    "algorithm": result.algorithm_name,
                    "tiebreaker": result.tiebreaker,
                    "sight_radius": result.sight_radius,
                    "solved": result.solved,
                    "expanded_cells": result.expanded_cells,
                    "iterations": result.iterations,
                    "moves": result.moves,
                    "solution_time_ms": f"{result.solution_time_ms:.3f}",
                })
    return p


__all__ = [
    "AlgorithmConfig",
    "AnalysisReport",
    "DEFAULT_CONFIGS",
    "ProgressCallback",
    "RESULT_FIELDS",
    "SUMMARY_FIELDS",
    "run_analysis",
    "run_single",
    "write_results_csv",
    "write_summary_csv",
]
