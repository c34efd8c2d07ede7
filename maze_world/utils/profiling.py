"""cProfile helpers for measuring solver performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Any, Callable, List
import time


def profile_solves(
    n: int,
    solve_callback: Callable[[], Any],
    out_path: str | Path = "profile.prof",
) -> tuple[pstats.Stats, List[float]]:
    """Profile ``solve_callback`` for ``n`` runs and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of runs to profile.
    solve_callback:
        Function performing one complete solve.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    tuple[pstats.Stats, list[float]]
        Profiling statistics and the wall-clock duration of each run in
        seconds.
    """

    path = Path(out_path)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    durations: List[float] = []
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        started = time.perf_counter()
        solve_callback()
        durations.append(time.perf_counter() - started)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler), durations


__all__ = ["profile_solves"]
