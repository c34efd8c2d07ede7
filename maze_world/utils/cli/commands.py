"""Implementations of maze_world CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
import random

from ...analysis.analyzer import (
    DEFAULT_CONFIGS,
    AnalysisReport,
    run_analysis,
    write_results_csv,
    write_summary_csv,
)
from ...config import CONFIG, Config, config_path
from ...generation.maze_generator import generate_maze, generate_mazes
from ...persistence.maze_io import load_maze_folder, read_maze, write_maze
from ...persistence.replay import replay
from ...persistence.save_load import load_result, save_result, save_results
from ...search.result import SolveResult
from ...search.solver import MazeSolver
from ..profiling import profile_solves

logger = logging.getLogger(__name__)


HELP_TEXT = """Available commands:
  /solve <maze> [algorithm] [tiebreak] [radius] [out]  solve a maze file
  /generate <path> [size] [seed]                       write a random maze file
  /analyze [count] [size] [seed]                       compare algorithms on random mazes
  /analyze folder <dir> [count]                        compare algorithms on maze files
  /replay <result>                                     re-run a saved result
  /profile [runs]                                      profile forward A* on a random maze
  /help                                                show this text
  /quit                                                leave the command loop"""


def _int_arg(value: Optional[str], default: Optional[int], label: str) -> Optional[int]:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{label} must be an integer, got {value!r}") from None


def solve(
    maze_file: str | Path,
    algorithm: Optional[str] = None,
    tiebreaker: Optional[str] = None,
    radius: Optional[str] = None,
    out: Optional[str | Path] = None,
    config: Config = CONFIG,
) -> Optional[SolveResult]:
    try:
        maze = read_maze(maze_file)
        solver = MazeSolver.for_batch(
            maze,
            tiebreaker or config.solver.tiebreaker,
            _int_arg(radius, config.solver.sight_radius, "radius"),
            store_steps=out is not None or config.solver.store_steps,
        )
        result = solver.solve(algorithm or config.solver.algorithm)
    except (OSError, ValueError) as e:
        logger.error("Error solving %s: %s", maze_file, e)
        return None

    logger.info(
        "%s: %s (%d iterations, %d moves, %.1f ms)",
        result.display_name, result, result.iterations, result.moves, result.solution_time_ms,
    )
    if out is not None:
        try:
            save_result(result, out)
            logger.info("Result saved to %s", out)
        except OSError as e:
            logger.error("Error saving result: %s", e)
    return result


def generate(
    path: str | Path,
    size_str: Optional[str] = None,
    seed_str: Optional[str] = None,
    config: Config = CONFIG,
) -> Optional[Path]:
    try:
        size = _int_arg(size_str, config.analysis.maze_size, "size")
        seed = _int_arg(seed_str, None, "seed")
        maze = generate_maze(size, rng=random.Random(seed))
        write_maze(maze, path)
    except (OSError, ValueError) as e:
        logger.error("Error generating maze: %s", e)
        return None
    logger.info("Maze of size %d written to %s", size, path)
    return Path(path)


def analyze(
    count_str: Optional[str] = None,
    size_str: Optional[str] = None,
    seed_str: Optional[str] = None,
    folder: Optional[str | Path] = None,
    config: Config = CONFIG,
) -> Optional[AnalysisReport]:
    try:
        if folder is not None:
            count = _int_arg(count_str, None, "count")
            mazes = load_maze_folder(folder, count)
        else:
            count = _int_arg(count_str, config.analysis.maze_count, "count")
            size = _int_arg(size_str, config.analysis.maze_size, "size")
            seed = _int_arg(seed_str, config.analysis.seed, "seed")
            mazes = generate_mazes(size, count, seed)
        if not mazes:
            logger.error("No mazes to analyse.")
            return None
        report = run_analysis(mazes, DEFAULT_CONFIGS, workers=config.analysis.workers)
    except (OSError, ValueError) as e:
        logger.error("Error during analysis: %s", e)
        return None

    for summary in report.summaries().values():
        logger.info(
            "%-16s solved %3d/%-3d expanded avg %10.1f (min %d, max %d, sd %.1f) time avg %.1f ms",
            summary.name,
            summary.solved,
            summary.runs,
            summary.expanded_mean,
            summary.expanded_min,
            summary.expanded_max,
            summary.expanded_stdev,
            summary.time_mean_ms,
        )

    results_dir = config_path(config, "results_dir", "results")
    try:
        write_summary_csv(report, results_dir / "summary.csv")
        write_results_csv(report, results_dir / "results.csv")
        save_results(report.results, results_dir / "results.json.gz")
        logger.info("Analysis written to %s", results_dir)
    except OSError as e:
        logger.error("Error writing analysis output: %s", e)
    return report


def replay_result(path: str | Path) -> Optional[bool]:
    try:
        result = load_result(path)
        replayed, same = replay(result)
    except (OSError, ValueError) as e:
        logger.error("Error replaying %s: %s", path, e)
        return None
    if same:
        logger.info("Replay of %s reproduced %d expansions.", path, replayed.expanded_cells)
    else:
        logger.warning(
            "Replay of %s diverged: stored %d expansions, replayed %d.",
            path, result.expanded_cells, replayed.expanded_cells,
        )
    return same


def profile(runs_str: Optional[str] = None, config: Config = CONFIG) -> None:
    try:
        runs = _int_arg(runs_str, 5, "runs")
    except ValueError as e:
        logger.error("%s", e)
        return
    maze = generate_mazes(config.analysis.maze_size, 1, config.analysis.seed)[0]
    out_path = config_path(config, "profile_output", "profile.prof")

    def run_once() -> None:
        MazeSolver.for_batch(maze, config.solver.tiebreaker, config.solver.sight_radius).solve(
            config.solver.algorithm
        )

    _, durations = profile_solves(runs, run_once, out_path)
    avg = sum(durations) / len(durations) if durations else 0.0
    logger.info("Profiled %d solves (avg %.1f ms), stats written to %s", runs, avg * 1000, out_path)


def help_command(state: Dict[str, Any]) -> None:
    logger.info(HELP_TEXT)


def execute(
    command: str, args: List[str], state: Dict[str, Any], config: Optional[Config] = None
) -> Any:
    config = config or CONFIG
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "solve" and args:
        return_value = solve(
            args[0],
            args[1] if len(args) > 1 else None,
            args[2] if len(args) > 2 else None,
            args[3] if len(args) > 3 else None,
            args[4] if len(args) > 4 else None,
            config=config,
        )
    elif cmd_lower == "generate" and args:
        return_value = generate(
            args[0],
            args[1] if len(args) > 1 else None,
            args[2] if len(args) > 2 else None,
            config=config,
        )
    elif cmd_lower == "analyze" and args and args[0].lower() == "folder":
        if len(args) < 2:
            logger.error("Usage: /analyze folder <dir> [count]")
        else:
            return_value = analyze(
                args[2] if len(args) > 2 else None, folder=args[1], config=config
            )
    elif cmd_lower == "analyze":
        return_value = analyze(
            args[0] if args else None,
            args[1] if len(args) > 1 else None,
            args[2] if len(args) > 2 else None,
            config=config,
        )
    elif cmd_lower == "replay" and args:
        return_value = replay_result(args[0])
    elif cmd_lower == "profile":
        profile(args[0] if args else None, config=config)
    elif cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received.")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "HELP_TEXT", "solve", "generate", "analyze", "replay_result", "profile",
    "help_command", "execute",
]
