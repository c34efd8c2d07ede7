"""Simple configuration loader for maze_world."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SolverConfig:
    """Defaults used when a solve request does not name its own settings."""

    algorithm: str = "Forward"
    tiebreaker: str = "g"
    sight_radius: int = 1
    store_steps: bool = False


@dataclass
class AnalysisConfig:
    """Configuration for batch comparisons across many mazes."""

    maze_size: int = 101
    maze_count: int = 50
    maze_folder: str = "mazes"
    workers: int = 1
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    solver: SolverConfig
    analysis: AnalysisConfig
    logging: LoggingConfig
    paths: Optional[Dict[str, str]] = None


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    solver_data = data.get("solver") or {}
    solver = SolverConfig(
        algorithm=str(solver_data.get("algorithm", "Forward")),
        tiebreaker=str(solver_data.get("tiebreaker", "g")),
        sight_radius=int(solver_data.get("sight_radius", 1)),
        store_steps=bool(solver_data.get("store_steps", False)),
    )

    analysis_data = data.get("analysis") or {}
    seed = analysis_data.get("seed")
    analysis = AnalysisConfig(
        maze_size=int(analysis_data.get("maze_size", 101)),
        maze_count=int(analysis_data.get("maze_count", 50)),
        maze_folder=str(analysis_data.get("maze_folder", "mazes")),
        workers=int(analysis_data.get("workers", 1)),
        seed=int(seed) if seed is not None else None,
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    paths = data.get("paths")

    return Config(solver=solver, analysis=analysis, logging=logging_cfg, paths=paths)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


def config_path(config: Config, key: str, default: str) -> Path:
    """Return the ``paths`` entry ``key`` of ``config`` or ``default``."""

    paths = config.paths or {}
    return Path(paths.get(key, default))


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SolverConfig",
    "AnalysisConfig",
    "LoggingConfig",
    "config_path",
    "load_config",
]
