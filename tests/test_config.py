from pathlib import Path

from maze_world.config import (
    CONFIG,
    AnalysisConfig,
    LoggingConfig,
    SolverConfig,
    config_path,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.solver, SolverConfig)
    assert isinstance(CONFIG.analysis, AnalysisConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert CONFIG.solver.tiebreaker == "g"
    assert CONFIG.solver.sight_radius == 1
    assert CONFIG.analysis.maze_size == 101
    assert CONFIG.analysis.maze_count == 50


def test_load_config_from_file(tmp_path: Path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "solver:\n"
        "  algorithm: Adaptive\n"
        "  sight_radius: 3\n"
        "analysis:\n"
        "  seed: 9\n"
        "  workers: 4\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    maze_world.analysis: ERROR\n"
    )
    cfg = load_config(path)
    assert cfg.solver.algorithm == "Adaptive"
    assert cfg.solver.sight_radius == 3
    assert cfg.solver.tiebreaker == "g"
    assert cfg.analysis.seed == 9
    assert cfg.analysis.workers == 4
    assert cfg.analysis.maze_size == 101
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"maze_world.analysis": "ERROR"}


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.solver == SolverConfig()
    assert cfg.analysis.seed is None
    assert cfg.paths is None


def test_config_path(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert config_path(cfg, "results_dir", "results") == Path("results")
    cfg.paths = {"results_dir": "out"}
    assert config_path(cfg, "results_dir", "results") == Path("out")
