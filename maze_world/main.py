# maze_world/main.py
"""Command line entry point: run one command or a read-eval loop."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from dotenv import load_dotenv

from .config import CONFIG, Config, load_config
from .utils.cli.command_parser import parse_argv, parse_command
from .utils.cli.commands import execute


logger = logging.getLogger(__name__)


def configure_logging(config: Config) -> None:
    """Apply the global and per-module log levels from ``config``."""

    numeric_level = getattr(logging, config.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: Optional[str | Path] = None) -> Config:
    """Load ``.env`` and the configuration, then configure logging."""

    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv("MAZE_WORLD_CONFIG")
    cfg = load_config(Path(config_path)) if config_path else CONFIG
    configure_logging(cfg)
    return cfg


def run_loop(config: Config, stream: TextIO = sys.stdin) -> None:
    """Read ``/command`` lines from ``stream`` until ``/quit`` or EOF."""

    state: Dict[str, Any] = {"running": True}
    logger.info("Type commands prefixed with '/' (try /help).")
    while state["running"]:
        line = stream.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        cmd = parse_command(line)
        if cmd is None:
            logger.error("Commands must start with '/': %s", line)
            continue
        execute(cmd.name, cmd.args, state, config)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    cfg = bootstrap()

    cmd = parse_argv(argv)
    if cmd is None:
        run_loop(cfg)
        return 0

    result = execute(cmd.name, cmd.args, {"running": True}, cfg)
    if cmd.name in ("solve", "generate", "analyze", "replay") and not result:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
