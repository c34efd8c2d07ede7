"""Read and write mazes in the one-value-per-line text format.

A maze file holds ``N * N`` lines, each containing ``0`` (unblocked) or
``1`` (blocked), in row-major order.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.grid import Grid


MAZE_FILE_EXTENSION = ".txt"


def maze_path(folder: str | Path, index: int) -> Path:
    """Return the path of maze ``index`` inside ``folder`` (``00.txt``, ...)."""

    return Path(folder) / f"{index:02d}{MAZE_FILE_EXTENSION}"


def read_maze(path: str | Path, size: Optional[int] = None) -> Grid:
    """Return the maze stored at ``path``.

    ``size`` is inferred from the number of values when omitted. Blank lines
    are ignored.
    """

    path = Path(path)
    values: List[int] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, 1):
            line = line.strip()
            if not line:
                continue
            try:
                value = int(line)
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: expected 0 or 1, got {line!r}") from exc
            if value not in (0, 1):
                raise ValueError(f"{path}:{lineno}: expected 0 or 1, got {value}")
            values.append(value)

    if size is None:
        size = math.isqrt(len(values))
    if size <= 0 or size * size != len(values):
        raise ValueError(
            f"{path}: {len(values)} values do not form a square maze"
            + (f" of size {size}" if size > 0 else "")
        )
    return [values[row * size:(row + 1) * size] for row in range(size)]


def write_maze(grid: Sequence[Sequence[int]], path: str | Path) -> None:
    """Write ``grid`` to ``path``, creating parent directories as needed."""

    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as fh:
        for row in grid:
            for value in row:
                fh.write(f"{int(value)}\n")


def load_maze_folder(folder: str | Path, count: Optional[int] = None) -> List[Grid]:
    """Load ``00.txt``, ``01.txt``, ... from ``folder``.

    With ``count`` given, exactly that many files are read and a missing file
    raises :class:`FileNotFoundError`. Otherwise loading stops at the first
    missing index.
    """

    mazes: List[Grid] = []
    index = 0
    while count is None or index < count:
        path = maze_path(folder, index)
        if count is None and not path.exists():
            break
        mazes.append(read_maze(path))
        index += 1
    return mazes


__all__ = ["MAZE_FILE_EXTENSION", "load_maze_folder", "maze_path", "read_maze", "write_maze"]
