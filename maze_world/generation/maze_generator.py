"""Random maze generation by depth-first fill.

Cells are visited in a random order. Each unvisited cell seeds a depth-first
fill: the seed is always left open, and every cell the fill reaches is
blocked with ``block_probability`` (a blocked cell does not extend the fill).
Start and target are never blocked. There is no connectivity guarantee.
"""

from __future__ import annotations

import random
from typing import List, Optional

from ..core.cells import CellState
from ..core.coordinates import RowCol, to_row_col
from ..core.grid import Grid, in_bounds, neighbors


DEFAULT_BLOCK_PROBABILITY = 0.3


def _unvisited_neighbors(row: int, col: int, visited: List[List[bool]], size: int) -> List[RowCol]:
    return [(r, c) for r, c in neighbors(row, col, size) if not visited[r][c]]


def _fill(
    maze: Grid,
    visited: List[List[bool]],
    origin: RowCol,
    rng: random.Random,
    block_probability: float,
) -> None:
    size = len(maze)
    row, col = origin
    visited[row][col] = True
    stack = [iter(_unvisited_neighbors(row, col, visited, size))]
    while stack:
        for r, c in stack[-1]:
            if visited[r][c]:
                continue
            visited[r][c] = True
            if rng.random() < block_probability:
                maze[r][c] = CellState.BLOCKED
                continue
            stack.append(iter(_unvisited_neighbors(r, c, visited, size)))
            break
        else:
            stack.pop()


def generate_maze(
    size: int,
    start: RowCol = (0, 0),
    target: Optional[RowCol] = None,
    *,
    rng: Optional[random.Random] = None,
    block_probability: float = DEFAULT_BLOCK_PROBABILITY,
) -> Grid:
    """Return a ``size`` x ``size`` grid of 0/1 with ``start`` and ``target`` open."""

    if size <= 0:
        raise ValueError(f"Maze size must be positive, got {size}")
    if target is None:
        target = (size - 1, size - 1)
    for label, (row, col) in (("start", start), ("target", target)):
        if not in_bounds(row, col, size):
            raise ValueError(f"{label} {(row, col)} is outside a {size}x{size} maze")
    rng = rng or random.Random()

    maze: Grid = [[int(CellState.UNBLOCKED)] * size for _ in range(size)]
    visited = [[False] * size for _ in range(size)]
    visited[start[0]][start[1]] = True
    visited[target[0]][target[1]] = True

    order = list(range(size * size))
    rng.shuffle(order)
    for index in order:
        row, col = to_row_col(index, size)
        if visited[row][col]:
            continue
        _fill(maze, visited, (row, col), rng, block_probability)

    maze[start[0]][start[1]] = CellState.UNBLOCKED
    maze[target[0]][target[1]] = CellState.UNBLOCKED
    return [[int(v) for v in row] for row in maze]


def generate_mazes(size: int, count: int, seed: Optional[int] = None) -> List[Grid]:
    """Return ``count`` corner-to-corner mazes drawn from one seeded generator."""

    rng = random.Random(seed)
    return [generate_maze(size, rng=rng) for _ in range(count)]


__all__ = ["DEFAULT_BLOCK_PROBABILITY", "generate_maze", "generate_mazes"]
