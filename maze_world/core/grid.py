"""Ground-truth and belief grid helpers."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .cells import CellState
from .coordinates import RowCol


Grid = List[List[int]]
FrozenGrid = Tuple[Tuple[int, ...], ...]

# Row/column offsets of the four cardinal neighbours, in expansion order.
NEIGHBOR_OFFSETS: Tuple[RowCol, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def validate_grid(grid: Sequence[Sequence[int]]) -> int:
    """Return the side length of ``grid`` after checking it is a 0/1 square."""

    size = len(grid)
    if size == 0:
        raise ValueError("Maze must have at least one row")
    for r, row in enumerate(grid):
        if len(row) != size:
            raise ValueError(
                f"Maze must be square: row {r} has {len(row)} cells, expected {size}"
            )
        for c, value in enumerate(row):
            if value not in (CellState.UNBLOCKED, CellState.BLOCKED):
                raise ValueError(f"Invalid maze value {value!r} at ({r}, {c})")
    return size


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    """Return a deep copy of ``grid`` as lists of plain ints."""

    return [[int(v) for v in row] for row in grid]


def freeze_grid(grid: Sequence[Sequence[int]]) -> FrozenGrid:
    """Return an immutable deep copy of ``grid``."""

    return tuple(tuple(int(v) for v in row) for row in grid)


def in_bounds(row: int, col: int, size: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def neighbors(row: int, col: int, size: int) -> Iterator[RowCol]:
    """Yield the in-bounds 4-connected neighbours of ``(row, col)``."""

    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < size and 0 <= nc < size:
            yield nr, nc


def new_belief_grid(size: int, start: RowCol, target: RowCol) -> Grid:
    """Return an all-unknown belief grid with start and target marked."""

    belief = [[CellState.UNKNOWN] * size for _ in range(size)]
    belief[start[0]][start[1]] = CellState.START
    belief[target[0]][target[1]] = CellState.TARGET
    return belief


def discover(belief: Grid, truth: Sequence[Sequence[int]], row: int, col: int, radius: int) -> bool:
    """Reveal ground truth within Manhattan ``radius`` of ``(row, col)``.

    Unknown cells take their ground-truth value. Cells marked as planned but
    unknown are resolved: blocked ones become ``BLOCKED`` and the rest become
    ``ON_PATH_UNBLOCKED``. Returns ``False`` if any planned cell turned out to
    be blocked.
    """

    size = len(belief)
    path_valid = True
    for r in range(max(0, row - radius), min(size, row + radius + 1)):
        span = radius - abs(r - row)
        for c in range(max(0, col - span), min(size, col + span + 1)):
            cell = belief[r][c]
            if cell == CellState.UNKNOWN:
                belief[r][c] = truth[r][c]
            elif cell == CellState.ON_PATH_UNKNOWN:
                if truth[r][c] == CellState.BLOCKED:
                    belief[r][c] = CellState.BLOCKED
                    path_valid = False
                else:
                    belief[r][c] = CellState.ON_PATH_UNBLOCKED
    return path_valid


def clear_path_markers(belief: Grid, start: RowCol, target: RowCol) -> None:
    """Drop planned-path annotations and restore the start/target markers."""

    for row in belief:
        for c, cell in enumerate(row):
            if cell == CellState.ON_PATH_UNKNOWN:
                row[c] = CellState.UNKNOWN
            elif cell == CellState.ON_PATH_UNBLOCKED:
                row[c] = CellState.UNBLOCKED
    belief[start[0]][start[1]] = CellState.START
    belief[target[0]][target[1]] = CellState.TARGET


__all__ = [
    "FrozenGrid",
    "Grid",
    "NEIGHBOR_OFFSETS",
    "clear_path_markers",
    "copy_grid",
    "discover",
    "freeze_grid",
    "in_bounds",
    "neighbors",
    "new_belief_grid",
    "validate_grid",
]
