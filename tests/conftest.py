# tests/conftest.py
from collections import deque
from typing import Callable, Dict, List, Sequence

import pytest

from maze_world.core.cells import CellState
from maze_world.core.grid import neighbors


def _bfs(belief: Sequence[Sequence[int]], source: tuple[int, int]) -> Dict[tuple[int, int], int]:
    """Shortest unit-cost distances treating every non-blocked cell as free."""
    size = len(belief)
    dist = {source: 0}
    queue = deque([source])
    while queue:
        row, col = queue.popleft()
        for nr, nc in neighbors(row, col, size):
            if belief[nr][nc] == CellState.BLOCKED or (nr, nc) in dist:
                continue
            dist[(nr, nc)] = dist[(row, col)] + 1
            queue.append((nr, nc))
    return dist


@pytest.fixture
def bfs_distances() -> Callable[[Sequence[Sequence[int]], tuple[int, int]], Dict[tuple[int, int], int]]:
    return _bfs


@pytest.fixture
def open_grid() -> Callable[[int], List[List[int]]]:
    def make(size: int) -> List[List[int]]:
        return [[0] * size for _ in range(size)]
    return make


@pytest.fixture
def grid_from_rows() -> Callable[[List[str]], List[List[int]]]:
    """Build a maze from strings where ``#`` is blocked and ``.`` is open."""
    def make(rows: List[str]) -> List[List[int]]:
        return [[1 if ch == "#" else 0 for ch in row] for row in rows]
    return make
