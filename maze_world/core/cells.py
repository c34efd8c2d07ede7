"""Cell state definitions shared by ground-truth and belief grids."""

from __future__ import annotations

from enum import IntEnum


class CellState(IntEnum):
    """Enumerate the values a grid cell may hold.

    Ground-truth grids only ever contain ``UNBLOCKED`` and ``BLOCKED``. The
    remaining members are annotations the solver writes into the belief grid.
    """

    UNBLOCKED = 0
    BLOCKED = 1
    UNKNOWN = 2
    EXPLORED = 3
    ON_PATH_UNBLOCKED = 4
    ON_PATH_UNKNOWN = 5
    START = 6
    TARGET = 7
    CURRENT = 8


# Cells counted as visited when building exploration heatmaps.
VISITED_STATES = frozenset({CellState.EXPLORED, CellState.START, CellState.TARGET})


__all__ = ["CellState", "VISITED_STATES"]
