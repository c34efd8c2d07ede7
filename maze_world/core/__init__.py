"""Grid model, coordinates and the open-list data structures."""

from .cells import CellState
from .coordinates import to_index, to_row_col
from .priority_queue import PriorityQueue, TIEBREAKERS
from .state import INFINITY, SearchNode

__all__ = [
    "CellState",
    "INFINITY",
    "PriorityQueue",
    "SearchNode",
    "TIEBREAKERS",
    "to_index",
    "to_row_col",
]
