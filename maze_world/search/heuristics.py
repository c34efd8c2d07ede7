"""Heuristics for 4-connected unit-cost grids."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

from ..core.coordinates import to_row_col


def manhattan(a: int, b: int, size: int) -> int:
    """Return the Manhattan distance between flat indices ``a`` and ``b``."""

    ar, ac = to_row_col(a, size)
    br, bc = to_row_col(b, size)
    return abs(ar - br) + abs(ac - bc)


class Heuristic:
    """Manhattan distance, overridden per cell by learned values.

    A static heuristic is created with ``learned=None``. Adaptive A* passes a
    dict which :meth:`learn` fills after every planning iteration.
    """

    def __init__(self, size: int, learned: Optional[Dict[int, int]] = None) -> None:
        self.size = size
        self.learned = learned

    @property
    def adaptive(self) -> bool:
        return self.learned is not None

    def __call__(self, coordinate: int, destination: int) -> int:
        if self.learned is not None:
            value = self.learned.get(coordinate)
            if value is not None:
                return value
        return manhattan(coordinate, destination, self.size)

    def learn(self, closed: Iterable[int], g: Sequence[float], goal_cost: float) -> None:
        """Set ``h(s) = g(goal) - g(s)`` for every expanded cell ``s``.

        ``goal_cost`` must be the finite cost of the goal found this
        iteration and every cell in ``closed`` must carry a g-value from the
        same iteration.
        """

        if self.learned is None:
            raise RuntimeError("learn() requires an adaptive heuristic")
        for coordinate in closed:
            self.learned[coordinate] = int(goal_cost - g[coordinate])


__all__ = ["Heuristic", "manhattan"]
