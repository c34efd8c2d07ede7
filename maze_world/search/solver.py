"""Repeated A* search on a partially observable grid.

The agent knows nothing about the maze beyond its start and target. Each
planning iteration runs A* over the belief grid, treating unknown cells as
free. The agent then walks the planned path, revealing ground truth within
its sight radius after every step, and replans from the last reached cell as
soon as a planned cell turns out to be blocked.

Three variants share one replanning loop:

* Forward A* plans from the agent to the target.
* Backward A* plans from the target to the agent.
* Adaptive A* is Forward A* that afterwards raises the heuristic of every
  expanded cell to ``g(target) - g(cell)``.

Cost arrays are tagged with the iteration that last wrote them, so they are
allocated once per solve rather than cleared before every iteration.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Sequence, Union

from ..core.cells import CellState
from ..core.coordinates import RowCol, to_index, to_row_col
from ..core.grid import (
    Grid,
    clear_path_markers,
    copy_grid,
    discover,
    freeze_grid,
    neighbors,
    new_belief_grid,
    validate_grid,
)
from ..core.priority_queue import TIEBREAKERS, PriorityQueue
from ..core.state import INFINITY, SearchNode
from .heuristics import Heuristic
from .result import SolveResult


logger = logging.getLogger(__name__)

MOVEMENT_COST = 1


class Algorithm(Enum):
    """Replanning strategy: search direction plus optional learning."""

    FORWARD = "Forward A*"
    BACKWARD = "Backward A*"
    ADAPTIVE = "Adaptive A*"

    @property
    def backward(self) -> bool:
        return self is Algorithm.BACKWARD

    @property
    def learns(self) -> bool:
        return self is Algorithm.ADAPTIVE

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """Return the member named by ``value``.

        Accepts members, display names (``"Forward A*"``), short names
        (``"forward"``) and single-letter abbreviations (``"f"``).
        """

        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            short = member.name.lower()
            if text in (member.value.lower(), short, short[0]):
                return member
        raise ValueError(f"Unknown algorithm {value!r}")


class MazeSolver:
    """Solve one maze with repeated A* under a limited sight radius.

    Parameters
    ----------
    maze:
        Ground-truth grid of 0 (unblocked) and 1 (blocked). It is copied and
        never modified.
    start, target:
        Flat cell indices (``row * size + col``).
    tiebreaker:
        ``"g"`` to prefer larger g among equal f, ``"h"`` to prefer smaller h.
    sight_radius:
        Manhattan radius revealed around the agent; values below 1 become 1.
    store_steps:
        Capture a belief-grid snapshot after every agent step.
    belief:
        Optional initial belief grid, mutated in place while solving. Defaults
        to an all-unknown grid with the start and target marked.
    """

    def __init__(
        self,
        maze: Sequence[Sequence[int]],
        start: int,
        target: int,
        tiebreaker: str = "g",
        sight_radius: int = 1,
        store_steps: bool = False,
        belief: Optional[Grid] = None,
    ) -> None:
        size = validate_grid(maze)
        cells = size * size
        for label, coordinate in (("start", start), ("target", target)):
            if not 0 <= coordinate < cells:
                raise ValueError(f"{label} {coordinate} is outside a {size}x{size} maze")
        if start == target:
            raise ValueError("start and target must be different cells")
        if tiebreaker not in TIEBREAKERS:
            raise ValueError(f"Unknown tiebreaker {tiebreaker!r}; expected one of {TIEBREAKERS}")

        self.size = size
        self.start = start
        self.target = target
        self.tiebreaker = tiebreaker
        self.sight_radius = max(1, int(sight_radius))
        self.store_steps = store_steps
        self._truth = copy_grid(maze)

        for label, coordinate in (("start", start), ("target", target)):
            row, col = to_row_col(coordinate, size)
            if self._truth[row][col] == CellState.BLOCKED:
                raise ValueError(f"{label} cell ({row}, {col}) is blocked")

        if belief is None:
            belief = new_belief_grid(size, self.start_position, self.target_position)
        elif len(belief) != size or any(len(row) != size for row in belief):
            raise ValueError(f"belief grid must be {size}x{size}")
        self.belief: Grid = belief
        self._initial_belief = copy_grid(belief)

        self.expanded_cells = 0
        self.iterations = 0
        self.moves = 0
        self.iteration_expansions: List[int] = []
        self._steps: List[Grid] = []
        self._g: List[float] = [INFINITY] * cells
        self._search: List[int] = [0] * cells
        self._open = PriorityQueue(tiebreaker)
        self._closed: List[int] = []
        self._heuristic = Heuristic(size)

    @classmethod
    def for_batch(
        cls,
        maze: Sequence[Sequence[int]],
        tiebreaker: str = "g",
        sight_radius: int = 1,
        store_steps: bool = False,
    ) -> "MazeSolver":
        """Return a solver from the top-left to the bottom-right corner."""

        size = len(maze)
        return cls(maze, 0, size * size - 1, tiebreaker, sight_radius, store_steps)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def start_position(self) -> RowCol:
        return to_row_col(self.start, self.size)

    @property
    def target_position(self) -> RowCol:
        return to_row_col(self.target, self.size)

    @property
    def steps(self) -> List[Grid]:
        """Belief snapshots captured so far by the current solve."""

        return self._steps

    def solve_forward(self) -> SolveResult:
        return self.solve(Algorithm.FORWARD)

    def solve_backward(self) -> SolveResult:
        return self.solve(Algorithm.BACKWARD)

    def solve_adaptive(self) -> SolveResult:
        return self.solve(Algorithm.ADAPTIVE)

    def solve(self, algorithm: Union[Algorithm, str]) -> SolveResult:
        """Run ``algorithm`` to completion and return its result.

        Every call starts again from the belief grid the solver was built
        with, so one solver may run several algorithms in turn.
        """

        algorithm = Algorithm.parse(algorithm)
        started = time.perf_counter()
        self._reset(algorithm)
        self._capture()

        current = self.start
        while current != self.target:
            self.iterations += 1
            iteration = self.iterations
            if algorithm.backward:
                source, destination = self.target, current
            else:
                source, destination = current, self.target

            self._begin_iteration(source, destination, iteration)
            before = self.expanded_cells
            terminal = self._compute_shortest_path(destination, iteration)
            self.iteration_expansions.append(self.expanded_cells - before)
            logger.debug(
                "%s iteration %d from %s expanded %d cells",
                algorithm.value,
                iteration,
                to_row_col(current, self.size),
                self.expanded_cells - before,
            )

            if terminal is None:
                logger.info(
                    "%s: no path from %s under current knowledge after %d iterations",
                    algorithm.value,
                    to_row_col(current, self.size),
                    iteration,
                )
                return self._result(algorithm, False, started)

            path = self._extract_path(terminal, forward=not algorithm.backward)
            target_row, target_col = self.target_position
            self.belief[target_row][target_col] = CellState.TARGET
            current = self._follow_path(path)

            if algorithm.learns:
                self._heuristic.learn(self._closed, self._g, self._g[self.target])

            clear_path_markers(self.belief, self.start_position, self.target_position)

        return self._result(algorithm, True, started)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _reset(self, algorithm: Algorithm) -> None:
        cells = self.size * self.size
        for row, initial in zip(self.belief, self._initial_belief):
            row[:] = initial
        self.expanded_cells = 0
        self.iterations = 0
        self.moves = 0
        self.iteration_expansions = []
        self._steps = []
        self._g = [INFINITY] * cells
        self._search = [0] * cells
        self._heuristic = Heuristic(self.size, {} if algorithm.learns else None)

    def _begin_iteration(self, source: int, destination: int, iteration: int) -> None:
        self._g[source] = 0
        self._search[source] = iteration
        self._g[destination] = INFINITY
        self._search[destination] = iteration

        self._open = PriorityQueue(self.tiebreaker)
        self._closed = []
        self._open.insert(SearchNode(source, 0, self._heuristic(source, destination)))

    def _compute_shortest_path(self, destination: int, iteration: int) -> Optional[SearchNode]:
        """Expand cells until no open node can beat the destination's cost.

        Returns the destination node carrying the parent chain, or ``None``
        if the open list ran dry before the destination was reached.
        """

        g = self._g
        search = self._search
        belief = self.belief
        size = self.size
        open_list = self._open
        closed = self._closed
        heuristic = self._heuristic
        terminal: Optional[SearchNode] = None

        while not open_list.is_empty() and g[destination] > open_list.peek().f:
            node = open_list.pop()
            closed.append(node.coordinate)
            self.expanded_cells += 1

            cost = g[node.coordinate] + MOVEMENT_COST
            row, col = to_row_col(node.coordinate, size)
            for nrow, ncol in neighbors(row, col, size):
                if belief[nrow][ncol] == CellState.BLOCKED:
                    continue
                coordinate = to_index(nrow, ncol, size)
                if search[coordinate] != iteration:
                    g[coordinate] = INFINITY
                    search[coordinate] = iteration
                if cost < g[coordinate]:
                    g[coordinate] = cost
                    open_list.remove(coordinate)
                    child = SearchNode(coordinate, cost, heuristic(coordinate, destination), node)
                    if coordinate == destination:
                        terminal = child
                    open_list.insert(child)

        if g[destination] == INFINITY:
            return None
        return terminal

    # ------------------------------------------------------------------
    # Path following
    # ------------------------------------------------------------------
    def _extract_path(self, terminal: SearchNode, forward: bool) -> Deque[SearchNode]:
        """Return the planned path in walking order and mark it on the belief grid."""

        path: Deque[SearchNode] = deque()
        for node in terminal.lineage():
            if forward:
                path.appendleft(node)
            else:
                path.append(node)
            row, col = to_row_col(node.coordinate, self.size)
            if self.belief[row][col] == CellState.UNKNOWN:
                self.belief[row][col] = CellState.ON_PATH_UNKNOWN
            else:
                self.belief[row][col] = CellState.ON_PATH_UNBLOCKED
        return path

    def _follow_path(self, path: Deque[SearchNode]) -> int:
        """Walk ``path`` until the target or a blocked cell; return the stop cell."""

        belief = self.belief
        node = path.popleft()
        while node.coordinate != self.target and path:
            row, col = to_row_col(node.coordinate, self.size)
            belief[row][col] = CellState.CURRENT
            if not discover(belief, self._truth, row, col, self.sight_radius):
                self._capture()
                return node.coordinate
            self._capture()
            belief[row][col] = CellState.EXPLORED

            next_row, next_col = to_row_col(path[0].coordinate, self.size)
            if belief[next_row][next_col] == CellState.BLOCKED:
                belief[row][col] = CellState.CURRENT
                self._capture()
                belief[row][col] = CellState.EXPLORED
                return node.coordinate

            node = path.popleft()
            self.moves += 1

        if node.coordinate == self.target:
            row, col = self.target_position
            belief[row][col] = CellState.CURRENT
            self._capture()
        return node.coordinate

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _capture(self) -> None:
        if self.store_steps:
            self._steps.append(copy_grid(self.belief))

    def _result(self, algorithm: Algorithm, solved: bool, started: float) -> SolveResult:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        result = SolveResult(
            solved=solved,
            expanded_cells=self.expanded_cells,
            algorithm_name=algorithm.value,
            tiebreaker=self.tiebreaker,
            sight_radius=self.sight_radius,
            maze_size=self.size,
            original_maze=freeze_grid(self._truth),
            start_position=self.start_position,
            target_position=self.target_position,
            solution_steps=tuple(self._steps) if self.store_steps else (),
            solution_time_ms=elapsed_ms,
            iterations=self.iterations,
            moves=self.moves,
        )
        logger.info("%s in %.1f ms", result, elapsed_ms)
        return result


__all__ = ["Algorithm", "MOVEMENT_COST", "MazeSolver"]
