"""Invariants checked over seeded random mazes."""

import random

import pytest

from maze_world.core.cells import CellState
from maze_world.core.coordinates import to_row_col
from maze_world.core.grid import copy_grid
from maze_world.generation.maze_generator import generate_maze
from maze_world.search.solver import Algorithm, MazeSolver

SEEDS = range(8)
SIZE = 15


class RecordingSolver(MazeSolver):
    """Keeps every plan together with the belief grid it was made on."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.plans = []

    def _compute_shortest_path(self, destination, iteration):
        source = self._open.peek().coordinate
        belief = copy_grid(self.belief)
        terminal = super()._compute_shortest_path(destination, iteration)
        self.plans.append((source, destination, belief, terminal))
        return terminal


def _maze(seed):
    return generate_maze(SIZE, rng=random.Random(seed))


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_every_plan_is_a_shortest_path(seed, algorithm, bfs_distances):
    solver = RecordingSolver.for_batch(_maze(seed), "g", 1)
    solver.solve(algorithm)

    assert solver.plans
    for source, destination, belief, terminal in solver.plans:
        dist = bfs_distances(belief, to_row_col(source, SIZE))
        goal = to_row_col(destination, SIZE)
        if terminal is None:
            assert goal not in dist
            continue
        assert terminal.g == dist[goal]
        cells = [to_row_col(node.coordinate, SIZE) for node in terminal.lineage()]
        assert cells[0] == goal
        assert cells[-1] == to_row_col(source, SIZE)
        for (r1, c1), (r2, c2) in zip(cells, cells[1:]):
            assert abs(r1 - r2) + abs(c1 - c2) == 1
            assert belief[r2][c2] != CellState.BLOCKED


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_solved_exactly_when_target_reachable(seed, algorithm, bfs_distances):
    maze = _maze(seed)
    reachable = bfs_distances(maze, (0, 0))
    target = (SIZE - 1, SIZE - 1)

    solver = MazeSolver.for_batch(maze, "g", 1)
    result = solver.solve(algorithm)

    assert result.solved == (target in reachable)
    if result.solved:
        assert result.moves >= reachable[target]
    assert result.expanded_cells == sum(solver.iteration_expansions)
    assert result.iterations == len(solver.iteration_expansions)


@pytest.mark.parametrize("seed", SEEDS)
def test_tiebreakers_agree_on_solvability(seed):
    maze = _maze(seed)
    by_g = MazeSolver.for_batch(maze, "g", 1).solve_forward()
    by_h = MazeSolver.for_batch(maze, "h", 1).solve_forward()
    assert by_g.solved == by_h.solved


@pytest.mark.parametrize("seed", SEEDS)
def test_belief_never_contradicts_truth(seed):
    maze = _maze(seed)
    solver = MazeSolver.for_batch(maze, "g", 2)
    solver.solve_adaptive()
    for r, row in enumerate(solver.belief):
        for c, cell in enumerate(row):
            if cell == CellState.BLOCKED:
                assert maze[r][c] == 1
            elif cell in (CellState.UNBLOCKED, CellState.EXPLORED):
                assert maze[r][c] == 0
