import pytest

from maze_world.core.cells import CellState
from maze_world.core.grid import (
    clear_path_markers,
    discover,
    freeze_grid,
    in_bounds,
    neighbors,
    new_belief_grid,
    validate_grid,
)

U = CellState.UNKNOWN


def test_validate_grid_returns_size(open_grid):
    assert validate_grid(open_grid(4)) == 4


@pytest.mark.parametrize(
    "grid",
    [
        [],
        [[0, 0], [0]],
        [[0, 0, 0], [0, 0, 0]],
        [[0, 2], [0, 0]],
    ],
)
def test_validate_grid_rejects_bad_input(grid):
    with pytest.raises(ValueError):
        validate_grid(grid)


def test_neighbors_order_and_bounds():
    assert list(neighbors(1, 1, 3)) == [(2, 1), (0, 1), (1, 2), (1, 0)]
    assert list(neighbors(0, 0, 3)) == [(1, 0), (0, 1)]
    assert list(neighbors(2, 2, 3)) == [(1, 2), (2, 1)]
    assert in_bounds(2, 0, 3)
    assert not in_bounds(3, 0, 3)


def test_new_belief_grid_marks_endpoints():
    belief = new_belief_grid(3, (0, 0), (2, 2))
    assert belief[0][0] == CellState.START
    assert belief[2][2] == CellState.TARGET
    assert sum(row.count(U) for row in belief) == 7


def test_discover_reveals_manhattan_diamond(open_grid):
    truth = open_grid(5)
    truth[2][3] = 1
    belief = [[U] * 5 for _ in range(5)]

    assert discover(belief, truth, 2, 2, 1) is True

    revealed = {(r, c) for r in range(5) for c in range(5) if belief[r][c] != U}
    assert revealed == {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}
    assert belief[2][3] == CellState.BLOCKED
    assert belief[1][2] == CellState.UNBLOCKED


def test_discover_radius_two_excludes_corners(open_grid):
    truth = open_grid(5)
    belief = [[U] * 5 for _ in range(5)]
    discover(belief, truth, 2, 2, 2)
    revealed = sum(1 for row in belief for cell in row if cell != U)
    assert revealed == 13
    assert belief[0][0] == U
    assert belief[1][1] == CellState.UNBLOCKED


def test_discover_clips_at_edges(open_grid):
    truth = open_grid(3)
    belief = [[U] * 3 for _ in range(3)]
    discover(belief, truth, 0, 0, 1)
    assert belief[0][1] == CellState.UNBLOCKED
    assert belief[1][0] == CellState.UNBLOCKED
    assert belief[1][1] == U


def test_discover_resolves_planned_cells(open_grid):
    truth = open_grid(3)
    truth[0][2] = 1
    belief = [[U] * 3 for _ in range(3)]
    belief[0][1] = CellState.ON_PATH_UNKNOWN
    belief[0][2] = CellState.ON_PATH_UNKNOWN

    assert discover(belief, truth, 0, 1, 1) is False
    assert belief[0][1] == CellState.ON_PATH_UNBLOCKED
    assert belief[0][2] == CellState.BLOCKED


def test_discover_leaves_known_cells(open_grid):
    truth = open_grid(3)
    belief = [[U] * 3 for _ in range(3)]
    belief[1][1] = CellState.EXPLORED
    belief[0][1] = CellState.START
    discover(belief, truth, 1, 1, 1)
    assert belief[1][1] == CellState.EXPLORED
    assert belief[0][1] == CellState.START


def test_clear_path_markers():
    belief = [
        [CellState.ON_PATH_UNBLOCKED, CellState.ON_PATH_UNKNOWN, CellState.BLOCKED],
        [CellState.EXPLORED, CellState.ON_PATH_UNBLOCKED, U],
        [U, U, CellState.ON_PATH_UNBLOCKED],
    ]
    clear_path_markers(belief, (0, 0), (2, 2))
    assert belief == [
        [CellState.START, U, CellState.BLOCKED],
        [CellState.EXPLORED, CellState.UNBLOCKED, U],
        [U, U, CellState.TARGET],
    ]


def test_freeze_grid_is_immutable_copy(open_grid):
    grid = open_grid(2)
    frozen = freeze_grid(grid)
    grid[0][0] = 1
    assert frozen == ((0, 0), (0, 0))
