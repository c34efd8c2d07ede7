"""Pinned search outcomes on stored mazes.

The small mazes in ``tests/data/small`` always run. The 101x101 set lives in
``tests/data/mazes`` as ``00.txt`` .. ``49.txt``; a case is skipped when its
file is absent.
"""

from pathlib import Path

import pytest

from maze_world.persistence.maze_io import maze_path, read_maze
from maze_world.search.solver import Algorithm, MazeSolver

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
MAZE_DIR = DATA_DIR / "mazes"
SMALL_DIR = DATA_DIR / "small"

# (maze file, algorithm, sight radius) -> (solved, expanded, iterations, moves).
# Both tiebreakers order equal-f nodes identically, so one row covers g and h.
SMALL_EXPECTED = {
    ("open3.txt", Algorithm.FORWARD, 1): (True, 4, 1, 4),
    ("open3.txt", Algorithm.BACKWARD, 1): (True, 4, 1, 4),
    ("open3.txt", Algorithm.ADAPTIVE, 1): (True, 4, 1, 4),
    ("center3.txt", Algorithm.FORWARD, 1): (True, 4, 1, 4),
    ("center3.txt", Algorithm.BACKWARD, 1): (True, 4, 1, 4),
    ("center3.txt", Algorithm.ADAPTIVE, 1): (True, 4, 1, 4),
    ("detour3.txt", Algorithm.FORWARD, 1): (True, 9, 2, 6),
    ("detour3.txt", Algorithm.BACKWARD, 1): (True, 10, 2, 6),
    ("detour3.txt", Algorithm.ADAPTIVE, 1): (True, 9, 2, 6),
    ("detour3.txt", Algorithm.FORWARD, 2): (True, 9, 2, 4),
    ("detour3.txt", Algorithm.BACKWARD, 2): (True, 9, 2, 4),
    ("detour3.txt", Algorithm.ADAPTIVE, 2): (True, 9, 2, 4),
    ("walled3.txt", Algorithm.FORWARD, 1): (False, 14, 3, 4),
    ("walled3.txt", Algorithm.BACKWARD, 1): (False, 9, 3, 4),
    ("walled3.txt", Algorithm.ADAPTIVE, 1): (False, 14, 3, 4),
    ("corner4.txt", Algorithm.FORWARD, 1): (True, 10, 2, 6),
    ("corner4.txt", Algorithm.BACKWARD, 1): (True, 10, 2, 6),
    ("corner4.txt", Algorithm.ADAPTIVE, 1): (True, 10, 2, 6),
}

EXPECTED_FORWARD_G = [
    11250, 16002, 8990, 13791, 14143, 8562, 7380, 10005, 8685, 8516, 9379, 10570, 10690, 7624, 9276, 8203,
    10050, 9584, 7206, 12950, 7349, 10217, 7036, 8512, 11315, 9764, 8838, 6788, 7816, 9689, 5521, 6796, 8471,
    13216, 7915, 7966, 6896, 9327, 18161, 12068, 9299, 10401, 9348, 9181, 9262, 6499, 8476, 8196, 22211, 201,
]

EXPECTED_BACKWARD_G = [
    61812, 52040, 124373, 109785, 107627, 184963, 83561, 77664, 119692, 115089, 157592, 198092, 249577, 148875,
    89086, 78547, 80582, 84933, 69963, 74223, 79468, 151850, 201161, 62415, 126546, 88044, 76903, 92949, 191108,
    178239, 237483, 97917, 136339, 85747, 59548, 94670, 210045, 133465, 133509, 104286, 146643, 147841, 65713,
    100727, 199751, 144222, 208329, 197535, 144260, 10398,
]

EXPECTED_ADAPTIVE_G = [
    11090, 15667, 8841, 13631, 12247, 8501, 7374, 9952, 8381, 8494, 9285, 10531, 13679, 7564, 8950, 8193, 10058,
    9542, 7133, 12717, 7344, 10113, 7030, 8503, 10110, 9705, 8610, 6786, 7782, 9581, 5509, 6786, 8358, 11900,
    7912, 7960, 6893, 9068, 18145, 11718, 9205, 10203, 9325, 9152, 9188, 6488, 8442, 8148, 22163, 201,
]

CASES = [
    (algorithm, index, expected)
    for algorithm, table in (
        (Algorithm.FORWARD, EXPECTED_FORWARD_G),
        (Algorithm.BACKWARD, EXPECTED_BACKWARD_G),
        (Algorithm.ADAPTIVE, EXPECTED_ADAPTIVE_G),
    )
    for index, expected in enumerate(table)
]


@pytest.mark.parametrize("algorithm, index, expected", CASES)
def test_expansion_counts(algorithm, index, expected):
    path = maze_path(MAZE_DIR, index)
    if not path.exists():
        pytest.skip(f"maze fixture {path.name} not available")
    solver = MazeSolver.for_batch(read_maze(path), "g", 1)
    assert solver.solve(algorithm).expanded_cells == expected


@pytest.mark.parametrize("tiebreaker", ["g", "h"])
@pytest.mark.parametrize("maze_file, algorithm, radius", list(SMALL_EXPECTED))
def test_small_maze_outcomes(maze_file, algorithm, radius, tiebreaker):
    maze = read_maze(SMALL_DIR / maze_file)
    result = MazeSolver.for_batch(maze, tiebreaker, radius).solve(algorithm)
    outcome = (result.solved, result.expanded_cells, result.iterations, result.moves)
    assert outcome == SMALL_EXPECTED[(maze_file, algorithm, radius)]
