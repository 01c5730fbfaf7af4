# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_visual" can be imported without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_visual.engine import Grid  # noqa: E402


SOLVED_ROWS = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def solved_grid():
    """A known valid full solution."""
    return Grid.from_rows(SOLVED_ROWS)


@pytest.fixture
def rng():
    """Seeded random source for reproducible puzzles."""
    return random.Random(1234)


def has_duplicates(grid: Grid) -> bool:
    """Brute-force check for a repeated digit in any row, column or box."""
    units = []
    for i in range(9):
        units.append([(i, c) for c in range(9)])
        units.append([(r, i) for r in range(9)])
        br, bc = 3 * (i // 3), 3 * (i % 3)
        units.append([(br + r, bc + c) for r in range(3) for c in range(3)])

    for unit in units:
        values = [grid.get(r, c) for r, c in unit if grid.get(r, c) != 0]
        if len(values) != len(set(values)):
            return True
    return False
