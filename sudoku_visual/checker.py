"""
Answer Checker - Compares a user's board with the stored solution.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple, Union

import numpy as np

from .engine import Grid

BoardLike = Union[Grid, Iterable[Iterable[int]]]


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of an answer check.

    Attributes:
        correct: True if every cell matches the solution
        mismatches: (row, col) of cells that are wrong or still empty
    """
    correct: bool
    mismatches: FrozenSet[Tuple[int, int]]


def check(user_grid: BoardLike, solution: BoardLike) -> CheckResult:
    """
    Compare user_grid against solution cell by cell.

    Empty user cells count as mismatches. No search is involved.

    Args:
        user_grid: Board as entered by the user (0 for blank)
        solution: Stored full solution

    Returns:
        CheckResult with the set of mismatching cells
    """
    user = _as_grid(user_grid)
    expected = _as_grid(solution)

    rows, cols = np.nonzero(user.cells != expected.cells)
    mismatches = frozenset(zip(rows.tolist(), cols.tolist()))
    return CheckResult(correct=not mismatches, mismatches=mismatches)


def _as_grid(board: BoardLike) -> Grid:
    if isinstance(board, Grid):
        return board
    return Grid.from_rows(board)
