"""
Generator Module - Randomized full-grid filler.

Uses plain recursive backtracking with a shuffled digit order per cell,
so every run produces a different solution grid.
"""

import logging
import random
from typing import Optional

from .grid import DIGITS, Grid

logger = logging.getLogger(__name__)


def fill(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    """
    Fill every empty cell of grid with a valid Sudoku assignment.

    Scans row-major for the first empty cell, tries digits 1-9 in a
    shuffled order, and backtracks when no digit fits.

    Args:
        grid: Grid to fill in place (normally empty)
        rng: Random source, a freshly seeded one if omitted

    Returns:
        True if the grid is now full, False if no completion exists
    """
    if rng is None:
        rng = random.Random()
    cell = grid.find_empty()
    if cell is None:
        return True

    row, col = cell
    digits = list(DIGITS)
    rng.shuffle(digits)

    for digit in digits:
        if grid.is_safe(row, col, digit):
            grid.place(row, col, digit)
            if fill(grid, rng):
                return True
            grid.clear(row, col)

    return False


def generate_solution(rng: Optional[random.Random] = None) -> Grid:
    """
    Produce a fresh, fully solved random grid.

    Args:
        rng: Random source, a freshly seeded one if omitted

    Returns:
        New complete Grid

    Raises:
        RuntimeError: If filling fails (cannot happen for an empty board)
    """
    grid = Grid.empty()
    if not fill(grid, rng):
        raise RuntimeError("Failed to fill an empty grid")
    logger.debug("Generated full solution grid")
    return grid
