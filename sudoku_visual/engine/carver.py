"""
Carver Module - Turns a full grid into a (puzzle, solution) pair.

No uniqueness check is made: a carved puzzle may admit completions other
than the stored solution.
"""

import logging
import random
from typing import Optional, Tuple

from ..settings import normalize_cells_to_remove
from .generator import generate_solution
from .grid import SIZE, Grid

logger = logging.getLogger(__name__)


def carve(
    full_grid: Grid,
    cells_to_remove: int,
    rng: Optional[random.Random] = None
) -> Tuple[Grid, Grid]:
    """
    Remove random occupied cells from a copy of full_grid.

    Stops when cells_to_remove cells are cleared or no occupied cell is
    left. full_grid itself is not modified.

    Args:
        full_grid: Solved grid to carve from
        cells_to_remove: Number of cells to zero, clamped to [0, 81]
        rng: Random source, a freshly seeded one if omitted

    Returns:
        (puzzle, solution) tuple of independent grids
    """
    if rng is None:
        rng = random.Random()
    cells_to_remove = normalize_cells_to_remove(cells_to_remove)

    solution = full_grid.copy()
    puzzle = full_grid.copy()

    occupied = [
        (row, col)
        for row in range(SIZE)
        for col in range(SIZE)
        if puzzle.get(row, col) != 0
    ]
    count = min(cells_to_remove, len(occupied))
    for row, col in rng.sample(occupied, count):
        puzzle.clear(row, col)

    logger.debug(f"Carved {count} cells, {puzzle.filled_count()} clues remain")
    return puzzle, solution


def new_puzzle(
    cells_to_remove: int,
    rng: Optional[random.Random] = None
) -> Tuple[Grid, Grid]:
    """
    Generate a fresh random puzzle and its solution.

    Args:
        cells_to_remove: Difficulty as number of cells to blank, clamped to [0, 81]
        rng: Random source, a freshly seeded one if omitted

    Returns:
        (puzzle, solution) tuple; both are new objects on every call
    """
    if rng is None:
        rng = random.Random()
    puzzle, solution = carve(generate_solution(rng), cells_to_remove, rng)
    logger.info(f"New puzzle: {puzzle.filled_count()} clues")
    return puzzle, solution
