"""
Grid Module - Mutable 9x9 Sudoku board with row/column/box constraint checks.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np


SIZE = 9
BOX = 3
DIGITS = tuple(range(1, SIZE + 1))


class Grid:
    """
    Mutable 9x9 Sudoku board backed by a numpy int8 array.

    Cells hold 0 (empty) or a digit 1-9. place() and clear() do not
    validate constraints; callers check is_safe() first.

    Attributes:
        cells: (9, 9) int8 array, indexed [row, col]
    """

    def __init__(self, cells: Optional[np.ndarray] = None):
        """
        Create a grid, empty unless cells are given.

        Args:
            cells: Optional 9x9 array-like of ints in [0, 9] (copied)

        Raises:
            ValueError: If shape is not 9x9 or a value is outside [0, 9]
        """
        if cells is None:
            self.cells = np.zeros((SIZE, SIZE), dtype=np.int8)
            return

        array = np.array(cells, dtype=np.int64)
        if array.shape != (SIZE, SIZE):
            raise ValueError(f"Grid must be {SIZE}x{SIZE}, got shape {array.shape}")
        if array.min() < 0 or array.max() > SIZE:
            raise ValueError(f"Grid values must be in [0, {SIZE}]")
        self.cells = array.astype(np.int8)

    @classmethod
    def empty(cls) -> 'Grid':
        """Create an all-empty grid."""
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> 'Grid':
        """
        Create a grid from nested rows (e.g. a list of 9 lists of 9 ints).

        Args:
            rows: Row-major cell values, 0 for empty

        Returns:
            New Grid instance
        """
        return cls([list(row) for row in rows])

    def get(self, row: int, col: int) -> int:
        """Get value at (row, col), 0 if empty."""
        _check_cell(row, col)
        return int(self.cells[row, col])

    def is_safe(self, row: int, col: int, digit: int) -> bool:
        """
        Check whether digit can stand at (row, col) without a duplicate.

        The cell itself is excluded from the comparison, so this works on
        partially solved boards and on cells that already hold digit.

        Args:
            row: Row index 0-8
            col: Column index 0-8
            digit: Candidate digit 1-9

        Returns:
            True if digit appears nowhere else in the row, column or box

        Raises:
            ValueError: If digit or coordinates are out of range
        """
        _check_cell(row, col)
        if digit not in DIGITS:
            raise ValueError(f"Digit must be 1-{SIZE}, got {digit!r}")

        self_match = 1 if self.cells[row, col] == digit else 0

        if np.count_nonzero(self.cells[row, :] == digit) - self_match > 0:
            return False
        if np.count_nonzero(self.cells[:, col] == digit) - self_match > 0:
            return False

        box_row = row - row % BOX
        box_col = col - col % BOX
        box = self.cells[box_row:box_row + BOX, box_col:box_col + BOX]
        return np.count_nonzero(box == digit) - self_match == 0

    def place(self, row: int, col: int, digit: int) -> None:
        """Write digit at (row, col). No constraint validation."""
        self.cells[row, col] = digit

    def clear(self, row: int, col: int) -> None:
        """Empty the cell at (row, col)."""
        self.cells[row, col] = 0

    def find_empty(self, candidates: Optional[np.ndarray] = None) -> Optional[Tuple[int, int]]:
        """
        Find the first empty cell in row-major order.

        Args:
            candidates: Optional 9x9 bool mask; only True cells are considered

        Returns:
            (row, col) of the first empty cell, or None if there is none
        """
        open_cells = self.cells == 0
        if candidates is not None:
            open_cells &= candidates
        positions = np.flatnonzero(open_cells)
        if positions.size == 0:
            return None
        row, col = divmod(int(positions[0]), SIZE)
        return row, col

    def empty_mask(self) -> np.ndarray:
        """Bool mask of currently empty cells (a copy, safe to keep)."""
        return self.cells == 0

    def filled_count(self) -> int:
        """Number of non-empty cells."""
        return int(np.count_nonzero(self.cells))

    def is_complete(self) -> bool:
        """
        Check that the grid is a full valid solution.

        Returns:
            True if every row, column and box is a permutation of 1-9
        """
        expected = np.arange(1, SIZE + 1)
        for i in range(SIZE):
            if not np.array_equal(np.sort(self.cells[i, :]), expected):
                return False
            if not np.array_equal(np.sort(self.cells[:, i]), expected):
                return False
            box_row, box_col = BOX * (i // BOX), BOX * (i % BOX)
            box = self.cells[box_row:box_row + BOX, box_col:box_col + BOX]
            if not np.array_equal(np.sort(box, axis=None), expected):
                return False
        return True

    def copy(self) -> 'Grid':
        """Deep copy; the new grid shares no storage with this one."""
        return Grid(self.cells)

    def to_list(self) -> List[List[int]]:
        """Convert to a nested list of plain ints."""
        return self.cells.astype(int).tolist()

    def render(self) -> str:
        """Plain-text rendering with box separators, '.' for empty cells."""
        lines = []
        for row in range(SIZE):
            if row and row % BOX == 0:
                lines.append("------+-------+------")
            parts = []
            for col in range(SIZE):
                if col and col % BOX == 0:
                    parts.append("|")
                value = int(self.cells[row, col])
                parts.append(str(value) if value else ".")
            lines.append(" ".join(parts))
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self):
        return f"Grid(filled={self.filled_count()})"

    def __str__(self):
        return self.render()


def _check_cell(row: int, col: int) -> None:
    """Reject coordinates outside the board (numpy would wrap negatives)."""
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the {SIZE}x{SIZE} board")
