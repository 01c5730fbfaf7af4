"""
Tests for the answer checker.
"""

from sudoku_visual import check

from conftest import SOLVED_ROWS


def test_correct_board(solved_grid):
    """An exact copy of the solution is correct."""
    result = check(solved_grid.copy(), solved_grid)
    assert result.correct
    assert result.mismatches == frozenset()


def test_wrong_and_empty_cells_are_reported(solved_grid):
    """Wrong digits and blanks are both mismatches."""
    user = [row[:] for row in SOLVED_ROWS]
    user[0][0] = 9      # wrong
    user[4][7] = 0      # still empty

    result = check(user, solved_grid)

    assert not result.correct
    assert result.mismatches == {(0, 0), (4, 7)}


def test_accepts_nested_lists_for_both_sides():
    """Plain nested lists work for user board and solution."""
    result = check(SOLVED_ROWS, SOLVED_ROWS)
    assert result.correct
