"""
Error Types for Sudoku Visual Solver

Cancellation is not an error: a cancelled solve reports
SolveOutcome.CANCELLED instead of raising.
"""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class AlreadyRunning(SudokuError):
    """Raised by SolveController.start() while a previous run is still active."""


class InvalidConfiguration(SudokuError, ValueError):
    """
    Raised when a configuration value cannot be interpreted as an integer.

    Values that are merely out of range are clamped instead of rejected.
    """
