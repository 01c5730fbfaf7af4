"""
Sudoku Visual Solver - Generate, carve and watch-solve 9x9 Sudoku puzzles.

Public API:
    - new_puzzle(): Fresh (puzzle, solution) pair
    - SolveController: Background solve with stop/is_running
    - check(): Compare a user's board with the solution
    - StepObserver / StepEvent: Live trace of the solver

The Qt signal bridge lives in sudoku_visual.qt_bridge and is imported
separately so the core does not require PyQt5 to be loaded.
"""

from .engine import (
    Grid,
    StepEvent,
    StepKind,
    StepObserver,
    SolveOutcome,
    SolveResult,
    new_puzzle,
)
from .checker import CheckResult, check
from .errors import AlreadyRunning, InvalidConfiguration, SudokuError
from .solve_controller import SolveController, SolveHandle

__all__ = [
    "Grid",
    "StepEvent",
    "StepKind",
    "StepObserver",
    "SolveOutcome",
    "SolveResult",
    "new_puzzle",
    "CheckResult",
    "check",
    "AlreadyRunning",
    "InvalidConfiguration",
    "SudokuError",
    "SolveController",
    "SolveHandle",
]
