"""
Engine Package - Sudoku grid, generation, carving and observable solving.

Public API:
    - Grid: Mutable 9x9 board with constraint checks
    - fill(), generate_solution(): Randomized full-grid generation
    - carve(), new_puzzle(): Puzzle/solution pairs
    - StepEvent, StepKind: One observable solver action
    - StepObserver: Abstract receiver of StepEvents
    - SolveContext: Cancellation flag, delay and observer for one run
    - Solver: Interruptible backtracking search
    - SolveResult, SolveOutcome, SolveMetrics: Run results

Usage:
    from sudoku_visual.engine import new_puzzle, Solver, SolveContext

    puzzle, solution = new_puzzle(40)
    context = SolveContext(delay_ms=0, observer=LoggingObserver())
    result = Solver().solve(puzzle, context)
"""

from .grid import Grid, SIZE, BOX, DIGITS
from .generator import fill, generate_solution
from .carver import carve, new_puzzle
from .events import StepEvent, StepKind
from .observer import StepObserver, NullObserver, LoggingObserver, RecordingObserver
from .context import SolveContext
from .result import SolveResult, SolveOutcome, SolveMetrics
from .solver import Solver

__all__ = [
    # Board
    "Grid",
    "SIZE",
    "BOX",
    "DIGITS",
    # Generation
    "fill",
    "generate_solution",
    "carve",
    "new_puzzle",
    # Observation
    "StepEvent",
    "StepKind",
    "StepObserver",
    "NullObserver",
    "LoggingObserver",
    "RecordingObserver",
    # Solving
    "SolveContext",
    "Solver",
    "SolveResult",
    "SolveOutcome",
    "SolveMetrics",
]
