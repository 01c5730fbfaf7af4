"""
Qt Bridge Module for Sudoku Visual Solver

Adapts solver callbacks to PyQt5 signals so a GUI can repaint cells from
its own thread. The solver calls on_step() on the worker thread; Qt
queues the signal to receivers living in the GUI thread.
"""

import logging
from typing import Dict, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from .engine import Grid, SolveResult, StepEvent, StepKind, StepObserver

# Configure module logger
logger = logging.getLogger(__name__)


class QtStepObserver(QObject):
    """
    StepObserver that re-emits solver activity as Qt signals.

    Thread-safe: on_step() and on_finished() can be called from the
    solver thread. Must be created from the GUI thread (PyQt5 requirement)
    so queued connections deliver there.

    Signals:
        step_emitted(object): StepEvent for each solver step
        solve_finished(object): SolveResult when the run ends
        cells_cleared(object): List of (row, col) the solver emptied on
            cancel without a step event; emitted before solve_finished

    Usage:
        bridge = QtStepObserver(puzzle)
        bridge.step_emitted.connect(board_view.show_step)
        bridge.solve_finished.connect(window.on_solve_finished)
        bridge.cells_cleared.connect(board_view.blank_cells)
        controller.start(puzzle, delay_ms, bridge.observer, bridge.on_finished)
    """

    step_emitted = pyqtSignal(object)
    solve_finished = pyqtSignal(object)
    cells_cleared = pyqtSignal(object)

    def __init__(self, puzzle: Optional[Grid] = None, parent: Optional[QObject] = None):
        """
        Args:
            puzzle: Board being solved, used to resync after a cancel
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self.puzzle = puzzle
        # Last digit shown per cell, as far as this bridge has reported it
        self._shown: Dict[Tuple[int, int], int] = {}
        self.observer = _SignalObserver(self)

    def on_step(self, event: StepEvent) -> None:
        """Record the displayed digit and forward the event (any thread)."""
        if event.kind is StepKind.BACKTRACK:
            self._shown.pop(event.cell, None)
        else:
            self._shown[event.cell] = event.digit
        self.step_emitted.emit(event)

    def on_finished(self, result: SolveResult) -> None:
        """Forward the terminal result (any thread)."""
        logger.debug(f"Solve finished: {result.outcome.value}")
        if result.was_cancelled:
            cleared = self._drop_cleared_cells()
            if cleared:
                self.cells_cleared.emit(cleared)
        self.solve_finished.emit(result)

    def displayed_value(self, row: int, col: int) -> Optional[int]:
        """Digit this bridge last told the GUI to show at (row, col)."""
        return self._shown.get((row, col), 0)

    def reset(self, puzzle: Optional[Grid] = None) -> None:
        """Forget displayed digits, e.g. before a new puzzle."""
        self._shown.clear()
        if puzzle is not None:
            self.puzzle = puzzle

    def _drop_cleared_cells(self) -> List[Tuple[int, int]]:
        # A cancel during the pause after a placement empties that cell silently
        if self.puzzle is None:
            return []
        cleared = [cell for cell in self._shown if self.puzzle.get(*cell) == 0]
        for cell in cleared:
            del self._shown[cell]
        return cleared


class _SignalObserver(StepObserver):
    """
    StepObserver facade for QtStepObserver.

    QObject and ABCMeta metaclasses cannot be combined, so the bridge
    hands this object to the solver instead of itself.
    """

    def __init__(self, bridge: QtStepObserver):
        self._bridge = bridge

    def on_step(self, event: StepEvent) -> None:
        self._bridge.on_step(event)

    def displayed_value(self, row: int, col: int) -> Optional[int]:
        return self._bridge.displayed_value(row, col)
