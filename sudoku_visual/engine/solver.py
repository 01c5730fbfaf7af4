"""
Solver Module - Interruptible, observable backtracking search.

Digits are tried in ascending order; any valid completion is accepted.
Cancellation is checked on entry to every recursive call, before each
candidate digit and after every pause.
"""

import logging
import time

import numpy as np

from .context import SolveContext
from .events import StepEvent, StepKind
from .grid import DIGITS, Grid
from .result import SolveMetrics, SolveOutcome, SolveResult

logger = logging.getLogger(__name__)


class Solver:
    """
    Recursive backtracking solver that reports every step.

    The puzzle grid is mutated in place. Cells that are filled when the
    run starts are clues and are never written. On SOLVED the grid holds
    the completion; on CANCELLED it holds the placements of the branch
    that was active, minus the digit whose pause was interrupted.

    Example:
        context = SolveContext(delay_ms=0, observer=LoggingObserver())
        result = Solver().solve(puzzle, context)
        if result.solved:
            print(puzzle)
    """

    def solve(self, puzzle: Grid, context: SolveContext) -> SolveResult:
        """
        Run the search to completion, exhaustion or cancellation.

        Args:
            puzzle: Board to solve in place
            context: Cancellation flag, pacing and observer for this run

        Returns:
            SolveResult with outcome and metrics
        """
        context.start_time = time.perf_counter()
        metrics = SolveMetrics()
        open_cells = puzzle.empty_mask()

        logger.info(f"Solve started: {int(np.count_nonzero(open_cells))} empty cells, "
                    f"delay={context.delay_ms}ms")

        outcome = self._search(puzzle, open_cells, context, metrics)

        metrics.computation_time_ms = context.elapsed_ms()
        logger.info(f"Solve finished: {outcome.value} after {metrics.placements} placements, "
                    f"{metrics.backtracks} backtracks, {metrics.computation_time_ms:.1f}ms")
        return SolveResult(outcome=outcome, metrics=metrics)

    def _search(
        self,
        grid: Grid,
        open_cells: np.ndarray,
        context: SolveContext,
        metrics: SolveMetrics
    ) -> SolveOutcome:
        """
        One recursion level: fill the next open cell and descend.

        Returns:
            SOLVED, CANCELLED, or UNSOLVABLE when every digit failed here
        """
        if context.is_cancelled():
            return SolveOutcome.CANCELLED

        cell = grid.find_empty(open_cells)
        if cell is None:
            return SolveOutcome.SOLVED

        row, col = cell
        self._check_display(context, metrics, row, col)

        for digit in DIGITS:
            if context.is_cancelled():
                return SolveOutcome.CANCELLED

            if not grid.is_safe(row, col, digit):
                continue

            grid.place(row, col, digit)
            metrics.placements += 1
            self._emit(context, metrics, StepEvent(row, col, digit, StepKind.TRYING))

            if context.pause(context.delay_ms):
                grid.clear(row, col)
                return SolveOutcome.CANCELLED

            outcome = self._search(grid, open_cells, context, metrics)

            if outcome is SolveOutcome.SOLVED:
                self._emit(context, metrics, StepEvent(row, col, digit, StepKind.ACCEPTED))
                return SolveOutcome.SOLVED

            if outcome is SolveOutcome.CANCELLED:
                return SolveOutcome.CANCELLED

            grid.clear(row, col)
            metrics.backtracks += 1
            self._emit(context, metrics, StepEvent(row, col, digit, StepKind.BACKTRACK))
            if context.pause(context.backtrack_delay_ms):
                return SolveOutcome.CANCELLED

        # Exhaustion under a pending cancel must not make the caller backtrack
        if context.is_cancelled():
            return SolveOutcome.CANCELLED
        return SolveOutcome.UNSOLVABLE

    def _emit(self, context: SolveContext, metrics: SolveMetrics, event: StepEvent) -> None:
        """Deliver event to the observer; observer failures stay out of the search."""
        metrics.events_emitted += 1
        try:
            context.observer.on_step(event)
        except Exception:
            metrics.observer_errors += 1
            logger.exception(f"Observer failed on step {event}")

    def _check_display(self, context: SolveContext, metrics: SolveMetrics, row: int, col: int) -> None:
        """Warn when the observer shows a digit in a cell the board has empty."""
        try:
            shown = context.observer.displayed_value(row, col)
        except Exception:
            metrics.observer_errors += 1
            logger.exception(f"Observer failed to report display at ({row},{col})")
            return

        if shown:
            logger.warning(f"Display shows {shown} at ({row},{col}) but the board is empty there; "
                           f"continuing with the board")
