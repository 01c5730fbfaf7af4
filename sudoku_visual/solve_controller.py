"""
Solve Controller Module for Sudoku Visual Solver

Runs the Solver on a background thread so the caller stays responsive,
and owns the cancellation flag and lifecycle of that run.

While a run is active the worker thread is the only writer of the puzzle
grid; the caller gets write access back once the handle is done.
"""

import logging
import threading
from typing import Callable, Optional

from .engine import Grid, NullObserver, SolveContext, SolveResult, Solver, StepObserver
from .errors import AlreadyRunning
from .settings import DEFAULT_SETTINGS, normalize_delay_ms

# Configure module logger
logger = logging.getLogger(__name__)


FinishedCallback = Callable[[SolveResult], None]


class SolveHandle:
    """
    One background solve run.

    Attributes:
        puzzle: Grid being solved (do not write while running)
        result: SolveResult once finished, else None
    """

    def __init__(
        self,
        puzzle: Grid,
        context: SolveContext,
        on_finished: Optional[FinishedCallback] = None
    ):
        self.puzzle = puzzle
        self.result: Optional[SolveResult] = None
        self._context = context
        self._on_finished = on_finished
        self._done = threading.Event()
        self._thread = threading.Thread(target=self._run, name="sudoku-solver", daemon=True)

    def _start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        """Worker body. Called on the solver thread."""
        try:
            self.result = Solver().solve(self.puzzle, self._context)
        except Exception:
            logger.exception("Error in solver thread")
            raise
        finally:
            self._finish()

    def _finish(self) -> None:
        if self.result is not None and self._on_finished:
            try:
                self._on_finished(self.result)
            except Exception:
                logger.exception("Error in solve finished callback")
        self._done.set()

    def on_worker_thread(self) -> bool:
        """True when called from this run's own solver thread."""
        return threading.current_thread() is self._thread

    def cancel(self) -> None:
        """Request cancellation without waiting. Idempotent."""
        self._context.cancel()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the run finishes.

        From the solver thread itself (an observer or on_finished callback)
        this never blocks and reports whether the solver has returned.

        Args:
            timeout: Maximum seconds to wait, None for no limit

        Returns:
            True if the run has finished
        """
        if self.on_worker_thread():
            return self.result is not None
        finished = self._done.wait(timeout)
        if finished:
            # Only the thread's own exit remains after _done is set
            self._thread.join()
        return finished

    @property
    def done(self) -> bool:
        """True once the solver has returned and callbacks have run."""
        return self._done.is_set()

    def is_alive(self) -> bool:
        """True while the worker thread is still executing."""
        return self._thread.is_alive()


class SolveController:
    """
    Starts, stops and tracks at most one background solve.

    Example:
        controller = SolveController()
        handle = controller.start(puzzle, delay_ms=100, observer=ui_observer)
        # ...
        controller.stop()
        if handle.result.was_cancelled:
            ...
    """

    def __init__(self, stop_timeout_ms: int = DEFAULT_SETTINGS["stop_timeout_ms"]):
        """
        Initialize the controller.

        Args:
            stop_timeout_ms: How long stop() waits for the solver to exit
        """
        self.stop_timeout_ms = normalize_delay_ms(stop_timeout_ms, "stop_timeout_ms")
        self._active: Optional[SolveHandle] = None
        self._lock = threading.Lock()

    def start(
        self,
        puzzle: Grid,
        delay_ms: int,
        observer: Optional[StepObserver] = None,
        on_finished: Optional[FinishedCallback] = None
    ) -> SolveHandle:
        """
        Launch a solve of puzzle on a background thread.

        Args:
            puzzle: Grid to solve in place
            delay_ms: Pause per placement, negative treated as 0
            observer: Receiver of StepEvents (called on the solver thread)
            on_finished: Called on the solver thread with the SolveResult
                after the last StepEvent

        Returns:
            Handle for the new run

        Raises:
            AlreadyRunning: If a previous run has not finished
        """
        with self._lock:
            if self._active is not None and self._active.is_alive():
                raise AlreadyRunning("A solve is already running; stop it first")

            context = SolveContext(
                delay_ms=normalize_delay_ms(delay_ms),
                observer=observer if observer is not None else NullObserver(),
            )
            handle = SolveHandle(puzzle, context, on_finished)
            self._active = handle
            handle._start()

        logger.info(f"Solver thread started (delay={context.delay_ms}ms)")
        return handle

    def stop(self, handle: Optional[SolveHandle] = None) -> Optional[SolveResult]:
        """
        Request the run to stop and wait a bounded time for it.

        Best effort: if the solver has not exited within stop_timeout_ms
        a warning is logged and the call returns anyway.

        Args:
            handle: Run to stop, defaults to the active run

        Returns:
            The run's SolveResult, or None if it has not finished
        """
        if handle is None:
            handle = self._active
        if handle is None:
            logger.warning("Solver not running")
            return None

        logger.info("Stop requested")
        handle.cancel()

        if handle.on_worker_thread():
            # Called from an observer or on_finished; the run unwinds after we return
            return handle.result

        if not handle.wait(self.stop_timeout_ms / 1000.0):
            logger.warning(f"Solver did not stop within {self.stop_timeout_ms}ms, proceeding")

        return handle.result

    def is_running(self) -> bool:
        """
        Check if a solve is currently running.

        Returns:
            True if the active run's thread is alive
        """
        handle = self._active
        return handle is not None and handle.is_alive()
