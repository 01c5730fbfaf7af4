"""
Solve Context Module - Cancellation, pacing and reporting for one solve run.
"""

import threading
import time
from dataclasses import dataclass, field

from .observer import NullObserver, StepObserver


@dataclass
class SolveContext:
    """
    Per-run context threaded through every recursive solver call.

    A fresh context (and so a fresh cancel_flag) is used for each run; the
    flag is only ever set, never cleared.

    Attributes:
        delay_ms: Pause after each placement; backtracks pause half as long.
            Values <= 0 disable pausing entirely.
        observer: Receiver of StepEvents
        cancel_flag: Threading event for cancellation
        start_time: When the run started, reset by Solver.solve()
    """
    delay_ms: int = 0
    observer: StepObserver = field(default_factory=NullObserver)
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    start_time: float = field(default_factory=time.perf_counter)

    def is_cancelled(self) -> bool:
        """
        Check if cancellation was requested.

        Returns:
            True if the solver should stop
        """
        return self.cancel_flag.is_set()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self.cancel_flag.set()

    @property
    def backtrack_delay_ms(self) -> int:
        """Pause used after removing a digit."""
        return self.delay_ms // 2

    def pause(self, milliseconds: int) -> bool:
        """
        Sleep for the given time, waking early if cancelled.

        Args:
            milliseconds: Requested pause; <= 0 returns immediately

        Returns:
            True if cancellation is set when the pause ends
        """
        if milliseconds <= 0:
            return self.cancel_flag.is_set()
        return self.cancel_flag.wait(milliseconds / 1000.0)

    def elapsed_ms(self) -> float:
        """
        Get milliseconds elapsed since the run started.

        Returns:
            Elapsed time in milliseconds
        """
        return (time.perf_counter() - self.start_time) * 1000
