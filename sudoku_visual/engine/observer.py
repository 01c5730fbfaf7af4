"""
Step Observer Module - Reporting contract between the Solver and a display.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from .events import StepEvent

logger = logging.getLogger(__name__)


class StepObserver(ABC):
    """
    Abstract receiver of solver steps.

    on_step() is called synchronously on the solver thread, in search
    order, and must return promptly. Exceptions it raises are logged by
    the Solver and never affect the search.
    """

    @abstractmethod
    def on_step(self, event: StepEvent) -> None:
        """
        Receive one solver step.

        Args:
            event: The step that just happened
        """
        pass

    def displayed_value(self, row: int, col: int) -> Optional[int]:
        """
        Value the observer currently shows at (row, col), if it tracks one.

        Advisory only: the Solver logs a warning when this disagrees with
        its own board and carries on with its own board.

        Returns:
            Displayed digit, 0 for blank, or None if unknown
        """
        return None


class NullObserver(StepObserver):
    """Observer that ignores every step."""

    def on_step(self, event: StepEvent) -> None:
        pass


class LoggingObserver(StepObserver):
    """Writes each step to the log at DEBUG level."""

    def __init__(self, name: str = __name__):
        self._logger = logging.getLogger(name)

    def on_step(self, event: StepEvent) -> None:
        self._logger.debug(f"Step: {event}")


class RecordingObserver(StepObserver):
    """
    Keeps every received step in arrival order.

    Safe to read from another thread while the solve is running.
    """

    def __init__(self):
        self._events: List[StepEvent] = []
        self._lock = threading.Lock()

    def on_step(self, event: StepEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> List[StepEvent]:
        """Snapshot of the recorded steps."""
        with self._lock:
            return list(self._events)

    def __len__(self):
        with self._lock:
            return len(self._events)
