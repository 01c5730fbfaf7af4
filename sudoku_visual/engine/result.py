"""
Solve Result Module - Terminal outcome and statistics of a solve run.
"""

from dataclasses import dataclass, field
from enum import Enum


class SolveOutcome(Enum):
    """
    How a solve run ended.

    States:
        SOLVED: Every originally empty cell holds a valid digit
        CANCELLED: Stopped on request; partial placements remain
        UNSOLVABLE: Search exhausted without a completion
    """
    SOLVED = "solved"
    CANCELLED = "cancelled"
    UNSOLVABLE = "unsolvable"


@dataclass
class SolveMetrics:
    """
    Statistics for one solve run.

    Attributes:
        events_emitted: StepEvents delivered to the observer
        placements: Candidate digits placed (TRYING events)
        backtracks: Digits removed after failing (BACKTRACK events)
        observer_errors: Exceptions raised by the observer and swallowed
        computation_time_ms: Wall time of the run, pauses included
    """
    events_emitted: int = 0
    placements: int = 0
    backtracks: int = 0
    observer_errors: int = 0
    computation_time_ms: float = 0.0


@dataclass
class SolveResult:
    """
    Result of a solve run.

    Attributes:
        outcome: Terminal state of the run
        metrics: Performance statistics
    """
    outcome: SolveOutcome
    metrics: SolveMetrics = field(default_factory=SolveMetrics)

    @property
    def solved(self) -> bool:
        """True if the run reached a full solution."""
        return self.outcome is SolveOutcome.SOLVED

    @property
    def was_cancelled(self) -> bool:
        """True if the run stopped on a cancellation request."""
        return self.outcome is SolveOutcome.CANCELLED
