"""
Step Event Module - One observable action of a running solve.
"""

from dataclasses import dataclass
from enum import Enum, auto


class StepKind(Enum):
    """
    Kind of solver action.

    States:
        TRYING: Candidate digit placed, search about to descend
        ACCEPTED: Digit is part of the found solution
        BACKTRACK: Digit failed below and was removed again
    """
    TRYING = auto()
    ACCEPTED = auto()
    BACKTRACK = auto()


@dataclass(frozen=True)
class StepEvent:
    """
    Single solver step delivered to a StepObserver.

    Attributes:
        row: Row index 0-8
        col: Column index 0-8
        digit: Digit tried, accepted or removed
        kind: What happened to the digit
    """
    row: int
    col: int
    digit: int
    kind: StepKind

    @property
    def cell(self):
        """(row, col) tuple."""
        return (self.row, self.col)

    def __str__(self):
        return f"{self.kind.name} {self.digit} at ({self.row},{self.col})"
