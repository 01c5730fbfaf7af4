"""
Tests for SolveController lifecycle on the background thread.

Covers:
1. Full-speed solve of a 40-hole puzzle
2. AlreadyRunning and stop()/is_running()
3. Early stop with a slow delay
4. Bounded stop when the solver is stuck in the observer
5. Fresh runs after completed and cancelled solves
"""

import logging
import random
import threading
import time

import pytest

from sudoku_visual import AlreadyRunning, SolveController, SolveOutcome, new_puzzle
from sudoku_visual.engine import RecordingObserver


class BlockingObserver(RecordingObserver):
    """Holds the solver thread inside on_step until released."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def on_step(self, event):
        super().on_step(event)
        self.entered.set()
        self.release.wait(10)


def test_solve_forty_hole_puzzle_at_full_speed():
    """40 holes leave 41 clues; delay 0 runs to SOLVED."""
    puzzle, solution = new_puzzle(40, random.Random(7))
    assert puzzle.filled_count() == 41

    controller = SolveController()
    observer = RecordingObserver()
    handle = controller.start(puzzle, 0, observer)

    assert handle.wait(60)
    assert handle.done
    assert handle.result.outcome is SolveOutcome.SOLVED
    assert puzzle.is_complete()
    assert not controller.is_running()
    assert len(observer) == handle.result.metrics.events_emitted


def test_stop_shortly_after_start_cancels():
    """stop() 5 ms into a 50 ms-per-step solve reports CANCELLED with few new digits."""
    puzzle, _solution = new_puzzle(40, random.Random(17))
    controller = SolveController()
    observer = RecordingObserver()

    controller.start(puzzle, 50, observer)
    time.sleep(0.005)
    result = controller.stop()

    assert result is not None
    assert result.outcome is SolveOutcome.CANCELLED
    assert puzzle.filled_count() <= 41 + 3
    assert not controller.is_running()

    # No events after the terminal result
    seen = len(observer)
    time.sleep(0.1)
    assert len(observer) == seen


def test_start_while_running_raises():
    """A second start() before the first run ends raises AlreadyRunning."""
    puzzle, _solution = new_puzzle(50, random.Random(5))
    controller = SolveController()

    handle = controller.start(puzzle, 200)
    assert controller.is_running()

    with pytest.raises(AlreadyRunning):
        controller.start(puzzle.copy(), 0)

    result = controller.stop(handle)
    assert result.was_cancelled
    assert not controller.is_running()


def test_stop_is_bounded_when_solver_is_stuck(caplog):
    """If the solver does not exit in time, stop() warns and returns anyway."""
    puzzle, _solution = new_puzzle(40, random.Random(2))
    controller = SolveController(stop_timeout_ms=50)
    observer = BlockingObserver()

    handle = controller.start(puzzle, 0, observer)
    assert observer.entered.wait(5)

    with caplog.at_level(logging.WARNING, logger="sudoku_visual.solve_controller"):
        started = time.perf_counter()
        result = controller.stop()
        elapsed = time.perf_counter() - started

    assert result is None
    assert elapsed < 2.0
    assert controller.is_running()
    assert any("did not stop" in r.getMessage() for r in caplog.records)

    observer.release.set()
    assert handle.wait(5)
    assert handle.result.was_cancelled
    assert not controller.is_running()


def test_on_finished_runs_after_last_event():
    """on_finished sees the final result and every step already delivered."""
    puzzle, _solution = new_puzzle(35, random.Random(12))
    controller = SolveController()
    observer = RecordingObserver()
    finished = []

    def on_finished(result):
        finished.append((result, len(observer)))

    handle = controller.start(puzzle, 0, observer, on_finished)
    assert handle.wait(60)

    assert len(finished) == 1
    result, seen = finished[0]
    assert result is handle.result
    assert seen == result.metrics.events_emitted


def test_fresh_run_after_cancel_and_after_completion():
    """New puzzles after a cancelled or finished run solve independently."""
    rng = random.Random(31)
    controller = SolveController()

    puzzle, _solution = new_puzzle(40, rng)
    controller.start(puzzle, 100)
    assert controller.stop().was_cancelled

    fresh, fresh_solution = new_puzzle(40, rng)
    assert fresh is not puzzle
    assert fresh.filled_count() == 41
    handle = controller.start(fresh, 0)
    assert handle.wait(60)
    assert handle.result.solved

    again, _ = new_puzzle(40, rng)
    handle = controller.start(again, 0)
    assert handle.wait(60)
    assert handle.result.solved
    assert fresh_solution.is_complete()


def test_stop_without_run_returns_none():
    """stop() with nothing started is a logged no-op."""
    controller = SolveController()
    assert controller.stop() is None
    assert not controller.is_running()


def test_negative_delay_runs_at_full_speed():
    """A negative delay is treated as zero."""
    puzzle, _solution = new_puzzle(30, random.Random(3))
    controller = SolveController()
    handle = controller.start(puzzle, -20)
    assert handle.wait(60)
    assert handle.result.solved


def test_stop_from_finished_callback_returns_immediately(caplog):
    """stop() called on the solver thread does not wait on itself."""
    puzzle, _solution = new_puzzle(30, random.Random(8))
    controller = SolveController(stop_timeout_ms=2000)
    stopped = []

    def on_finished(result):
        started = time.perf_counter()
        stopped.append((controller.stop(), time.perf_counter() - started))

    with caplog.at_level(logging.WARNING, logger="sudoku_visual.solve_controller"):
        handle = controller.start(puzzle, 0, on_finished=on_finished)
        assert handle.wait(60)

    result, elapsed = stopped[0]
    assert result is handle.result
    assert elapsed < 1.0
    assert not any("did not stop" in r.getMessage() for r in caplog.records)
