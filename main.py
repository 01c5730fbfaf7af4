"""
Sudoku Visual Solver - Entry Point

Generates a puzzle, shows it, then solves it on the background solver
thread while tracing each step to the log.

Example:
    python main.py
    python main.py --remove 50 --delay 0
    python main.py --delay 50 --cancel-after 200 -v   # Stop mid-solve
"""

import sys
import logging
import argparse
import random
from typing import Optional

from sudoku_visual import SolveController, check, new_puzzle
from sudoku_visual.engine import Grid, LoggingObserver
from sudoku_visual.settings import (
    load_settings,
    normalize_cells_to_remove,
    normalize_delay_ms,
    save_settings,
)


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Log to both console and file; DEBUG shows every solver step."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Console application controller.

    Owns the current puzzle/solution pair and the SolveController,
    the way a GUI front end would.
    """

    def __init__(self, cells_to_remove: int, delay_ms: int, stop_timeout_ms: int,
                 seed: Optional[int] = None):
        """
        Initialize the application.

        Args:
            cells_to_remove: Difficulty, cells blanked per puzzle
            delay_ms: Pause per solver placement
            stop_timeout_ms: Bounded wait when stopping the solver
            seed: Optional random seed for reproducible puzzles
        """
        self.cells_to_remove = normalize_cells_to_remove(cells_to_remove)
        self.delay_ms = normalize_delay_ms(delay_ms)
        self.rng = random.Random(seed)
        self.controller = SolveController(stop_timeout_ms=stop_timeout_ms)
        self.puzzle: Optional[Grid] = None
        self.solution: Optional[Grid] = None

    def new_game(self) -> None:
        """Stop any running solve and generate a fresh puzzle."""
        if self.controller.is_running():
            self.controller.stop()
        self.puzzle, self.solution = new_puzzle(self.cells_to_remove, self.rng)
        print(self.puzzle.render())
        print()

    def solve(self, cancel_after_ms: Optional[int] = None) -> int:
        """
        Solve the current puzzle, optionally stopping after a while.

        Args:
            cancel_after_ms: Stop the solver after this many milliseconds

        Returns:
            Exit code
        """
        observer = LoggingObserver("sudoku_visual.trace")
        handle = self.controller.start(self.puzzle, self.delay_ms, observer)

        if cancel_after_ms is not None:
            if not handle.wait(cancel_after_ms / 1000.0):
                self.controller.stop(handle)
        handle.wait()

        result = handle.result
        if result is None:
            logger.error("Solver exited without a result")
            return 1

        print(self.puzzle.render())
        print()
        metrics = result.metrics
        print(f"Outcome: {result.outcome.value} "
              f"({metrics.placements} placements, {metrics.backtracks} backtracks, "
              f"{metrics.computation_time_ms:.0f}ms)")

        answer = check(self.puzzle, self.solution)
        if answer.correct:
            print("Board matches the stored solution")
        else:
            print(f"Board differs from the stored solution in {len(answer.mismatches)} cells")
        return 0


def parse_args():
    """Parse command line arguments. Unset values come from config.json."""
    parser = argparse.ArgumentParser(
        description="Sudoku Visual Solver - generate a puzzle and watch it being solved"
    )
    parser.add_argument(
        "--remove", "-r",
        type=int,
        default=None,
        help="Cells to remove, 0-81 (default: from config.json)"
    )
    parser.add_argument(
        "--delay", "-d",
        type=int,
        default=None,
        help="Pause per solver step in ms, 0 for full speed (default: from config.json)"
    )
    parser.add_argument(
        "--cancel-after",
        type=int,
        default=None,
        help="Stop the solver after this many ms"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible puzzle"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every solver step"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Store --remove and --delay in config.json"
    )
    return parser.parse_args()


def main():
    """Initialize and run the Sudoku Visual Solver."""
    args = parse_args()
    configure_logging(args.verbose)

    # Loaded after logging is configured so config warnings reach solver.log
    settings = load_settings()
    if args.remove is None:
        args.remove = settings["cells_to_remove"]
    if args.delay is None:
        args.delay = settings["delay_ms"]
    args.stop_timeout_ms = settings["stop_timeout_ms"]

    application = Application(
        cells_to_remove=args.remove,
        delay_ms=args.delay,
        stop_timeout_ms=args.stop_timeout_ms,
        seed=args.seed,
    )

    if args.save_settings:
        save_settings({
            "cells_to_remove": application.cells_to_remove,
            "delay_ms": application.delay_ms,
            "stop_timeout_ms": args.stop_timeout_ms,
        })

    application.new_game()
    sys.exit(application.solve(cancel_after_ms=args.cancel_after))


if __name__ == "__main__":
    main()
