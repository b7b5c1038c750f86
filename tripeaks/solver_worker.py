"""
Solver Worker Module for TriPeaks Solver

Provides a background QThread worker that runs one solve off the UI
thread. Communicates results via Qt signals for thread-safe updates.
"""

import logging
import threading
from typing import Optional

from PyQt5.QtCore import QThread, pyqtSignal

from tripeaks.solver import (
    BoardState,
    SolutionContext,
    SolverStrategy,
    create_strategy,
    get_default_strategy_name,
)
from tripeaks.solver.context import DEFAULT_MAX_ITERATIONS


# Configure module logger
logger = logging.getLogger(__name__)


class SolverWorker(QThread):
    """
    Background worker thread for a single solve.

    Runs the selected strategy against a board under the configured
    budgets and reports the result.

    Signals:
        status_changed(str): Emitted when worker status changes
        solution_ready(object): Emitted with the Solution when done
        stats_ready(object): Emitted with the SolutionMetrics when done
        error_occurred(str): Emitted when the solve raises

    Example:
        worker = SolverWorker(board, strategy_name="dfs", time_budget=2.0)
        worker.solution_ready.connect(ui.show_solution)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    # Signals for UI updates (thread-safe)
    status_changed = pyqtSignal(str)
    solution_ready = pyqtSignal(object)
    stats_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(self, board: BoardState, strategy_name: Optional[str] = None,
                 max_iterations: int = DEFAULT_MAX_ITERATIONS,
                 time_budget: Optional[float] = None):
        """
        Initialize the solver worker.

        Args:
            board: Board to solve
            strategy_name: Registered strategy name (default: registry default)
            max_iterations: Cap on distinct states visited
            time_budget: Cap on wall-clock seconds (default: the strategy's
                         own timeout_sec)
        """
        super().__init__()
        self.board = board
        self.max_iterations = max_iterations
        self._strategy: SolverStrategy = create_strategy(strategy_name or get_default_strategy_name())
        self.time_budget = time_budget if time_budget is not None else self._strategy.timeout_sec
        self._cancel_flag = threading.Event()
        self._running = False

    @property
    def strategy_name(self) -> str:
        return self._strategy.name

    def run(self):
        """
        Worker body. Called when thread starts.

        Builds a fresh context, solves, and emits the result. Errors are
        logged and reported through error_occurred.
        """
        self._running = True
        logger.info(f"Solver worker started ({self._strategy.name})")
        self.status_changed.emit("Computing")

        try:
            context = SolutionContext(
                board=self.board,
                cancel_flag=self._cancel_flag,
                timeout_sec=self.time_budget,
                max_iterations=self.max_iterations,
                progress_callback=self._on_progress,
            )
            solution = self._strategy.solve(context)
        except Exception as e:
            logger.exception("Error in solver worker")
            self.error_occurred.emit(str(e))
            self.status_changed.emit("Error")
        else:
            self.solution_ready.emit(solution)
            self.stats_ready.emit(solution.metrics)
            if solution.success:
                self.status_changed.emit(f"Solved ({solution.move_count} moves)")
            else:
                self.status_changed.emit(f"Partial ({solution.cards_cleared} cleared)")
        finally:
            self._running = False
            logger.info("Solver worker stopped")

    def _on_progress(self, percent: float, message: str) -> None:
        self.status_changed.emit(f"{percent * 100:.0f}% {message}")

    def request_stop(self):
        """
        Ask the running solve to stop.

        The strategy returns its best result so far at its next check.
        Use wait() after calling this to block until stopped.
        """
        logger.info("Stop requested")
        self._cancel_flag.set()

    def is_running(self) -> bool:
        """True while the solve is in progress."""
        return self._running
