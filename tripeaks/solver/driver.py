"""
Solver Driver Module - Runs a search under a wall-clock budget.

The search runs in a worker thread. The driver waits up to the time
budget, then sets the context's cancel flag and waits for the search to
unwind. The search also checks the deadline itself once per state, so
it stops promptly either way. Whatever the session holds at that point
is the answer.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .board import BoardState
from .context import DEFAULT_MAX_ITERATIONS, DEFAULT_TIME_BUDGET_SEC, SolutionContext
from .solution import Solution
from .strategies.dfs import DepthFirstStrategy, SearchSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchStats:
    """
    Read-only snapshot of the last search session.

    Attributes:
        states_visited: Distinct states recorded as visited
        max_depth: Deepest recursion level reached
        has_solution: True if any result (win or partial) was recorded
        solution_moves: Move count of that result, 0 if none
    """
    states_visited: int = 0
    max_depth: int = 0
    has_solution: bool = False
    solution_moves: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "statesVisited": self.states_visited,
            "maxDepth": self.max_depth,
            "hasSolution": self.has_solution,
            "solutionMoves": self.solution_moves,
        }


class TriPeaksSolver:
    """
    Depth-first TriPeaks solver with a time budget.

    Each solve() call starts a fresh session; calls on one instance are
    serialised, separate instances share nothing.

    Example:
        solver = TriPeaksSolver()
        solution = solver.solve(board, max_iterations=5000, time_budget=2.0)
        print(solution.format())
        print(solver.get_stats())
    """

    def __init__(self, strategy: Optional[DepthFirstStrategy] = None):
        self._strategy = strategy or DepthFirstStrategy()
        self._lock = threading.Lock()
        self._session = SearchSession()
        self._context: Optional[SolutionContext] = None

    def solve(self, initial_board: BoardState,
              max_iterations: int = DEFAULT_MAX_ITERATIONS,
              time_budget: float = DEFAULT_TIME_BUDGET_SEC) -> Solution:
        """
        Search for a clearing sequence within the given budgets.

        Args:
            initial_board: Board to solve
            max_iterations: Cap on distinct states visited
            time_budget: Cap on wall-clock seconds

        Returns:
            Best solution found. Solution.empty() if nothing was recorded.

        Raises:
            ValueError: If a budget is not positive
        """
        if max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        if time_budget <= 0:
            raise ValueError(f"time_budget must be positive, got {time_budget}")

        with self._lock:
            session = SearchSession()
            context = SolutionContext(
                board=initial_board,
                timeout_sec=time_budget,
                max_iterations=max_iterations,
            )
            self._session = session
            self._context = context

            result: Dict[str, Any] = {}

            def run():
                try:
                    result["solution"] = self._strategy.solve(context, session)
                except Exception as e:
                    result["error"] = e

            worker = threading.Thread(target=run, name="tripeaks-search", daemon=True)
            worker.start()
            worker.join(time_budget)

            if worker.is_alive():
                logger.warning(f"Search exceeded {time_budget:.2f}s budget, cancelling")
                context.cancel()
                worker.join()

            self._context = None

            if "error" in result:
                raise result["error"]
            return result["solution"]

    def cancel(self) -> None:
        """Stop the in-flight solve early. It still returns its best result."""
        context = self._context
        if context is not None:
            context.cancel()

    def get_stats(self) -> SearchStats:
        """
        Counters from the most recent solve() call.

        Waits for an in-flight solve on this instance to finish first.
        """
        with self._lock:
            session = self._session
        return SearchStats(
            states_visited=len(session.visited),
            max_depth=session.max_depth_reached,
            has_solution=session.best is not None,
            solution_moves=session.best.move_count if session.best is not None else 0,
        )


def solve(initial_board: BoardState,
          max_iterations: int = DEFAULT_MAX_ITERATIONS,
          time_budget: float = DEFAULT_TIME_BUDGET_SEC) -> Solution:
    """Solve with a throwaway TriPeaksSolver. See TriPeaksSolver.solve."""
    return TriPeaksSolver().solve(initial_board, max_iterations, time_budget)
