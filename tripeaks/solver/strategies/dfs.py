"""
Depth-First Search Strategy - Bounded anytime search for a full clear.

Explores the move graph depth first in heuristic order, skipping states
whose signature was already seen, and keeps the best solution found so
far. When no clear is reachable within the budget the best partial
clear is returned instead.

Search loop per state:
    1. Stop if cancelled, over the iteration cap, or already visited
    2. Record a win (fewer moves replaces the current best)
    3. Prune if the best result already uses no more moves than this path
    4. Try ranked card plays; stop at the first win
    5. Draw from stock when no card can be played
    6. Record partial progress if it clears more cards than the best
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..move import DRAW, Move
from ..solution import Solution, SolutionMetrics
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@dataclass
class SearchSession:
    """
    Mutable search state owned by a single solve call.

    Attributes:
        visited: Signatures of states already explored
        best: Best solution found so far, or None
        states_explored: Distinct states explored
        max_depth_reached: Deepest recursion level reached
        pruned_branches: Branches cut by the move-count bound
        was_cancelled: True once the context reported cancellation
    """
    visited: Set[str] = field(default_factory=set)
    best: Optional[Solution] = None
    states_explored: int = 0
    max_depth_reached: int = 0
    pruned_branches: int = 0
    was_cancelled: bool = False

    def record_win(self, solution: Solution) -> None:
        if self.best is None or solution.move_count < self.best.move_count:
            self.best = solution

    def record_partial(self, solution: Solution) -> None:
        if self.best is None or solution.cards_cleared > self.best.cards_cleared:
            self.best = solution

    @property
    def found_win(self) -> bool:
        return self.best is not None and self.best.success


@register_strategy
class DepthFirstStrategy(SolverStrategy):
    """
    Memoized depth-first search with heuristic move ordering.

    The first full clear found under the move ordering is accepted; it
    is not guaranteed to be the shortest one. Output is deterministic for
    a given board and budget as long as the time budget does not cut the
    search short.
    """
    name = "dfs"
    description = "Depth-first search (thorough) - Heuristic DFS with state memo"
    timeout_sec = 5.0

    def solve(self, context: SolutionContext,
              session: Optional[SearchSession] = None) -> Solution:
        """
        Search for a clearing sequence.

        Args:
            context: Solution context with board, budgets and cancellation
            session: Session to record into. Pass one to read the best
                     result from another thread while the search runs.

        Returns:
            Best solution found, or the empty solution if none was recorded
        """
        start_time = time.perf_counter()
        if session is None:
            session = SearchSession()

        logger.info(
            f"[DFS] Solving: {context.board.cards_remaining} cards, "
            f"stock {context.board.stock_size}, cap {context.max_iterations} states, "
            f"{context.timeout_sec:.1f}s"
        )

        self._explore(session, context, context.board, (), 0)

        solution = self.build_solution(session, start_time)
        if session.was_cancelled:
            logger.warning(
                f"[DFS] Time budget reached after {session.states_explored} states, "
                f"returning best so far"
            )
        logger.info(
            f"[DFS] Finished: success={solution.success}, {solution.move_count} moves, "
            f"{solution.cards_cleared} cleared, {session.states_explored} states, "
            f"depth {session.max_depth_reached}"
        )
        return solution

    def _explore(self, session: SearchSession, context: SolutionContext,
                 board: BoardState, moves_so_far: Tuple[Move, ...], depth: int) -> None:
        """Recursive step. Results land in session.best."""
        if context.is_cancelled():
            session.was_cancelled = True
            return
        if len(session.visited) > context.max_iterations:
            return

        signature = board.to_hash()
        if signature in session.visited:
            return
        session.visited.add(signature)
        session.states_explored += 1
        session.max_depth_reached = max(session.max_depth_reached, depth)

        if board.is_win():
            session.record_win(Solution.create(moves_so_far, True, board.total_cards))
            return

        # Bound also applies to partial results
        if session.best is not None and session.best.move_count <= len(moves_so_far):
            session.pruned_branches += 1
            return

        card_moves = self.find_legal_moves(board)
        for move, next_board in card_moves:
            self._explore(session, context, next_board, moves_so_far + (move,), depth + 1)
            if session.found_win:
                return
            if session.was_cancelled:
                break

        if not card_moves and board.stock and not session.was_cancelled:
            self._explore(session, context, board.draw_from_stock(),
                          moves_so_far + (DRAW,), depth + 1)
            if session.found_win:
                return

        # Unwinding after a cancel still records this node's progress
        session.record_partial(Solution.create(moves_so_far, False, board.cards_cleared))

    def build_solution(self, session: SearchSession, start_time: float) -> Solution:
        """Attach metrics to the session's best result."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        best = session.best if session.best is not None else Solution.empty()

        return Solution(
            moves=best.moves,
            success=best.success,
            cards_cleared=best.cards_cleared,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=session.states_explored,
                max_depth_reached=session.max_depth_reached,
                pruned_branches=session.pruned_branches,
                was_cancelled=session.was_cancelled,
                strategy_name=self.name,
            )
        )
