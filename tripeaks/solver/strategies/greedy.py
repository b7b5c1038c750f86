"""
Greedy Strategy - Always plays the highest-ranked card, drawing when stuck.
"""

import time
import logging
from typing import List

from ..base import SolverStrategy
from ..context import SolutionContext
from ..move import DRAW, Move
from ..solution import Solution, SolutionMetrics
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class GreedyStrategy(SolverStrategy):
    """
    Greedy strategy that follows a single line of play.

    Plays the top-ranked card each turn and draws from the stock when no
    card fits. No backtracking, so it is instant but often stops short of
    a full clear. Useful as a baseline against the depth-first search.
    """
    name = "greedy"
    description = "Greedy (instant) - Plays the best-ranked card each turn"
    timeout_sec = 1.0

    def solve(self, context: SolutionContext) -> Solution:
        """
        Play out one line greedily.

        Args:
            context: Solution context with board and cancellation

        Returns:
            Solution with moves and metrics
        """
        start_time = time.perf_counter()

        board = context.board
        moves: List[Move] = []
        states_explored = 1
        was_cancelled = False

        while not board.is_win():
            if self._check_cancelled(context):
                was_cancelled = True
                break

            best = self.find_best_move(board)
            if best is not None:
                move, board = best
            elif board.stock:
                move, board = DRAW, board.draw_from_stock()
            else:
                break

            moves.append(move)
            states_explored += 1
            logger.debug(f"[Greedy] Move {len(moves)}: {move}")

            if board.total_cards > 0:
                context.report_progress(
                    min(0.99, board.cards_cleared / board.total_cards),
                    f"{len(moves)} moves, {board.cards_cleared} cards cleared"
                )

        logger.info(
            f"[Greedy] Solution complete: {len(moves)} moves, "
            f"{board.cards_cleared} cleared, win={board.is_win()}"
        )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        return Solution(
            moves=tuple(moves),
            success=board.is_win(),
            cards_cleared=board.cards_cleared,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                max_depth_reached=len(moves),
                pruned_branches=0,
                was_cancelled=was_cancelled,
                strategy_name=self.name
            )
        )
