"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .board import BoardState
from .context import SolutionContext
from .generator import find_legal_moves
from .move import PlayCard
from .solution import Solution


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
        timeout_sec: Time budget a worker uses when none is given
    """
    name: str = "base"
    description: str = "Base strategy"
    timeout_sec: float = 5.0

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute solution for the given board state.

        Must periodically check context.is_cancelled() and return the
        best solution known so far if True.

        Args:
            context: Solution context with board, budgets, cancellation

        Returns:
            Solution with moves and metrics
        """
        pass

    def find_legal_moves(self, board: BoardState) -> List[Tuple[PlayCard, BoardState]]:
        """
        Find card plays in the order this strategy tries them.

        Args:
            board: Current board state

        Returns:
            List of (move, resulting board) pairs, best first
        """
        return find_legal_moves(board, ranked=True)

    def find_best_move(self, board: BoardState) -> Optional[Tuple[PlayCard, BoardState]]:
        """
        Find the single highest-ranked card play.

        Returns:
            (move, resulting board), or None if no card can be played
        """
        moves = self.find_legal_moves(board)
        return moves[0] if moves else None

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """Convenience method to check cancellation."""
        return context.is_cancelled()
