"""
Solution Module - Result of strategy computation and cached solution playback.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .board import BoardState
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of distinct board states visited
        max_depth_reached: Deepest recursion level reached
        pruned_branches: Number of branches cut by the move-count bound
        was_cancelled: True if the time budget or a stop request ended the search
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    max_depth_reached: int = 0
    pruned_branches: int = 0
    was_cancelled: bool = False
    strategy_name: str = ""


@dataclass(frozen=True)
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        moves: Ordered moves to play
        success: True only if the moves clear the whole tableau
        cards_cleared: Tableau cards cleared after playing the moves
        metrics: Performance statistics (not part of equality)
    """
    moves: Tuple[Move, ...] = ()
    success: bool = False
    cards_cleared: int = 0
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics, compare=False)

    @classmethod
    def create(cls, moves: Sequence[Move], success: bool, cards_cleared: int) -> 'Solution':
        return cls(moves=tuple(moves), success=success, cards_cleared=cards_cleared)

    @classmethod
    def empty(cls) -> 'Solution':
        """The 'no progress' result."""
        return cls()

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        return len(self.moves) > 0

    def replay(self, board: BoardState) -> List[BoardState]:
        """
        Apply the moves to a board.

        Args:
            board: Board the solution was computed for

        Returns:
            Board states, first is the input, then one per move
        """
        states = [board]
        for move in self.moves:
            board = board.apply_move(move)
            states.append(board)
        return states

    def format(self) -> str:
        """Multi-line report for logs and the CLI."""
        lines = [
            "=== SOLUTION ===",
            f"Success: {self.success}",
            f"Cards Cleared: {self.cards_cleared}",
            f"Total Moves: {self.move_count}",
            "",
            "Moves:",
        ]
        lines.extend(f"  {i + 1}. {move}" for i, move in enumerate(self.moves))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()


@dataclass
class CachedSolution:
    """
    Solution with a playback cursor and expected board states.

    Tracks progress through the move sequence so a playback layer can
    replay moves one at a time and notice when the observed game no
    longer matches what the solution expects.

    Attributes:
        solution: The computed solution
        initial_board: Board the solution was computed for
        move_index: Current position in move sequence (0 = first move)
        created_at: Timestamp for cache staleness detection
    """
    solution: Solution
    initial_board: BoardState
    move_index: int = 0
    created_at: float = field(default_factory=time.perf_counter)
    board_states: List[BoardState] = field(init=False, repr=False)

    def __post_init__(self):
        self.board_states = self.solution.replay(self.initial_board)

    @property
    def current_move(self) -> Optional[Move]:
        """Get next move to play, or None if exhausted."""
        if self.move_index < len(self.solution.moves):
            return self.solution.moves[self.move_index]
        return None

    @property
    def expected_board_before(self) -> Optional[BoardState]:
        """Expected board state before current move executes."""
        if self.move_index < len(self.board_states):
            return self.board_states[self.move_index]
        return None

    @property
    def expected_board_after(self) -> Optional[BoardState]:
        """Expected board state after current move executes."""
        if self.move_index + 1 < len(self.board_states):
            return self.board_states[self.move_index + 1]
        return None

    @property
    def is_exhausted(self) -> bool:
        """True if all moves have been consumed."""
        return self.move_index >= len(self.solution.moves)

    @property
    def moves_remaining(self) -> int:
        return max(0, len(self.solution.moves) - self.move_index)

    @property
    def total_moves(self) -> int:
        return len(self.solution.moves)

    @property
    def age_seconds(self) -> float:
        """Time since cache was created."""
        return time.perf_counter() - self.created_at

    def advance(self) -> Optional[Move]:
        """
        Move to next move in sequence.

        Returns:
            The move that was just completed, or None if exhausted
        """
        if self.is_exhausted:
            return None
        completed_move = self.current_move
        self.move_index += 1
        return completed_move

    def peek_moves(self, count: int = 3) -> List[Move]:
        """
        Preview upcoming moves without advancing.

        Args:
            count: Number of moves to preview

        Returns:
            List of upcoming moves (may be shorter than count)
        """
        start = self.move_index
        end = min(start + count, len(self.solution.moves))
        return list(self.solution.moves[start:end])

    def validate_board_match(self, observed: BoardState) -> bool:
        """
        Check if an observed board matches the expected board after the
        current move.

        Compares search signatures, so two boards that the solver would
        treat as the same state match.

        Args:
            observed: Board read back from the game

        Returns:
            True if boards match
        """
        expected = self.expected_board_after
        if expected is None:
            return False
        return observed.to_hash() == expected.to_hash()
