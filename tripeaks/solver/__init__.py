"""
Solver Package - Search engine for TriPeaks solitaire.

Finds a move sequence that clears (or maximally reduces) a three-pyramid
TriPeaks tableau. A card may be played onto the waste if its rank is one
above or below the waste top.

Public API:
    - Card, Rank, Suit, Position: Card value types
    - BoardState: Immutable board representation
    - PlayCard, DrawFromStock, Move: Move sum type
    - Solution, SolutionMetrics, CachedSolution: Results and playback
    - SolutionContext: Budgets and cancellation for strategies
    - find_legal_moves(), score_play(): Move generator
    - TriPeaksSolver, solve(), SearchStats: Time-boxed driver
    - SolverStrategy, create_strategy(), ...: Strategy framework
    - build_board(), standard_board(), create_test_board(): Board builders

Usage:
    from tripeaks.solver import create_test_board, solve

    board = create_test_board()
    solution = solve(board, max_iterations=10000, time_budget=5.0)

    for move in solution.moves:
        print(move)
"""

# Core data structures
from .card import Card, CardParseError, Position, Rank, Suit, parse_card
from .board import BoardState
from .move import DRAW, DrawFromStock, Move, PlayCard
from .solution import CachedSolution, Solution, SolutionMetrics
from .context import SolutionContext
from .generator import find_legal_moves, score_play

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .driver import SearchStats, TriPeaksSolver, solve
from .layouts import STANDARD_ROW_SIZES, build_board, create_test_board, standard_board

__all__ = [
    # Data structures
    "Card",
    "CardParseError",
    "Position",
    "Rank",
    "Suit",
    "parse_card",
    "BoardState",
    "DRAW",
    "DrawFromStock",
    "Move",
    "PlayCard",
    "Solution",
    "SolutionMetrics",
    "CachedSolution",
    "SolutionContext",
    "find_legal_moves",
    "score_play",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    # Driver
    "SearchStats",
    "TriPeaksSolver",
    "solve",
    # Layouts
    "STANDARD_ROW_SIZES",
    "build_board",
    "create_test_board",
    "standard_board",
]
