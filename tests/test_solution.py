"""
Tests for Solution reporting and CachedSolution playback.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tripeaks.solver import (
    CachedSolution,
    Solution,
    SolutionMetrics,
    build_board,
    solve,
)


def _solved():
    board = build_board([[["5C"], ["6D", "7H"]]], waste=["8S"])
    return board, solve(board)


def test_empty_solution():
    empty = Solution.empty()
    assert empty.moves == ()
    assert not empty.success
    assert empty.cards_cleared == 0
    assert empty.move_count == 0
    assert not empty.has_moves


def test_metrics_do_not_affect_equality():
    a = Solution.create([], False, 0)
    b = Solution(metrics=SolutionMetrics(states_explored=99))
    assert a == b


def test_format():
    _, solution = _solved()
    assert solution.format().splitlines() == [
        "=== SOLUTION ===",
        "Success: True",
        "Cards Cleared: 3",
        "Total Moves: 3",
        "",
        "Moves:",
        "  1. Play 7♥ on 8♠",
        "  2. Play 6♦ on 7♥",
        "  3. Play 5♣ on 6♦",
    ]
    assert str(solution) == solution.format()


def test_replay():
    board, solution = _solved()
    states = solution.replay(board)
    assert len(states) == 4
    assert states[0] is board
    assert [s.cards_remaining for s in states] == [3, 2, 1, 0]
    assert states[-1].is_win()


def test_playback_cursor():
    board, solution = _solved()
    cached = CachedSolution(solution=solution, initial_board=board)

    assert cached.total_moves == 3
    assert cached.moves_remaining == 3
    assert cached.current_move == solution.moves[0]
    assert cached.peek_moves(2) == list(solution.moves[:2])
    assert cached.expected_board_before is board

    assert cached.advance() == solution.moves[0]
    assert cached.moves_remaining == 2
    assert cached.peek_moves(5) == list(solution.moves[1:])

    cached.advance()
    cached.advance()
    assert cached.is_exhausted
    assert cached.current_move is None
    assert cached.advance() is None
    assert cached.expected_board_after is None
    assert cached.age_seconds >= 0


def test_validate_board_match():
    board, solution = _solved()
    cached = CachedSolution(solution=solution, initial_board=board)

    played = board.apply_move(solution.moves[0])
    assert cached.validate_board_match(played)
    assert not cached.validate_board_match(board)

    # Same layout rebuilt from text is the same state
    rebuilt = build_board([[["5C"], ["6D", None]]], waste=["8S", "7H"])
    assert cached.validate_board_match(rebuilt)
