"""
Move Generator Module - Legal card plays and their heuristic ranking.
"""

from typing import List, Tuple

from .board import BoardState
from .card import Card
from .move import PlayCard

# Heuristic weights
APEX_BONUS = 100
EXPOSE_BONUS = 50
SAFE_RANK_BONUS = 20
PYRAMID_BONUS = 5

# Ranks worth playing early; extreme ranks strand easily
SAFE_RANK_MIN = 4
SAFE_RANK_MAX = 10


def count_exposed_by(board: BoardState, card: Card) -> int:
    """
    Count covered cards that playing this card would uncover.

    The card at (row, col) covers (row-1, col-1) and (row-1, col). Each of
    those becomes exposed when it holds a card and its other cover is
    already gone.

    Returns:
        0, 1 or 2
    """
    p, r, c = card.position.pyramid, card.position.row, card.position.col
    if r == 0:
        return 0

    exposed = 0
    # Left parent is also covered by (r, c-1)
    if c - 1 >= 0 and board.get_slot(p, r - 1, c - 1) is not None:
        if board.get_slot(p, r, c - 1) is None:
            exposed += 1
    # Right parent is also covered by (r, c+1)
    if board.get_slot(p, r - 1, c) is not None:
        if board.get_slot(p, r, c + 1) is None:
            exposed += 1
    return exposed


def score_play(board: BoardState, card: Card) -> int:
    """
    Heuristic score for playing a card. Higher is tried first.

    Args:
        board: Board before the play
        card: Exposed card to play

    Returns:
        Score (ordering only, never used to reject a move)
    """
    score = 0
    if card.position.row == 0:
        score += APEX_BONUS
    score += EXPOSE_BONUS * count_exposed_by(board, card)
    if SAFE_RANK_MIN <= card.rank.value <= SAFE_RANK_MAX:
        score += SAFE_RANK_BONUS
    score += PYRAMID_BONUS * card.position.pyramid
    return score


def find_legal_moves(board: BoardState, ranked: bool = True) -> List[Tuple[PlayCard, BoardState]]:
    """
    Find every card that can be played onto the waste top.

    Drawing from the stock is never included; the search falls back to it
    when this returns nothing.

    Args:
        board: Current board state
        ranked: Sort by descending score_play (stable), otherwise keep
                pyramid/row/col discovery order

    Returns:
        List of (move, resulting board) pairs
    """
    top = board.waste_top
    if top is None:
        return []

    candidates = [card for card in board.get_playable_cards() if card.rank.can_play_on(top.rank)]
    if ranked:
        # sorted() is stable, ties keep discovery order
        candidates = sorted(candidates, key=lambda card: score_play(board, card), reverse=True)

    return [(PlayCard(card=card, target=top), board.play_card(card)) for card in candidates]
