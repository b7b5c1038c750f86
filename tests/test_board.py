"""
Tests for cards and board state.

Usage:
    pytest tests/test_board.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tripeaks.solver import (
    DRAW,
    BoardState,
    Card,
    CardParseError,
    PlayCard,
    Position,
    Rank,
    Suit,
    build_board,
    create_test_board,
    parse_card,
    standard_board,
)
from tripeaks.solver.layouts import STANDARD_CARD_COUNT


# ---------------------------------------------------------------- cards

def test_parse_short_and_long_forms():
    assert parse_card("7C") == Card(Rank.SEVEN, Suit.CLUBS)
    assert parse_card("10♠") == Card(Rank.TEN, Suit.SPADES)
    assert parse_card("qh") == Card(Rank.QUEEN, Suit.HEARTS)
    assert parse_card("Ace of Spades") == Card(Rank.ACE, Suit.SPADES)
    assert parse_card("king of diamonds") == Card(Rank.KING, Suit.DIAMONDS)


def test_parse_assigns_position():
    card = parse_card("5D", Position(2, 1, 0))
    assert card.position == Position(2, 1, 0)


@pytest.mark.parametrize("text", ["", "11H", "7X", "Joker", "of Hearts"])
def test_parse_rejects_garbage(text):
    with pytest.raises(CardParseError):
        parse_card(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_card(None)


def test_rank_adjacency_has_no_wrap():
    assert Rank.SEVEN.can_play_on(Rank.EIGHT)
    assert Rank.EIGHT.can_play_on(Rank.SEVEN)
    assert not Rank.SEVEN.can_play_on(Rank.SEVEN)
    assert not Rank.KING.can_play_on(Rank.ACE)
    assert not Rank.ACE.can_play_on(Rank.KING)


def test_card_display():
    assert str(parse_card("10S")) == "10♠"
    assert str(parse_card("AH")) == "A♥"
    assert str(parse_card("KD")) == "K♦"


def test_same_rank_suit_in_different_slots_are_distinct():
    a = parse_card("5H", Position(0, 3, 0))
    b = parse_card("5H", Position(1, 2, 0))
    assert a != b
    assert len({a, b}) == 2


# ---------------------------------------------------------------- board

def test_standard_layout_shape():
    board = create_test_board()
    assert board.total_cards == STANDARD_CARD_COUNT == 28
    assert board.cards_remaining == 28
    assert board.cards_cleared == 0
    assert [len(p) for p in board.pyramids] == [4, 4, 4]
    assert str(board.waste_top) == "5♣"
    assert board.stock_size == 3
    assert not board.is_win()


def test_standard_board_requires_28_cards():
    with pytest.raises(ValueError):
        standard_board(["7C"] * 27)


def test_positions_follow_slots():
    board = create_test_board()
    for pos, card in board.iter_slots():
        assert card.position == pos


def test_last_row_always_exposed():
    board = create_test_board()
    playable = board.get_playable_cards()
    assert [str(c) for c in playable] == [
        "7♣", "6♥", "5♦", "4♠",
        "7♦", "8♣", "9♥",
        "6♦", "7♠", "10♠",
    ]


def test_exposure_needs_both_covers_cleared():
    board = build_board([[["KC"], ["2D", "QS"]]], waste=["5H"])
    assert not board.is_exposed(0, 0, 0)

    one_gone = board.play_card(board.get_slot(0, 1, 0))
    assert not one_gone.is_exposed(0, 0, 0)

    both_gone = one_gone.play_card(one_gone.get_slot(0, 1, 1))
    assert both_gone.is_exposed(0, 0, 0)


def test_empty_slot_is_not_exposed():
    board = build_board([[[None], ["2D", None]]])
    assert not board.is_exposed(0, 0, 0)
    assert not board.is_exposed(0, 1, 1)
    assert board.is_exposed(0, 1, 0)


def test_cover_past_end_of_row_counts_as_empty():
    # Row 2 col 2 would be covered by row 3 cols 2 and 3; row 3 only has 3 slots
    board = build_board([[["AC"], ["2C", "3C"], ["4C", "5C", "6C"], [None, None, None]]])
    assert board.is_exposed(0, 2, 2)


def test_face_down_cards_are_not_playable():
    board = BoardState.create(
        [[[Card(Rank.SEVEN, Suit.CLUBS, Position(0, 0, 0), face_up=False)]]],
        waste=[parse_card("8H")],
    )
    assert board.get_playable_cards() == []


def test_to_hash_format():
    board = build_board([[["5H"], [None, "7S"]]], waste=["2D", "6C"], stock=["KD"])
    assert board.to_hash() == "5♥,X,7♠|6♣|1"


def test_to_hash_empty_waste():
    board = build_board([[["5H"]]])
    assert board.to_hash() == "5♥|empty|0"


def test_to_hash_ignores_buried_stock_order_and_waste_history():
    a = build_board([[["5H"]]], waste=["2D", "6C"], stock=["KD", "AH"])
    b = build_board([[["5H"]]], waste=["9S", "6C"], stock=["AH", "KD"])
    assert a != b
    assert a.to_hash() == b.to_hash()


def test_play_card_returns_new_board():
    board = build_board([[["5C"], ["6D", "7H"]]], waste=["8S"])
    card = board.get_slot(0, 1, 1)

    after = board.play_card(card)

    assert board.get_slot(0, 1, 1) == card
    assert board.cards_remaining == 3
    assert after.get_slot(0, 1, 1) is None
    assert after.cards_remaining == 2
    assert after.waste_top == card
    assert card in after.removed
    assert after.total_cards == 3


def test_draw_from_stock():
    board = build_board([[["5C"]]], waste=["2S"], stock=["9H", "JD"])
    after = board.draw_from_stock()
    assert str(after.waste_top) == "9♥"
    assert [str(c) for c in after.stock] == ["J♦"]
    assert board.stock_size == 2


def test_draw_from_empty_stock_is_noop():
    board = build_board([[["5C"]]], waste=["2S"])
    assert board.draw_from_stock() is board


def test_apply_move_dispatches_both_variants():
    board = build_board([[["8C"]]], waste=["2S"], stock=["9H"])
    drawn = board.apply_move(DRAW)
    card = drawn.get_slot(0, 0, 0)
    won = drawn.apply_move(PlayCard(card=card, target=drawn.waste_top))
    assert won.is_win()
    assert won.cards_cleared == 1


def test_apply_move_rejects_non_moves():
    board = build_board([[["8C"]]])
    with pytest.raises(TypeError):
        board.apply_move("draw")


def test_diff_and_find_card():
    board = build_board([[["5C"], ["6D", "7H"]]], waste=["8S"])
    card = board.get_slot(0, 1, 1)
    after = board.play_card(card)

    assert board.diff(after) == [Position(0, 1, 1)]
    assert board.find_card(card) == Position(0, 1, 1)
    assert after.find_card(card) is None


def test_render_mentions_waste_and_stock():
    text = create_test_board().render()
    assert "waste: 5♣" in text
    assert "stock: 3" in text
    assert "remaining: 28" in text
