"""
Layouts Module - Builders for TriPeaks boards from card text.

The standard deal is three peaks over a ten-card base. In the
pyramid/row/slot model the base is split 4/3/3 across the pyramids,
giving 28 tableau slots:

    pyramid 0      pyramid 1      pyramid 2
       .              .              .
      . .            . .            . .
     . . .          . . .          . . .
    . . . .         . . .          . . .
"""

from typing import Iterable, List, Optional, Sequence

from .board import BoardState
from .card import Card, Position, parse_card

STANDARD_ROW_SIZES = ((1, 2, 3, 4), (1, 2, 3, 3), (1, 2, 3, 3))
STANDARD_CARD_COUNT = sum(sum(rows) for rows in STANDARD_ROW_SIZES)

CardText = Optional[str]


def _parse_pile(cards: Iterable[str]) -> List[Card]:
    return [parse_card(text) for text in cards]


def build_board(pyramids: Sequence[Sequence[Sequence[CardText]]],
                waste: Sequence[str] = (),
                stock: Sequence[str] = ()) -> BoardState:
    """
    Build a board from card text.

    Args:
        pyramids: Pyramid -> row -> card text, None for an empty slot
        waste: Waste card text, top last
        stock: Stock card text, next draw first

    Returns:
        BoardState with tableau positions assigned

    Raises:
        CardParseError: If any card text is invalid
    """
    tableau = [
        [
            [
                parse_card(text, Position(p, r, c)) if text is not None else None
                for c, text in enumerate(row)
            ]
            for r, row in enumerate(pyramid)
        ]
        for p, pyramid in enumerate(pyramids)
    ]
    return BoardState.create(tableau, waste=_parse_pile(waste), stock=_parse_pile(stock))


def standard_board(cards: Sequence[CardText],
                   waste: Sequence[str] = (),
                   stock: Sequence[str] = ()) -> BoardState:
    """
    Fill the standard 28-slot layout.

    Args:
        cards: 28 card texts (None for cleared slots), pyramid by pyramid,
               apex row first, left to right
        waste: Waste card text, top last
        stock: Stock card text, next draw first

    Returns:
        BoardState

    Raises:
        ValueError: If cards does not hold exactly 28 entries
    """
    if len(cards) != STANDARD_CARD_COUNT:
        raise ValueError(f"Standard layout needs {STANDARD_CARD_COUNT} cards, got {len(cards)}")

    remaining = iter(cards)
    pyramids = [
        [[next(remaining) for _ in range(size)] for size in row_sizes]
        for row_sizes in STANDARD_ROW_SIZES
    ]
    return build_board(pyramids, waste=waste, stock=stock)


def create_test_board() -> BoardState:
    """Built-in 28-card deal used by the CLI and tests."""
    cards = [
        # Pyramid 0
        "KH",
        "QD", "JC",
        "10H", "9S", "8D",
        "7C", "6H", "5D", "4S",
        # Pyramid 1
        "2H",
        "3D", "JD",
        "4C", "5S", "6C",
        "7D", "8C", "9H",
        # Pyramid 2
        "10C",
        "9D", "8S",
        "5H", "4D", "3S",
        "6D", "7S", "10S",
    ]
    return standard_board(cards, waste=["5C"], stock=["KD", "AH", "2S"])
