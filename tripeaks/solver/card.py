"""
Card Module - Immutable playing card representation for TriPeaks.
"""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional


class CardParseError(ValueError):
    """Raised when card text cannot be turned into a Card."""


class Rank(IntEnum):
    """
    Card rank, Ace low.

    TriPeaks plays a card onto the waste if it is exactly one rank
    above or below the waste top. King and Ace are not adjacent.
    """
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def can_play_on(self, other: "Rank") -> bool:
        """Check if this rank may be played onto a waste top of rank other."""
        return abs(self.value - other.value) == 1

    @property
    def symbol(self) -> str:
        """Display symbol: A, 2-10, J, Q, K."""
        return _RANK_SYMBOLS.get(self, str(self.value))

    def __str__(self) -> str:
        return self.symbol


_RANK_SYMBOLS: Dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


class Suit(Enum):
    """Card suit. Has no effect on play."""
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


@dataclass(frozen=True)
class Position:
    """
    Location of a card slot in the tableau.

    Attributes:
        pyramid: Pyramid index (0 = leftmost)
        row: Row index within the pyramid (0 = apex)
        col: Column index within the row
    """
    pyramid: int
    row: int
    col: int


# Cards that never sat in the tableau (stock, waste) use this position
OFF_TABLEAU = Position(-1, -1, -1)


@dataclass(frozen=True)
class Card:
    """
    Immutable card.

    Two cards with the same rank and suit are still different cards when
    they sit in different positions (multi-deck games), so equality and
    hashing cover every field.

    Attributes:
        rank: Card rank (Ace=1 .. King=13)
        suit: Card suit
        position: Tableau slot the card was dealt to
        face_up: Whether the card is face up
    """
    rank: Rank
    suit: Suit
    position: Position = OFF_TABLEAU
    face_up: bool = True

    @property
    def label(self) -> str:
        """Rank and suit symbols, e.g. '10♠'."""
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.label


# Word and letter aliases accepted by parse_card
_RANK_NAMES: Dict[str, Rank] = {
    "A": Rank.ACE, "ACE": Rank.ACE, "1": Rank.ACE,
    "J": Rank.JACK, "JACK": Rank.JACK,
    "Q": Rank.QUEEN, "QUEEN": Rank.QUEEN,
    "K": Rank.KING, "KING": Rank.KING,
    "T": Rank.TEN,
    "TWO": Rank.TWO, "THREE": Rank.THREE, "FOUR": Rank.FOUR,
    "FIVE": Rank.FIVE, "SIX": Rank.SIX, "SEVEN": Rank.SEVEN,
    "EIGHT": Rank.EIGHT, "NINE": Rank.NINE, "TEN": Rank.TEN,
}
_RANK_NAMES.update({str(v): Rank(v) for v in range(2, 11)})

_SUIT_NAMES: Dict[str, Suit] = {
    "H": Suit.HEARTS, "HEART": Suit.HEARTS, "HEARTS": Suit.HEARTS, "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS, "DIAMOND": Suit.DIAMONDS, "DIAMONDS": Suit.DIAMONDS, "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS, "CLUB": Suit.CLUBS, "CLUBS": Suit.CLUBS, "♣": Suit.CLUBS,
    "S": Suit.SPADES, "SPADE": Suit.SPADES, "SPADES": Suit.SPADES, "♠": Suit.SPADES,
}

_LONG_FORM = re.compile(r"^\s*(\w+)\s+of\s+(\w+)\s*$", re.IGNORECASE)
_SHORT_FORM = re.compile(r"^\s*(10|[2-9AJQKT1])\s*([HDCS♥♦♣♠])\s*$", re.IGNORECASE)


def parse_card(text: str, position: Optional[Position] = None) -> Card:
    """
    Parse card text into a Card.

    Accepts short forms ("7C", "10♠", "QH") and long forms
    ("Queen of Hearts", "10 of spades").

    Args:
        text: Card text
        position: Tableau position to assign (default OFF_TABLEAU)

    Returns:
        Parsed Card

    Raises:
        CardParseError: If the text is not a recognisable card
    """
    if not isinstance(text, str):
        raise CardParseError(f"Card text must be a string, got {type(text).__name__}")

    match = _LONG_FORM.match(text) or _SHORT_FORM.match(text)
    if match is None:
        raise CardParseError(f"Unrecognised card: {text!r}")

    rank_text, suit_text = match.group(1).upper(), match.group(2).upper()
    rank = _RANK_NAMES.get(rank_text)
    suit = _SUIT_NAMES.get(suit_text)
    if rank is None or suit is None:
        raise CardParseError(f"Unrecognised card: {text!r}")

    return Card(rank=rank, suit=suit, position=position or OFF_TABLEAU)
