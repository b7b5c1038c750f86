"""
Move Module - The two kinds of play in TriPeaks.
"""

from dataclasses import dataclass
from typing import Union

from .card import Card


@dataclass(frozen=True)
class PlayCard:
    """
    Play an exposed tableau card onto the waste pile.

    Attributes:
        card: Tableau card being played
        target: Waste top the card is played onto
    """
    card: Card
    target: Card

    def __str__(self) -> str:
        return f"Play {self.card} on {self.target}"


@dataclass(frozen=True)
class DrawFromStock:
    """Turn the front stock card onto the waste pile."""

    def __str__(self) -> str:
        return "Draw card"


Move = Union[PlayCard, DrawFromStock]

DRAW = DrawFromStock()
