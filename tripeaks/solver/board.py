"""
Board State Module - Immutable TriPeaks tableau, waste and stock snapshot.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Tuple

from .card import Card, Position
from .move import DrawFromStock, Move, PlayCard

Slot = Optional[Card]
Row = Tuple[Slot, ...]
Pyramid = Tuple[Row, ...]


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses tuples throughout for hashability and immutability. A cleared
    tableau card leaves None in its slot so positional indices never shift.

    Attributes:
        pyramids: Pyramid -> row -> slot. Row 0 is the apex.
        waste: Played cards; the last one is the active top
        stock: Undrawn cards; the first one is drawn next
        removed: Tableau cards already cleared
    """
    pyramids: Tuple[Pyramid, ...]
    waste: Tuple[Card, ...] = ()
    stock: Tuple[Card, ...] = ()
    removed: FrozenSet[Card] = field(default_factory=frozenset)

    @classmethod
    def create(cls, pyramids, waste=(), stock=(), removed=()) -> 'BoardState':
        """
        Create BoardState from nested lists.

        Args:
            pyramids: Nested lists of Card or None (pyramid -> row -> slot)
            waste: Waste cards, top last
            stock: Stock cards, next draw first
            removed: Cards already cleared

        Returns:
            BoardState instance with immutable collections
        """
        return cls(
            pyramids=tuple(tuple(tuple(row) for row in pyramid) for pyramid in pyramids),
            waste=tuple(waste),
            stock=tuple(stock),
            removed=frozenset(removed),
        )

    @property
    def waste_top(self) -> Optional[Card]:
        """Active waste card, or None when the waste is empty."""
        return self.waste[-1] if self.waste else None

    @property
    def stock_size(self) -> int:
        return len(self.stock)

    @property
    def cards_remaining(self) -> int:
        """Count of occupied tableau slots."""
        return sum(1 for _, card in self.iter_slots() if card is not None)

    @property
    def total_cards(self) -> int:
        """Count of tableau slots, occupied or not (28 on a standard deal)."""
        return sum(len(row) for pyramid in self.pyramids for row in pyramid)

    @property
    def cards_cleared(self) -> int:
        return self.total_cards - self.cards_remaining

    def is_win(self) -> bool:
        """True once every tableau slot is empty."""
        return self.cards_remaining == 0

    def iter_slots(self) -> Iterator[Tuple[Position, Slot]]:
        """Yield (position, slot) for every slot in pyramid/row/col order."""
        for p, pyramid in enumerate(self.pyramids):
            for r, row in enumerate(pyramid):
                for c, card in enumerate(row):
                    yield Position(p, r, c), card

    def get_slot(self, pyramid: int, row: int, col: int) -> Slot:
        """
        Get the card at a slot.

        Returns:
            Card, or None if the slot is empty or out of range
        """
        if not 0 <= pyramid < len(self.pyramids):
            return None
        rows = self.pyramids[pyramid]
        if 0 <= row < len(rows) and 0 <= col < len(rows[row]):
            return rows[row][col]
        return None

    def is_exposed(self, pyramid: int, row: int, col: int) -> bool:
        """
        Check whether a slot holds a card with nothing covering it.

        A card at (row, col) is covered by the cards at (row+1, col) and
        (row+1, col+1). Cards in the last row of a pyramid are always
        exposed. Covering indices past the end of the next row count as
        empty.
        """
        if self.get_slot(pyramid, row, col) is None:
            return False
        if row == len(self.pyramids[pyramid]) - 1:
            return True
        return (self.get_slot(pyramid, row + 1, col) is None
                and self.get_slot(pyramid, row + 1, col + 1) is None)

    def get_playable_cards(self) -> List[Card]:
        """
        Get every exposed face-up card.

        Returns:
            Cards in pyramid/row/col order
        """
        playable = []
        for pos, card in self.iter_slots():
            if card is not None and card.face_up and self.is_exposed(pos.pyramid, pos.row, pos.col):
                playable.append(card)
        return playable

    def find_card(self, card: Card) -> Optional[Position]:
        """Locate a card in the tableau, or None if it is not there."""
        for pos, slot in self.iter_slots():
            if slot == card:
                return pos
        return None

    def to_hash(self) -> str:
        """
        Signature used to deduplicate states during search.

        Built from every tableau slot in position order (rank+suit, or X
        when empty), the waste top, and the stock count. Buried stock order
        and waste history are not part of it.
        """
        slots = ",".join(str(card) if card is not None else "X" for _, card in self.iter_slots())
        top = str(self.waste_top) if self.waste_top is not None else "empty"
        return f"{slots}|{top}|{self.stock_size}"

    def play_card(self, card: Card) -> 'BoardState':
        """
        Move a tableau card to the waste.

        Clears the card's slot and returns a new BoardState. Original board
        is unchanged. Legality is not checked here.

        Args:
            card: Card currently sitting in the tableau

        Returns:
            New BoardState with the card on top of the waste
        """
        new_pyramids = tuple(
            tuple(
                tuple(None if slot == card else slot for slot in row)
                for row in pyramid
            )
            for pyramid in self.pyramids
        )
        return BoardState(
            pyramids=new_pyramids,
            waste=self.waste + (card,),
            stock=self.stock,
            removed=self.removed | {card},
        )

    def draw_from_stock(self) -> 'BoardState':
        """
        Turn the front stock card onto the waste.

        Returns:
            New BoardState, or this board if the stock is empty
        """
        if not self.stock:
            return self
        return BoardState(
            pyramids=self.pyramids,
            waste=self.waste + (self.stock[0],),
            stock=self.stock[1:],
            removed=self.removed,
        )

    def apply_move(self, move: Move) -> 'BoardState':
        """
        Apply a move to create a new board state.

        Args:
            move: PlayCard or DrawFromStock

        Returns:
            New BoardState after the move
        """
        match move:
            case PlayCard(card=card):
                return self.play_card(card)
            case DrawFromStock():
                return self.draw_from_stock()
        raise TypeError(f"Not a move: {move!r}")

    def diff(self, other: 'BoardState') -> List[Position]:
        """
        Find tableau slots that differ between this board and another.

        Args:
            other: Another BoardState with the same layout

        Returns:
            Positions where slots differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        return [
            pos for pos, card in self.iter_slots()
            if other.get_slot(pos.pyramid, pos.row, pos.col) != card
        ]

    def render(self) -> str:
        """Plain text picture of the board, one tableau row per line."""
        lines = []
        depth = max((len(pyramid) for pyramid in self.pyramids), default=0)
        for r in range(depth):
            parts = []
            for pyramid in self.pyramids:
                if r < len(pyramid):
                    parts.append(" ".join(f"{str(c) if c else '--':>3}" for c in pyramid[r]))
            lines.append("   |   ".join(parts))
        top = str(self.waste_top) if self.waste_top else "--"
        lines.append(f"waste: {top}  stock: {self.stock_size}  remaining: {self.cards_remaining}")
        return "\n".join(lines)
