"""
Snapshot Module - JSON board snapshots for TriPeaks Solver

The capture layer writes what it sees into a snapshot; the solver reads
it back into a BoardState. Format:

    {
        "pyramids": [[["KH"], ["QD", "JC"], ...], ...],
        "waste": ["5C"],
        "stock": ["KD", "AH", "2S"]
    }

Empty tableau slots are null. Waste is listed bottom to top, stock in
draw order.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from tripeaks.solver import BoardState, CardParseError, build_board

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be turned into a board."""


def board_from_dict(data: Dict[str, Any]) -> BoardState:
    """
    Build a board from snapshot data.

    Args:
        data: Parsed snapshot

    Returns:
        BoardState

    Raises:
        SnapshotError: If the snapshot is malformed
    """
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object")

    pyramids = data.get("pyramids")
    if not isinstance(pyramids, list) or not pyramids:
        raise SnapshotError("Snapshot needs a non-empty 'pyramids' list")
    for p, pyramid in enumerate(pyramids):
        if not isinstance(pyramid, list) or not all(isinstance(row, list) for row in pyramid):
            raise SnapshotError(f"Pyramid {p} must be a list of rows")

    waste = data.get("waste", [])
    stock = data.get("stock", [])
    if not isinstance(waste, list) or not isinstance(stock, list):
        raise SnapshotError("'waste' and 'stock' must be lists")

    try:
        return build_board(pyramids, waste=waste, stock=stock)
    except CardParseError as e:
        raise SnapshotError(f"Bad card in snapshot: {e}") from e


def board_to_dict(board: BoardState) -> Dict[str, Any]:
    """Convert a board to snapshot data. Removed cards are not kept."""
    pyramids: List[List[List[Union[str, None]]]] = [
        [[_card_code(card) if card is not None else None for card in row] for row in pyramid]
        for pyramid in board.pyramids
    ]
    return {
        "pyramids": pyramids,
        "waste": [_card_code(card) for card in board.waste],
        "stock": [_card_code(card) for card in board.stock],
    }


def _card_code(card) -> str:
    """ASCII card code, e.g. '10S'."""
    return f"{card.rank.symbol}{card.suit.value}"


def load_board(path: Union[str, Path]) -> BoardState:
    """
    Load a board snapshot from a JSON file.

    Raises:
        SnapshotError: If the file is missing, not JSON, or malformed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (ValueError, OSError) as e:
        raise SnapshotError(f"Failed to read snapshot {path}: {e}") from e

    board = board_from_dict(data)
    logger.debug(f"Snapshot loaded from {path}: {board.cards_remaining} cards")
    return board


def save_board(board: BoardState, path: Union[str, Path]) -> None:
    """Write a board snapshot to a JSON file."""
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(board_to_dict(board), f, indent=2)
    logger.debug(f"Snapshot saved to {path}")
