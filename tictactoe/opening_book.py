"""
Opening book: fixed replies for a handful of very early positions.

The book is keyed by the plain 9-digit board encoding without the side to
move; every entry is a position where the engine is obviously the one to
play. Each entry lists candidate replies, most preferred first, and the
first one that is still empty is returned.

This is not a general book. It only spares the search the positions that
come up on almost every request: the empty board, and the opponent's first
marker on the center, a corner or an edge. Positions missing from the book
simply fall through to search.
"""

import logging
from types import MappingProxyType

from tictactoe.board import Board

_log = logging.getLogger(__name__)

OPENING_BOOK: MappingProxyType = MappingProxyType({
    # Empty board: center, otherwise a corner.
    "000000000": (4, 0, 2, 6, 8),
    # Opponent took the center: answer in a corner.
    "000020000": (0, 2, 6, 8),
    # Opponent took a corner: answer in the center.
    "200000000": (4,),
    "000000002": (4,),
    # Opponent took an edge: answer in the center.
    "020000000": (4,),
    "000000020": (4,),
})


def opening_move(board: Board) -> int | None:
    """Return the preferred book reply for board, or None if it is not in the book."""
    candidates = OPENING_BOOK.get(board.encode())
    if candidates is None:
        return None
    for index in candidates:
        if board.is_empty(index):
            _log.debug("Book move %d for %s", index, board.encode())
            return index
    return None


def book_size() -> int:
    return len(OPENING_BOOK)
