"""
Tic-tac-toe AI engine package.

This package computes the optimal move for a 3x3 tic-tac-toe board using
exhaustive minimax search with alpha-beta pruning, a transposition cache,
static move ordering, and a small opening book.

Modules:
    constants    — Scores, winning lines, move priority, cache threshold
    board        — Cell enum and the 9-cell Board with push/pop
    evaluate     — Terminal detection and depth-aware scoring
    ordering     — Center/corner/edge move ordering
    cache        — Transposition cache with bound-tagged entries
    opening_book — Fixed replies for the first few positions
    search       — Alpha-beta search and the move selector entry point
"""

from tictactoe.board import Board, Cell
from tictactoe.search import (
    SearchContext,
    SearchResult,
    analyse,
    cache_size,
    clear_cache,
    find_best_move,
    opening_book_size,
)

__all__ = [
    "Board",
    "Cell",
    "SearchContext",
    "SearchResult",
    "analyse",
    "cache_size",
    "clear_cache",
    "find_best_move",
    "opening_book_size",
]
