"""
Terminal-state detection and scoring.

Tic-tac-toe is small enough to search to the end, so there is no heuristic
evaluation: a position is either won by someone or scores zero. Zero covers
both a game still in progress and a drawn full board, so callers that need
to tell those apart must also ask is_moves_left().

Two scoring forms are provided:

- evaluate(board, depth): depth-aware. A win for the engine found `depth`
  plies below the search root scores WIN_SCORE - depth; a loss scores
  depth - WIN_SCORE. Faster wins and slower losses are preferred.
- evaluate_static(board): depth-insensitive +10 / -10 / 0, used by the
  one-ply win and block scans of the move selector.

Both are built on winner(), the single winning-line test in the engine.
"""

from tictactoe.board import Board, Cell
from tictactoe.constants import DRAW_SCORE, STATIC_WIN_SCORE, WIN_SCORE, WINNING_LINES


def winner(board: Board) -> Cell | None:
    """Return the side holding a completed line, or None."""
    for a, b, c in WINNING_LINES:
        first = board[a]
        if first is not Cell.EMPTY and first is board[b] and first is board[c]:
            return first
    return None


def is_moves_left(board: Board) -> bool:
    return board.is_moves_left()


def is_terminal(board: Board) -> bool:
    return winner(board) is not None or not board.is_moves_left()


def evaluate(board: Board, depth: int) -> int:
    """
    Depth-aware score from the engine's (MAX's) perspective.

    Args:
        board: Position to score. Not modified.
        depth: Plies played since the top-level search call.

    Returns:
        WIN_SCORE - depth if MAX holds a line, depth - WIN_SCORE if MIN
        does, DRAW_SCORE otherwise.
    """
    side = winner(board)
    if side is Cell.MAX:
        return WIN_SCORE - depth
    if side is Cell.MIN:
        return depth - WIN_SCORE
    return DRAW_SCORE


def evaluate_static(board: Board) -> int:
    """Depth-insensitive score: +10 for a MAX line, -10 for a MIN line, else 0."""
    side = winner(board)
    if side is Cell.MAX:
        return STATIC_WIN_SCORE
    if side is Cell.MIN:
        return -STATIC_WIN_SCORE
    return DRAW_SCORE
