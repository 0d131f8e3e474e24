"""
Static move ordering for alpha-beta search.

Alpha-beta prunes more when strong moves are tried first. In tic-tac-toe the
center takes part in four winning lines, each corner in three and each edge
in two, so trying them in that order raises alpha (or lowers beta) early and
cuts off the weaker siblings. The order depends only on which cells are
empty; there are no killer or history tables to maintain.
"""

from tictactoe.board import Board
from tictactoe.constants import MOVE_PRIORITY


def ordered_moves(board: Board) -> list[int]:
    """Empty cell indices in priority order: center, corners, edges."""
    return [i for i in MOVE_PRIORITY if board.is_empty(i)]
