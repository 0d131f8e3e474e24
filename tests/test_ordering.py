"""Move ordering tests."""

from tictactoe.board import Board
from tictactoe.ordering import ordered_moves


class TestOrderedMoves:

    def test_empty_board_order(self):
        assert ordered_moves(Board.empty()) == [4, 0, 2, 6, 8, 1, 3, 5, 7]

    def test_skips_occupied_cells(self):
        board = Board.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 0])
        assert ordered_moves(board) == [2, 6, 8, 1, 3, 5, 7]

    def test_only_edges_left(self):
        board = Board.from_cells([1, 0, 2, 0, 1, 0, 2, 0, 1])
        assert ordered_moves(board) == [1, 3, 5, 7]

    def test_full_board(self):
        board = Board.from_cells([1, 2, 1, 2, 1, 1, 2, 1, 2])
        assert ordered_moves(board) == []

    def test_does_not_modify_board(self):
        board = Board.from_cells([0, 0, 1, 0, 2, 0, 0, 0, 0])
        ordered_moves(board)
        assert board.cells() == [0, 0, 1, 0, 2, 0, 0, 0, 0]
