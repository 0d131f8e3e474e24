"""Board model tests: construction, push/pop, encoding."""

import pytest

from tictactoe.board import Board, Cell


class TestConstruction:

    def test_empty(self):
        board = Board.empty()
        assert board.cells() == [0] * 9
        assert board.empty_cells() == list(range(9))
        assert board.is_moves_left()

    def test_from_cells(self):
        board = Board.from_cells([1, 2, 0, 0, 1, 0, 0, 0, 2])
        assert board[0] is Cell.MAX
        assert board[1] is Cell.MIN
        assert board[2] is Cell.EMPTY
        assert board.empty_cells() == [2, 3, 5, 6, 7]

    def test_from_cells_wrong_length(self):
        with pytest.raises(ValueError):
            Board.from_cells([0] * 8)

    def test_from_cells_bad_value(self):
        with pytest.raises(ValueError):
            Board.from_cells([0, 0, 0, 0, 3, 0, 0, 0, 0])

    def test_full_board_has_no_moves(self):
        board = Board.from_cells([1, 2, 1, 2, 1, 2, 1, 2, 1])
        assert not board.is_moves_left()
        assert board.empty_cells() == []

    def test_single_empty_cell(self):
        board = Board.from_cells([1, 2, 1, 2, 1, 2, 1, 2, 0])
        assert board.is_moves_left()
        assert board.empty_cells() == [8]


class TestPushPop:

    def test_push_then_pop_restores(self):
        board = Board.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 0])
        before = board.cells()
        board.push(8, Cell.MAX)
        assert board[8] is Cell.MAX
        assert not board.is_empty(8)
        assert board.pop() == 8
        assert board.cells() == before

    def test_pop_order_is_lifo(self):
        board = Board.empty()
        board.push(4, Cell.MAX)
        board.push(0, Cell.MIN)
        assert board.pop() == 0
        assert board.pop() == 4
        assert board == Board.empty()

    def test_pop_without_push_raises(self):
        with pytest.raises(IndexError):
            Board.empty().pop()

    def test_copy_is_independent(self):
        board = Board.from_cells([0, 0, 0, 0, 2, 0, 0, 0, 0])
        clone = board.copy()
        board.push(0, Cell.MAX)
        assert clone[0] is Cell.EMPTY
        assert clone == Board.from_cells([0, 0, 0, 0, 2, 0, 0, 0, 0])


class TestEncoding:

    def test_encode(self):
        assert Board.from_cells([0, 0, 0, 0, 2, 0, 0, 0, 0]).encode() == "000020000"
        assert Board.empty().encode() == "000000000"

    def test_flipped_swaps_sides(self):
        board = Board.from_cells([1, 2, 0, 0, 1, 0, 0, 0, 2])
        assert board.flipped().cells() == [2, 1, 0, 0, 2, 0, 0, 0, 1]

    def test_str_grid(self):
        text = str(Board.from_cells([1, 2, 0, 0, 0, 0, 0, 0, 0]))
        assert text.splitlines()[0] == "X | O | _"
        assert len(text.splitlines()) == 5

    def test_cell_opponent(self):
        assert Cell.MAX.opponent is Cell.MIN
        assert Cell.MIN.opponent is Cell.MAX
        assert Cell.EMPTY.opponent is Cell.EMPTY
