"""Opening book tests."""

import pytest

from tictactoe.board import Board
from tictactoe.opening_book import OPENING_BOOK, book_size, opening_move


class TestOpeningBook:

    def test_size(self):
        assert book_size() == 6

    def test_empty_board_takes_center(self):
        assert opening_move(Board.empty()) == 4

    def test_center_taken_answers_corner(self):
        assert opening_move(Board.from_cells([0, 0, 0, 0, 2, 0, 0, 0, 0])) == 0

    @pytest.mark.parametrize("index", [0, 1, 7, 8])
    def test_single_marker_answers_center(self, index):
        cells = [0] * 9
        cells[index] = 2
        assert opening_move(Board.from_cells(cells)) == 4

    def test_unknown_position(self):
        assert opening_move(Board.from_cells([0, 0, 0, 0, 0, 0, 2, 0, 0])) is None
        assert opening_move(Board.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 0])) is None

    def test_book_is_read_only(self):
        with pytest.raises(TypeError):
            OPENING_BOOK["111111111"] = (0,)

    def test_every_candidate_starts_empty(self):
        for key, candidates in OPENING_BOOK.items():
            board = Board.from_cells(int(c) for c in key)
            assert all(board.is_empty(i) for i in candidates)
