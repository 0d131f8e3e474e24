"""
Board model: a fixed 9-cell grid with a move stack.

The search mutates one Board in place: push() places a marker and records
the index, pop() retracts the most recent placement. This mirrors the
push/pop idiom of chess.Board and keeps the search free of per-node copies.
Every push made during search is matched by a pop before the caller regains
control, so a board handed to the engine comes back unchanged.
"""

from enum import IntEnum
from typing import Iterable, Iterator

from tictactoe.constants import BOARD_SIZE


class Cell(IntEnum):
    """
    Contents of a single square.

    The integer values are also the wire alphabet used by the HTTP layer
    (0 = empty, 1 = the engine, 2 = the opponent).
    """

    EMPTY = 0
    MAX = 1
    MIN = 2

    @property
    def opponent(self) -> "Cell":
        if self is Cell.MAX:
            return Cell.MIN
        if self is Cell.MIN:
            return Cell.MAX
        return Cell.EMPTY


_SYMBOLS = {Cell.EMPTY: "_", Cell.MAX: "X", Cell.MIN: "O"}


class Board:
    """
    Nine cells, indices 0-8, row-major.

    Attributes:
        _cells: The current contents, always exactly BOARD_SIZE entries.
        _stack: Indices placed via push(), most recent last.
    """

    __slots__ = ("_cells", "_stack")

    def __init__(self, cells: Iterable[Cell] | None = None) -> None:
        if cells is None:
            self._cells: list[Cell] = [Cell.EMPTY] * BOARD_SIZE
        else:
            self._cells = list(cells)
        self._stack: list[int] = []

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_cells(cls, values: Iterable[int]) -> "Board":
        """
        Build a board from a sequence of ints (or Cells).

        Raises:
            ValueError: if the sequence is not 9 long or contains a value
                        outside {0, 1, 2}.
        """
        values = list(values)
        if len(values) != BOARD_SIZE:
            raise ValueError(f"board must have {BOARD_SIZE} cells, got {len(values)}")
        try:
            return cls(Cell(v) for v in values)
        except ValueError as exc:
            raise ValueError(f"invalid cell value in {values!r}") from exc

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return BOARD_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.encode()!r})"

    def __str__(self) -> str:
        symbols = [_SYMBOLS[c] for c in self._cells]
        rows = [" | ".join(symbols[r * 3:r * 3 + 3]) for r in range(3)]
        return "\n---------\n".join(rows)

    def is_empty(self, index: int) -> bool:
        return self._cells[index] is Cell.EMPTY

    def empty_cells(self) -> list[int]:
        """Indices of all empty cells in ascending order."""
        return [i for i, c in enumerate(self._cells) if c is Cell.EMPTY]

    def is_moves_left(self) -> bool:
        return Cell.EMPTY in self._cells

    def cells(self) -> list[int]:
        """Plain int copy of the contents, suitable for JSON."""
        return [int(c) for c in self._cells]

    def encode(self) -> str:
        """Canonical 9-digit encoding, e.g. "000020000"."""
        return "".join(str(int(c)) for c in self._cells)

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def push(self, index: int, cell: Cell) -> None:
        """Place cell on an empty square and remember it for pop()."""
        self._cells[index] = cell
        self._stack.append(index)

    def pop(self) -> int:
        """
        Retract the most recent push() and return its index.

        Raises:
            IndexError: if there is nothing to retract.
        """
        index = self._stack.pop()
        self._cells[index] = Cell.EMPTY
        return index

    def copy(self) -> "Board":
        """An independent board with the same contents and an empty stack."""
        return Board(self._cells)

    def flipped(self) -> "Board":
        """A copy with MAX and MIN swapped, so the engine can play either side."""
        return Board(c.opponent for c in self._cells)
