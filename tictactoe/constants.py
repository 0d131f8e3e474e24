"""
Engine constants: scores, search parameters, and table sizes.

All numeric constants used throughout the engine are defined here so that
no other module introduces magic numbers. The board is indexed row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

BOARD_SIZE: int = 9

# The eight winning lines: three rows, three columns, two diagonals.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)

# Static move priority: center, then corners, then edges.
MOVE_PRIORITY: tuple[int, ...] = (4, 0, 2, 6, 8, 1, 3, 5, 7)

# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------
# WIN_SCORE is the depth-aware base: a win found at depth d scores
# WIN_SCORE - d, so a win in one ply outranks a win in three. A loss scores
# d - WIN_SCORE, so the engine prefers to lose as late as possible.

WIN_SCORE: int = 100
DRAW_SCORE: int = 0

# Depth-insensitive scoring used by the one-ply win/block scans.
STATIC_WIN_SCORE: int = 10

# Any score at or above this is a forced win regardless of its depth
# (the deepest possible win still scores WIN_SCORE - 8).
FORCED_WIN_THRESHOLD: int = 90

# Integer sentinel for the alpha-beta window. Larger than any reachable score.
INFINITY: int = 1_000

# Returned by the move selector when the board has no empty cell.
NO_MOVE: int = -1

# ---------------------------------------------------------------------------
# Transposition cache
# ---------------------------------------------------------------------------
# The whole cache is dropped once it holds more than this many entries.
# Tic-tac-toe has 5,478 legal positions, so two sides-to-move fit comfortably.
CACHE_MAX_ENTRIES: int = 10_000
