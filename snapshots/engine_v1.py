"""
Tic-tac-toe v1 snapshot — plain minimax with alpha-beta, no extras.

Self-contained: no imports from tictactoe/. Frozen at the first working
engine, before the transposition cache, move ordering, opening book and
win/block shortcuts were added.

  - Scores terminal positions +10 / -10 / 0 regardless of depth, so it does
    not prefer a faster win over a slower one
  - Scans candidate moves in index order 0..8
  - Searches the full tree on every call

Used as the baseline in tools/bench.py: the current engine must agree with
it on the value of every position while visiting far fewer nodes.
"""

BOT: int = 1
OPPONENT: int = 2

WIN: int = 10

LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

# Number of minimax() calls since the last reset; read by tools/bench.py.
node_count: int = 0


def is_moves_left(board: list[int]) -> bool:
    return 0 in board


def evaluate(board: list[int]) -> int:
    """+10 if BOT holds a line, -10 if OPPONENT does, else 0."""
    for a, b, c in LINES:
        if board[a] != 0 and board[a] == board[b] == board[c]:
            return WIN if board[a] == BOT else -WIN
    return 0


def minimax(board: list[int], depth: int, is_max: bool, alpha: float, beta: float) -> int:
    """Alpha-beta minimax over a mutable int list (restored before return)."""
    global node_count
    node_count += 1

    score = evaluate(board)
    if score != 0:
        return score
    if not is_moves_left(board):
        return 0

    if is_max:
        best = -WIN - 1
        for i in range(9):
            if board[i] == 0:
                board[i] = BOT
                best = max(best, minimax(board, depth + 1, False, alpha, beta))
                board[i] = 0
                alpha = max(alpha, best)
                if beta <= alpha:
                    break
        return best

    best = WIN + 1
    for i in range(9):
        if board[i] == 0:
            board[i] = OPPONENT
            best = min(best, minimax(board, depth + 1, True, alpha, beta))
            board[i] = 0
            beta = min(beta, best)
            if beta <= alpha:
                break
    return best


def find_best_move(board: list[int]) -> int:
    """Index of the highest-scoring move (first one on ties), or -1 if full."""
    board = list(board)
    best_val = -WIN - 1
    best_move = -1
    for i in range(9):
        if board[i] == 0:
            board[i] = BOT
            move_val = minimax(board, 0, False, -WIN - 1, WIN + 1)
            board[i] = 0
            if move_val > best_val:
                best_val = move_val
                best_move = i
    return best_move
