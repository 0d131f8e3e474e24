"""
Search entry point: minimax with alpha-beta pruning, a transposition cache,
static move ordering, an opening book, and one-ply win/block shortcuts.

This module defines the stable public interface that web/app.py depends on.
find_best_move() takes a 9-cell board (0 = empty, 1 = engine, 2 = opponent)
and returns the index of the engine's move, or -1 if the board is full.

Move selection runs in this order and stops at the first step that answers:

1. Opening book: a fixed reply for a handful of very early positions.
2. Immediate win: any empty cell that completes a line for the engine.
3. Forced block: any empty cell that would complete a line for the opponent.
4. Full search: every candidate move, center first, scored by an alpha-beta
   search that always runs to the end of the game. The highest score wins;
   ties keep the earlier candidate. A forced win ends the scan early.

Tic-tac-toe never needs more than nine plies, so there is no depth limit,
iterative deepening or time management: every search completes in well under
a millisecond once the cache is warm.

State model:
    The cache lives in a SearchContext object rather than in module globals,
    so tests and independent callers can search with isolated caches. The
    module-level helpers (clear_cache, cache_size, ...) act on a shared
    default context for callers that just want one process-wide engine.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from tictactoe.board import Board, Cell
from tictactoe.cache import TranspositionCache
from tictactoe.constants import (
    FORCED_WIN_THRESHOLD,
    INFINITY,
    NO_MOVE,
    STATIC_WIN_SCORE,
    WIN_SCORE,
)
from tictactoe.evaluate import evaluate, evaluate_static
from tictactoe.opening_book import book_size, opening_move
from tictactoe.ordering import ordered_moves

_log = logging.getLogger(__name__)


@dataclass
class SearchContext:
    """
    Mutable state that persists across move computations.

    Keeping the cache in one object (rather than a global variable) makes
    ownership explicit: whoever holds the context owns the cache.

    Attributes:
        cache:      Transposition cache shared by every search run with this
                    context. Populated by search(), reset by the move selector
                    when it grows past its threshold.
        node_count: Number of search() calls made by the most recent move
                    computation. Reset at the start of each analyse().
    """

    cache: TranspositionCache = field(default_factory=TranspositionCache)
    node_count: int = 0


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a move computation.

    Attributes:
        move:   Chosen cell index, or NO_MOVE (-1) if the board was full.
        score:  Minimax score of the chosen move from the engine's
                perspective, when one was computed (None for book and
                block moves, which are chosen without scoring).
        source: Which step produced the move: "book", "win", "block",
                "search" or "none".
        nodes:  Search nodes visited (0 unless source is "search").
    """

    move: int
    score: int | None
    source: str
    nodes: int = 0


DEFAULT_CONTEXT = SearchContext()


def search(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: int,
    beta: int,
    context: SearchContext,
) -> int:
    """
    Minimax search with alpha-beta pruning and a transposition cache.

    MAX (the engine) picks the child with the highest score, MIN (the
    opponent) the lowest. The window [alpha, beta] holds the best score each
    side is already guaranteed elsewhere in the tree: once beta <= alpha,
    the parent will never let play reach this node, so the remaining
    siblings are skipped.

    Args:
        board:      Current position. Modified in place via push/pop and
                    always restored before returning.
        depth:      Plies played since the top-level call (0 at the root).
                    Only used to prefer faster wins and slower losses.
        maximizing: True if MAX is to move at this node.
        alpha:      Best score MAX can already guarantee.
        beta:       Best score MIN can already guarantee.
        context:    Holds the transposition cache and node counter.

    Returns:
        The score of this node from MAX's perspective. Exact when it lies
        strictly inside (alpha, beta); otherwise a bound on the exact value
        on the side of the window it fell.
    """
    context.node_count += 1
    cache = context.cache

    key = cache.key_for(board, maximizing)
    cached = cache.probe(key, depth, alpha, beta)
    if cached is not None:
        return cached

    # Terminal node: somebody holds a line, or the board is full.
    score = evaluate(board, depth)
    if score != 0 or not board.is_moves_left():
        cache.store(key, score, depth, -INFINITY, INFINITY)
        return score

    alpha_orig, beta_orig = alpha, beta

    if maximizing:
        best = -INFINITY
        for move in ordered_moves(board):
            board.push(move, Cell.MAX)
            result = search(board, depth + 1, False, alpha, beta, context)
            board.pop()

            best = max(best, result)
            alpha = max(alpha, best)
            # Beta cutoff: MIN already has something better than this node.
            if beta <= alpha:
                break
    else:
        best = INFINITY
        for move in ordered_moves(board):
            board.push(move, Cell.MIN)
            result = search(board, depth + 1, True, alpha, beta, context)
            board.pop()

            best = min(best, result)
            beta = min(beta, best)
            # Alpha cutoff: MAX already has something better than this node.
            if beta <= alpha:
                break

    cache.store(key, best, depth, alpha_orig, beta_orig)
    return best


def _as_board(board: Board | Sequence[int]) -> Board:
    """Return an owned copy so the caller's board is never touched."""
    if isinstance(board, Board):
        return board.copy()
    return Board.from_cells(board)


def _scan_one_ply(board: Board, cell: Cell) -> int | None:
    """First empty index (ascending) where placing cell completes a line for it."""
    target = STATIC_WIN_SCORE if cell is Cell.MAX else -STATIC_WIN_SCORE
    for index in board.empty_cells():
        board.push(index, cell)
        score = evaluate_static(board)
        board.pop()
        if score == target:
            return index
    return None


def analyse(
    board: Board | Sequence[int],
    context: SearchContext | None = None,
) -> SearchResult:
    """
    Choose the engine's move and report how it was chosen.

    Args:
        board:   A Board, or any 9-element sequence of 0/1/2. Not modified.
        context: Search context to use; the shared default if omitted.

    Returns:
        SearchResult with the move, its score, the deciding step, and the
        number of search nodes visited.
    """
    if context is None:
        context = DEFAULT_CONTEXT
    work = _as_board(board)
    context.node_count = 0

    # Amortized housekeeping: drop the whole cache once it grows too large.
    if context.cache.maybe_reset():
        _log.debug("Transposition cache exceeded %d entries, cleared", context.cache.max_entries)

    book_move = opening_move(work)
    if book_move is not None:
        return SearchResult(book_move, None, "book")

    win = _scan_one_ply(work, Cell.MAX)
    if win is not None:
        return SearchResult(win, WIN_SCORE, "win")

    block = _scan_one_ply(work, Cell.MIN)
    if block is not None:
        return SearchResult(block, None, "block")

    best_move = NO_MOVE
    best_score = -INFINITY
    for move in ordered_moves(work):
        work.push(move, Cell.MAX)
        score = search(work, 0, False, -INFINITY, INFINITY, context)
        work.pop()

        if score > best_score:
            best_score = score
            best_move = move

        # Stop at the first forced win.
        if score >= FORCED_WIN_THRESHOLD:
            break

    if best_move == NO_MOVE:
        return SearchResult(NO_MOVE, None, "none")
    return SearchResult(best_move, best_score, "search", context.node_count)


def find_best_move(
    board: Board | Sequence[int],
    context: SearchContext | None = None,
) -> int:
    """
    Return the index (0-8) of the engine's best move, or -1 if the board is full.

    For a given board the answer is always the same, however much the
    cache has been populated or cleared by earlier calls.
    """
    return analyse(board, context).move


# ---------------------------------------------------------------------------
# Introspection helpers for boundary layers (default context)
# ---------------------------------------------------------------------------


def clear_cache(context: SearchContext | None = None) -> None:
    """Empty the transposition cache. Affects later searches only."""
    (context if context is not None else DEFAULT_CONTEXT).cache.clear()


def cache_size(context: SearchContext | None = None) -> int:
    return (context if context is not None else DEFAULT_CONTEXT).cache.size()


def opening_book_size() -> int:
    return book_size()
