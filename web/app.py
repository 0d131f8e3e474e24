"""
FastAPI web application for the tic-tac-toe engine.

Exposes GET /move, which takes the board as a JSON array in the query string
(e.g. /move?board=[0,1,0,2,0,0,0,0,0]), runs the engine, and returns the
chosen cell index with timing and cache information. POST /clear-cache and
GET /stats expose the transposition cache to operators.

Architecture notes:
- Sync endpoints (not async): FastAPI runs sync handlers in a thread pool,
  which is the correct pattern for CPU-bound calls like engine search.
- One SearchContext per process, shared by all requests so the cache stays
  warm. The engine is not thread-safe, so every call into it holds _lock.
- All input validation happens here; the engine assumes a well-formed board.
"""

import json
import logging
import threading
import time

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from tictactoe.board import Board
from tictactoe.constants import BOARD_SIZE
from tictactoe.search import SearchContext, analyse, cache_size, clear_cache, opening_book_size

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="Tic-tac-toe AI", version="2.0.0")

_context = SearchContext()
_lock = threading.Lock()

_VALID_CELLS = (0, 1, 2)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class MoveResponse(BaseModel):
    """
    Engine response after computing the best move.

    Fields:
        move: Index (0-8) of the cell the engine plays.
        time_ms: Wall-clock time spent in the engine, in milliseconds.
        cache_size: Transposition cache entries after the search.
    """

    move: int
    time_ms: float
    cache_size: int


class MessageResponse(BaseModel):
    message: str


class StatsResponse(BaseModel):
    cache_size: int
    opening_positions: int


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def parse_board(raw: str | None) -> Board:
    """
    Parse and validate the board query parameter.

    Raises:
        HTTPException 400: Not a JSON array, wrong length, a value outside
                           {0, 1, 2}, or no empty cell left. Each case has
                           its own message.
    """
    try:
        cells = json.loads(raw) if raw is not None else None
    except json.JSONDecodeError as exc:
        raise HTTPException(
            status_code=400,
            detail="Invalid board parameter: must be a JSON array.",
        ) from exc

    if not isinstance(cells, list):
        raise HTTPException(
            status_code=400,
            detail="Invalid board parameter: must be a JSON array.",
        )

    if len(cells) != BOARD_SIZE:
        raise HTTPException(status_code=400, detail="Board must be an array of 9 cells.")

    # bool is a subclass of int in Python; true/false are not valid cells.
    if not all(type(c) is int and c in _VALID_CELLS for c in cells):
        raise HTTPException(
            status_code=400,
            detail="Board may only contain the values 0, 1 or 2.",
        )

    board = Board.from_cells(cells)
    if not board.is_moves_left():
        raise HTTPException(status_code=400, detail="No moves available.")
    return board


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.get("/move", response_model=MoveResponse)
def api_move(board: str | None = None) -> MoveResponse:
    """
    Compute the engine's move for the given board.

    Args:
        board: JSON array of 9 cells (0 = empty, 1 = engine, 2 = opponent).

    Returns:
        MoveResponse with the move index, engine time, and cache size.

    Raises:
        HTTPException 400: Malformed board or no moves left.
        HTTPException 500: Engine failure (should not happen on valid input).
    """
    position = parse_board(board)

    with _lock:
        start = time.perf_counter()
        try:
            result = analyse(position, _context)
        except Exception as exc:
            _log.exception("Engine search failed for board=%s", position.encode())
            raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc
        elapsed_ms = (time.perf_counter() - start) * 1000
        size = cache_size(_context)

    _log.info(
        "Move=%d source=%s score=%s nodes=%d time_ms=%.3f board=%s",
        result.move,
        result.source,
        result.score,
        result.nodes,
        elapsed_ms,
        position.encode(),
    )

    return MoveResponse(move=result.move, time_ms=elapsed_ms, cache_size=size)


@app.post("/clear-cache", response_model=MessageResponse)
def api_clear_cache() -> MessageResponse:
    """Empty the transposition cache."""
    with _lock:
        clear_cache(_context)
    _log.info("Transposition cache cleared")
    return MessageResponse(message="Cache cleared")


@app.get("/stats", response_model=StatsResponse)
def api_stats() -> StatsResponse:
    """Report cache and opening book sizes."""
    with _lock:
        size = cache_size(_context)
    return StatsResponse(cache_size=size, opening_positions=opening_book_size())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=3010)
