#!/usr/bin/env python3
"""
Benchmark: compare the current engine against the v1 snapshot.

For each fixed position, times the current engine with a cold (cleared)
cache and again with the cache warm, then times the plain minimax baseline
from snapshots/engine_v1.py. Fewer nodes for the same move indicates more
effective pruning and caching.

Usage: python3 tools/bench.py
"""
import os
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

from snapshots import engine_v1
from tictactoe.search import SearchContext, analyse, clear_cache

# Fixed positions spanning opening, middlegame and endgame.
# These are fixed forever: same positions used for every version comparison.
POSITIONS = [
    ("Empty",          [0, 0, 0, 0, 0, 0, 0, 0, 0]),
    ("Center taken",   [0, 0, 0, 0, 2, 0, 0, 0, 0]),
    ("Side opening",   [0, 0, 0, 2, 0, 0, 0, 0, 0]),
    ("Fork threat",    [2, 0, 0, 0, 1, 0, 0, 0, 2]),
    ("Corner pair",    [1, 0, 0, 0, 2, 0, 0, 0, 0]),
    ("Win available",  [1, 1, 0, 2, 2, 0, 0, 0, 0]),
    ("Must block",     [1, 0, 0, 2, 2, 0, 0, 0, 0]),
    ("Open middle",    [2, 0, 1, 0, 0, 0, 0, 0, 0]),
    ("Late game",      [1, 2, 1, 0, 2, 0, 0, 1, 2]),
    ("Last cell",      [1, 2, 1, 1, 2, 2, 2, 1, 0]),
]


def run_position(label: str, cells: list[int], context: SearchContext) -> dict:
    """Time one position on the current engine (cold and warm) and on v1.

    Args:
        label: Human-readable position name for display.
        cells: Board as a list of 0/1/2.
        context: Search context reused across positions.

    Returns:
        Dict with keys: label, move, source, score, nodes, cold_ms, warm_ms,
        v1_move, v1_nodes, v1_ms.
    """
    clear_cache(context)
    start = time.perf_counter()
    cold = analyse(cells, context)
    cold_ms = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    analyse(cells, context)
    warm_ms = (time.perf_counter() - start) * 1000

    engine_v1.node_count = 0
    start = time.perf_counter()
    v1_move = engine_v1.find_best_move(cells)
    v1_ms = (time.perf_counter() - start) * 1000

    return {
        "label": label,
        "move": cold.move,
        "source": cold.source,
        "score": cold.score,
        "nodes": cold.nodes,
        "cold_ms": cold_ms,
        "warm_ms": warm_ms,
        "v1_move": v1_move,
        "v1_nodes": engine_v1.node_count,
        "v1_ms": v1_ms,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    print(f"Tic-tac-toe engine benchmark — {sys.executable}")
    print()
    print(
        f"{'Position':<14} {'Move':>4} {'Source':<7} {'Score':>6} {'Nodes':>7} "
        f"{'Cold(ms)':>9} {'Warm(ms)':>9} {'v1 Move':>7} {'v1 Nodes':>9} {'v1(ms)':>8}"
    )
    print("-" * 92)

    context = SearchContext()
    results = []
    for label, cells in POSITIONS:
        r = run_position(label, cells, context)
        results.append(r)
        score = "-" if r["score"] is None else r["score"]
        print(
            f"{r['label']:<14} {r['move']:>4} {r['source']:<7} {score:>6} {r['nodes']:>7,} "
            f"{r['cold_ms']:>9.3f} {r['warm_ms']:>9.3f} {r['v1_move']:>7} "
            f"{r['v1_nodes']:>9,} {r['v1_ms']:>8.3f}"
        )

    print("-" * 92)
    print(
        f"{'TOTAL':<14} {'':>4} {'':<7} {'':>6} {sum(r['nodes'] for r in results):>7,} "
        f"{sum(r['cold_ms'] for r in results):>9.3f} {sum(r['warm_ms'] for r in results):>9.3f} "
        f"{'':>7} {sum(r['v1_nodes'] for r in results):>9,} "
        f"{sum(r['v1_ms'] for r in results):>8.3f}"
    )
    print()
    print(f"Cache statistics: {context.cache.get_stats()}")


if __name__ == "__main__":
    main()
