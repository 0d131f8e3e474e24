"""
Transposition cache for alpha-beta search results.

Different move orders often reach the same position (a transposition), so
the search remembers what it already computed for each (board, side-to-move)
pair and reuses it instead of searching the subtree again.

Key concepts:
- Key: the 9-digit board encoding plus "M" (engine to move) or "m"
  (opponent to move). The same board with a different side to move is a
  different position and gets its own entry.
- Bound types: a node that finished inside its alpha-beta window stores an
  EXACT value. A node cut off early only knows a bound: LOWER after a beta
  cutoff (true value >= stored), UPPER when every move failed low (true
  value <= stored). probe() only returns a bound when it already decides
  the current window.
- Node-relative scores: win/loss scores depend on how far below the search
  root they were found. store() shifts them by the node's depth and probe()
  shifts them back, the same adjustment chess engines apply to mate scores,
  so an entry stays valid when reached from a different root.
- Reset policy: no eviction. Once the cache holds more than max_entries
  positions, maybe_reset() drops everything at once.
"""

from dataclasses import dataclass
from enum import Enum

from tictactoe.board import Board
from tictactoe.constants import CACHE_MAX_ENTRIES


class Bound(Enum):
    """How a cached score relates to the true minimax value."""
    EXACT = 0
    LOWER = 1
    UPPER = 2


@dataclass(frozen=True)
class CacheEntry:
    """
    A cached search result.

    Attributes:
        score: Node-relative score (win/loss distance measured from the node
               that stored it, not from the search root).
        bound: Whether score is exact or a lower/upper bound.
    """

    score: int
    bound: Bound


def _to_node(score: int, depth: int) -> int:
    """Convert a root-relative score at `depth` into a node-relative one."""
    if score > 0:
        return score + depth
    if score < 0:
        return score - depth
    return score


def _from_node(score: int, depth: int) -> int:
    """Inverse of _to_node for a node reached at `depth`."""
    if score > 0:
        return score - depth
    if score < 0:
        return score + depth
    return score


class TranspositionCache:
    """
    Dict-backed transposition cache with a blunt size-triggered reset.

    Attributes:
        max_entries: Entry count above which maybe_reset() clears the cache.
        hits:        Probes that returned a usable score.
        misses:      Probes that found nothing usable.
        stores:      Entries written.
    """

    def __init__(self, max_entries: int = CACHE_MAX_ENTRIES) -> None:
        self.max_entries = max_entries
        self._table: dict[str, CacheEntry] = {}
        self.hits = 0
        self.misses = 0
        self.stores = 0

    @staticmethod
    def key_for(board: Board, maximizing: bool) -> str:
        return board.encode() + ("M" if maximizing else "m")

    # -----------------------------------------------------------------------
    # Raw access
    # -----------------------------------------------------------------------

    def get(self, key: str) -> CacheEntry | None:
        return self._table.get(key)

    def put(self, key: str, score: int, bound: Bound = Bound.EXACT) -> None:
        """Store a node-relative score under key, replacing any previous entry."""
        self._table[key] = CacheEntry(score, bound)
        self.stores += 1

    def size(self) -> int:
        return len(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: str) -> bool:
        return key in self._table

    def clear(self) -> None:
        """Drop every entry. Counters are kept; they describe the process lifetime."""
        self._table.clear()

    def maybe_reset(self) -> bool:
        """Clear the whole cache if it grew past max_entries. Returns True if cleared."""
        if len(self._table) > self.max_entries:
            self._table.clear()
            return True
        return False

    # -----------------------------------------------------------------------
    # Search interface
    # -----------------------------------------------------------------------

    def probe(self, key: str, depth: int, alpha: int, beta: int) -> int | None:
        """
        Return a cached score usable at this node, or None.

        An EXACT entry is always usable. A LOWER bound is usable only if it
        already reaches beta, an UPPER bound only if it is already at or
        below alpha: in both cases the true value would cause the same
        cutoff, so the caller cannot tell the difference.

        Args:
            key:   Position key from key_for().
            depth: Depth of the probing node below its search root.
            alpha: Current lower bound of the window.
            beta:  Current upper bound of the window.
        """
        entry = self._table.get(key)
        if entry is None:
            self.misses += 1
            return None

        score = _from_node(entry.score, depth)
        if (
            entry.bound is Bound.EXACT
            or (entry.bound is Bound.LOWER and score >= beta)
            or (entry.bound is Bound.UPPER and score <= alpha)
        ):
            self.hits += 1
            return score

        self.misses += 1
        return None

    def store(self, key: str, score: int, depth: int, alpha: int, beta: int) -> None:
        """
        Record a search result, classifying it against the window it was
        searched with.

        Args:
            key:   Position key from key_for().
            score: Value returned by the search at this node.
            depth: Depth of the node below its search root.
            alpha: Lower bound of the window on entry to the node.
            beta:  Upper bound of the window on entry to the node.
        """
        if score <= alpha:
            bound = Bound.UPPER
        elif score >= beta:
            bound = Bound.LOWER
        else:
            bound = Bound.EXACT
        self.put(key, _to_node(score, depth), bound)

    def get_stats(self) -> dict:
        total = self.hits + self.misses
        return {
            "size": len(self._table),
            "hits": self.hits,
            "misses": self.misses,
            "stores": self.stores,
            "hit_rate": self.hits / total if total else 0.0,
        }
