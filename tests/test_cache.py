"""Transposition cache tests: keys, bounds, node-relative scores, reset."""

from tictactoe.board import Board
from tictactoe.cache import Bound, CacheEntry, TranspositionCache
from tictactoe.constants import CACHE_MAX_ENTRIES, INFINITY


class TestKeys:

    def test_side_to_move_changes_key(self):
        board = Board.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 0])
        assert TranspositionCache.key_for(board, True) != TranspositionCache.key_for(board, False)

    def test_key_encodes_board(self):
        board = Board.from_cells([1, 0, 0, 0, 2, 0, 0, 0, 0])
        assert TranspositionCache.key_for(board, True) == "100020000M"
        assert TranspositionCache.key_for(board, False) == "100020000m"

    def test_different_boards_different_keys(self):
        a = Board.from_cells([1, 0, 0, 0, 0, 0, 0, 0, 0])
        b = Board.from_cells([0, 1, 0, 0, 0, 0, 0, 0, 0])
        assert TranspositionCache.key_for(a, True) != TranspositionCache.key_for(b, True)


class TestRawAccess:

    def test_put_get(self):
        cache = TranspositionCache()
        assert cache.get("000000000M") is None
        cache.put("000000000M", 0)
        assert cache.get("000000000M") == CacheEntry(0, Bound.EXACT)
        assert "000000000M" in cache
        assert cache.size() == 1
        assert len(cache) == 1

    def test_clear(self):
        cache = TranspositionCache()
        cache.put("a", 1)
        cache.put("b", 2)
        cache.clear()
        assert cache.size() == 0
        assert cache.get("a") is None

    def test_default_threshold(self):
        assert TranspositionCache().max_entries == CACHE_MAX_ENTRIES == 10_000

    def test_maybe_reset_only_above_threshold(self):
        cache = TranspositionCache(max_entries=2)
        cache.put("a", 1)
        cache.put("b", 2)
        assert not cache.maybe_reset()
        assert cache.size() == 2
        cache.put("c", 3)
        assert cache.maybe_reset()
        assert cache.size() == 0


class TestProbeStore:

    def test_exact_entry_always_usable(self):
        cache = TranspositionCache()
        cache.store("k", 0, 0, -INFINITY, INFINITY)
        assert cache.get("k").bound is Bound.EXACT
        assert cache.probe("k", 0, 50, 60) == 0

    def test_store_classifies_bounds(self):
        cache = TranspositionCache()
        cache.store("low", 0, 0, 0, 10)
        cache.store("high", 10, 0, 0, 10)
        cache.store("mid", 5, 0, 0, 10)
        assert cache.get("low").bound is Bound.UPPER
        assert cache.get("high").bound is Bound.LOWER
        assert cache.get("mid").bound is Bound.EXACT

    def test_lower_bound_needs_beta(self):
        cache = TranspositionCache()
        cache.put("k", 0, Bound.LOWER)
        assert cache.probe("k", 0, -10, 0) == 0
        assert cache.probe("k", 0, -10, 5) is None

    def test_upper_bound_needs_alpha(self):
        cache = TranspositionCache()
        cache.put("k", 0, Bound.UPPER)
        assert cache.probe("k", 0, 0, 10) == 0
        assert cache.probe("k", 0, -5, 10) is None

    def test_miss(self):
        cache = TranspositionCache()
        assert cache.probe("nothing", 0, -INFINITY, INFINITY) is None
        assert cache.misses == 1

    def test_win_score_is_node_relative(self):
        cache = TranspositionCache()
        # A win found 3 plies below the root, stored at a node on ply 3.
        cache.store("k", 97, 3, -INFINITY, INFINITY)
        assert cache.get("k").score == 100
        # The same node reached one ply below a different root.
        assert cache.probe("k", 1, -INFINITY, INFINITY) == 99

    def test_loss_score_is_node_relative(self):
        cache = TranspositionCache()
        cache.store("k", -98, 2, -INFINITY, INFINITY)
        assert cache.get("k").score == -100
        assert cache.probe("k", 5, -INFINITY, INFINITY) == -95

    def test_draw_score_unshifted(self):
        cache = TranspositionCache()
        cache.store("k", 0, 4, -INFINITY, INFINITY)
        assert cache.probe("k", 1, -INFINITY, INFINITY) == 0

    def test_stats(self):
        cache = TranspositionCache()
        cache.store("k", 0, 0, -INFINITY, INFINITY)
        cache.probe("k", 0, -INFINITY, INFINITY)
        cache.probe("x", 0, -INFINITY, INFINITY)
        stats = cache.get_stats()
        assert stats["size"] == 1
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["stores"] == 1
        assert stats["hit_rate"] == 0.5
