"""Tests for MemoCacheManager."""

from infinite_loader.core.ranges import IndexRange


def test_memo_cache_manager_initial_state():
    from infinite_loader.managers.memo_cache_manager import MemoCacheManager

    memo = MemoCacheManager()

    assert memo.last_rendered_start_index is None
    assert memo.last_rendered_stop_index is None
    assert memo.last_rendered_range is None
    assert memo.memoized_ranges == ()


def test_memo_cache_manager_remember_rendered():
    from infinite_loader.managers.memo_cache_manager import MemoCacheManager

    memo = MemoCacheManager()

    memo.remember_rendered(20, 30)

    assert memo.last_rendered_range == IndexRange(20, 30)


def test_memo_cache_manager_skips_identical_ranges():
    from infinite_loader.managers.memo_cache_manager import MemoCacheManager

    memo = MemoCacheManager()

    memo.remember([IndexRange(0, 19)])

    assert memo.should_skip([IndexRange(0, 19)]) is True
    assert memo.should_skip([IndexRange(0, 20)]) is False
    assert memo.should_skip([IndexRange(0, 19), IndexRange(40, 49)]) is False
    assert memo.should_skip([]) is False


def test_memo_cache_manager_skips_empty_pass_on_fresh_state():
    from infinite_loader.managers.memo_cache_manager import MemoCacheManager

    memo = MemoCacheManager()

    assert memo.should_skip([]) is True


def test_memo_cache_manager_reset_keeps_last_rendered_range():
    from infinite_loader.managers.memo_cache_manager import MemoCacheManager

    memo = MemoCacheManager()

    memo.remember_rendered(20, 30)
    memo.remember([IndexRange(20, 30)])
    memo.reset()

    assert memo.memoized_ranges == ()
    assert memo.should_skip([IndexRange(20, 30)]) is False
    assert memo.last_rendered_range == IndexRange(20, 30)
