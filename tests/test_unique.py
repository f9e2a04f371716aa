import pytest

from logslice.unique import UniqueFilter


def test_zero_window_accepts_first_line():
    assert UniqueFilter(0).accept("anything") is True


def test_negative_window_raises():
    with pytest.raises(ValueError):
        UniqueFilter(-1)


def test_first_occurrence_accepted():
    assert UniqueFilter(0).accept("hello") is True


def test_duplicate_rejected():
    f = UniqueFilter(0)
    f.accept("hello")
    assert f.accept("hello") is False


def test_different_lines_accepted():
    f = UniqueFilter(0)
    f.accept("line1")
    assert f.accept("line2") is True


def test_suppressed_counts_duplicates():
    f = UniqueFilter(0)
    for _ in range(3):
        f.accept("a")
    assert f.suppressed() == 2


def test_window_evicts_old_entries():
    f = UniqueFilter(2)
    f.accept("a")
    f.accept("b")
    f.accept("c")
    assert f.accept("a") is True


def test_window_duplicate_within_window():
    f = UniqueFilter(3)
    f.accept("x")
    assert f.accept("x") is False


def test_reset_clears_state():
    f = UniqueFilter(0)
    f.accept("hello")
    f.accept("hello")
    f.reset()
    assert f.accept("hello") is True
    assert f.suppressed() == 0