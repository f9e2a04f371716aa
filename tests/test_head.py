from logslice.head import HeadLimiter, read_all


def test_zero_means_no_limit():
    r = HeadLimiter(0)
    assert r.limit is None
    assert all(r.accept() for _ in range(100))
    assert not r.done()


def test_negative_means_no_limit():
    assert HeadLimiter(-5).limit is None


def test_positive_sets_limit():
    assert HeadLimiter(3).limit == 3


def test_accept_limits_to_n():
    r = HeadLimiter(3)
    assert [r.accept() for _ in range(3)] == [True, True, True]
    assert r.accept() is False


def test_done_true_after_quota():
    r = HeadLimiter(2)
    assert not r.done()
    r.accept()
    r.accept()
    assert r.done()


def test_read_all_fewer_lines_than_n():
    assert read_all(["a", "b"], 10) == ["a", "b"]


def test_read_all_more_lines_than_n():
    assert read_all(["a", "b", "c", "d", "e"], 3) == ["a", "b", "c"]


def test_read_all_exactly_n():
    assert read_all(["x", "y", "z"], 3) == ["x", "y", "z"]


def test_read_all_zero_returns_all():
    assert read_all(["a", "b", "c"], 0) == ["a", "b", "c"]