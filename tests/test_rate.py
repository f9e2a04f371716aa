import pytest

from logslice.rate import RateLimiter


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def test_valid_rate():
    assert RateLimiter(10).rate() == 10


def test_zero_raises():
    with pytest.raises(ValueError):
        RateLimiter(0)


def test_negative_raises():
    with pytest.raises(ValueError):
        RateLimiter(-5)


def test_allows_up_to_limit():
    limiter = RateLimiter(3, clock=FakeClock())
    assert [limiter.accept("line") for _ in range(3)] == [True, True, True]


def test_drops_over_limit():
    limiter = RateLimiter(3, clock=FakeClock())
    for _ in range(3):
        limiter.accept("line")
    assert limiter.accept("overflow") is False


def test_resets_after_window():
    clock = FakeClock()
    limiter = RateLimiter(2, clock=clock)
    limiter.accept("a")
    limiter.accept("b")
    assert limiter.accept("c") is False
    clock.now += 1.0
    assert limiter.accept("d") is True


def test_no_reset_within_window():
    clock = FakeClock()
    limiter = RateLimiter(1, clock=clock)
    assert limiter.accept("a") is True
    clock.now += 0.5
    assert limiter.accept("b") is False