"""Limiting the number of lines emitted per second."""

from __future__ import annotations

import time
from collections.abc import Callable


class RateLimiter:
    """Accepts at most ``per_second`` lines in each one-second window."""

    def __init__(self, per_second: int, clock: Callable[[], float] | None = None) -> None:
        if per_second < 1:
            raise ValueError("rate: perSecond must be >= 1")
        self._per_second = per_second
        self._clock = clock if clock is not None else time.monotonic
        self._window_start = self._clock()
        self._count = 0

    def accept(self, line: str) -> bool:
        """Report whether the line fits within the current window's budget."""
        now = self._clock()
        if now - self._window_start >= 1.0:
            self._window_start = now
            self._count = 0
        if self._count < self._per_second:
            self._count += 1
            return True
        return False

    def rate(self) -> int:
        """Return the configured lines-per-second limit."""
        return self._per_second