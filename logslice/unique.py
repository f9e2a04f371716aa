"""Passing only the first occurrence of each line, optionally within a window."""

from __future__ import annotations

from collections import deque


class UniqueFilter:
    """Accepts lines not seen among the last ``window`` accepted lines.

    A window of 0 keeps every line seen in memory.
    """

    def __init__(self, window: int = 0) -> None:
        if window < 0:
            raise ValueError("unique: window must be >= 0")
        self._window = window
        self._seen: set[str] = set()
        self._queue: deque[str] = deque()
        self._suppressed = 0

    def accept(self, line: str) -> bool:
        """Report whether ``line`` is new within the current window."""
        if line in self._seen:
            self._suppressed += 1
            return False
        self._seen.add(line)
        if self._window > 0:
            self._queue.append(line)
            if len(self._queue) > self._window:
                self._seen.discard(self._queue.popleft())
        return True

    def suppressed(self) -> int:
        """Return the number of duplicates rejected so far."""
        return self._suppressed

    def reset(self) -> None:
        """Forget every line and the suppression count."""
        self._seen.clear()
        self._queue.clear()
        self._suppressed = 0