"""A thread-safe filter that suppresses exact duplicate lines."""

from __future__ import annotations

import threading


class DedupeFilter:
    """Tracks every distinct line and rejects repeats.

    Safe for use from several threads at once.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._seen: dict[str, int] = {}

    def accept(self, line: str) -> bool:
        """Return True on the first occurrence of ``line``, False afterwards."""
        with self._lock:
            if line in self._seen:
                self._seen[line] += 1
                return False
            self._seen[line] = 0
            return True

    def count(self, line: str) -> int:
        """Return how many times ``line`` was suppressed."""
        with self._lock:
            return self._seen.get(line, 0)

    def reset(self) -> None:
        """Forget every tracked line."""
        with self._lock:
            self._seen = {}

    def unique(self) -> int:
        """Return the number of distinct lines seen."""
        with self._lock:
            return len(self._seen)