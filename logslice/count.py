"""Line-count primitives: a thread-safe counter and a per-file accumulator."""

from __future__ import annotations

import threading


class LineCounter:
    """A counter that may be shared between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def add(self, delta: int) -> None:
        """Increase the count by ``delta``."""
        with self._lock:
            self._value += delta

    def inc(self) -> None:
        """Increase the count by one."""
        self.add(1)

    def value(self) -> int:
        """Return the current count."""
        with self._lock:
            return self._value

    def reset(self) -> None:
        """Set the count back to zero."""
        with self._lock:
            self._value = 0


class Accumulator:
    """Per-file line counts with a running total."""

    def __init__(self) -> None:
        self._files: dict[str, int] = {}
        self._total = 0

    def record(self, name: str, lines: int) -> None:
        """Store the count for ``name`` and add it to the total."""
        self._files[name] = lines
        self._total += lines

    def total(self) -> int:
        """Return the sum of every recorded count."""
        return self._total

    def files(self) -> dict[str, int]:
        """Return a copy of the per-file counts."""
        return dict(self._files)