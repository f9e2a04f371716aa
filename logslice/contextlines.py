"""Capturing lines of context around matches, like grep -B / -A / -C."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """A line of text and its 1-based position in the source."""

    number: int
    text: str


class ContextBuffer:
    """Emits up to ``before`` leading and ``after`` trailing lines per match.

    Negative counts are treated as zero.
    """

    def __init__(self, before: int = 0, after: int = 0) -> None:
        self.before = max(before, 0)
        self.after = max(after, 0)
        self._pending_before: deque[Line] = deque(maxlen=self.before)
        self._pending_after = 0

    def feed(self, line: Line, matched: bool) -> list[Line]:
        """Present ``line``; return the lines now ready to be emitted, in order."""
        if matched:
            ready = list(self._pending_before)
            self._pending_before.clear()
            ready.append(line)
            self._pending_after = self.after
            return ready
        if self._pending_after > 0:
            self._pending_after -= 1
            return [line]
        if self.before > 0:
            self._pending_before.append(line)
        return []