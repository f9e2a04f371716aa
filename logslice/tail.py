"""Keeping only the last lines of a stream."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class Tailer:
    """Retains the last ``n`` lines read; ``n <= 0`` retains every line."""

    def __init__(self, n: int) -> None:
        self.limit: int | None = n if n > 0 else None
        self._buffer: deque[str] = deque(maxlen=self.limit)

    def read_all(self, stream: Iterable[str]) -> None:
        """Consume ``stream``, keeping only the most recent lines."""
        self._buffer.extend(_strip_eol(line) for line in stream)

    def lines(self) -> list[str]:
        """Return the retained lines, oldest first."""
        return list(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)