"""A filter that inverts another filter's decision."""

from __future__ import annotations

from typing import Protocol


class Accepter(Protocol):
    """Anything that decides whether to keep a line."""

    def accept(self, line: str) -> bool: ...


class InverseFilter:
    """Accepts what ``inner`` rejects; without ``inner`` it accepts everything."""

    def __init__(self, inner: Accepter | None) -> None:
        self._inner = inner

    def accept(self, line: str) -> bool:
        """Return the opposite of the wrapped filter's decision."""
        if self._inner is None:
            return True
        return not self._inner.accept(line)