"""Limiting a stream to its leading lines."""

from __future__ import annotations

import itertools
from collections.abc import Iterable


class HeadLimiter:
    """Accepts the first ``n`` lines; ``n <= 0`` means no limit."""

    def __init__(self, n: int) -> None:
        self.limit: int | None = n if n > 0 else None
        self._seen = 0

    def accept(self) -> bool:
        """Record one line and report whether it is within the quota."""
        if self.limit is None:
            return True
        if self._seen >= self.limit:
            return False
        self._seen += 1
        return True

    def done(self) -> bool:
        """Report whether the quota has been used up."""
        return self.limit is not None and self._seen >= self.limit


def read_all(lines: Iterable[str], n: int) -> list[str]:
    """Return at most ``n`` leading lines, or all of them when ``n <= 0``."""
    if n <= 0:
        return list(lines)
    return list(itertools.islice(lines, n))