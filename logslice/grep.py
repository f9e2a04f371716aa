"""Regular-expression matching of log lines."""

from __future__ import annotations

import re
from collections.abc import Iterable


class PatternError(ValueError):
    """Raised when a pattern does not compile."""


class Matcher:
    """A compiled pattern; an empty pattern matches every line."""

    def __init__(self, pattern: str = "") -> None:
        self._source = pattern
        self._regex: re.Pattern[str] | None = None
        if pattern:
            try:
                self._regex = re.compile(pattern)
            except re.error as exc:
                raise PatternError(f"grep: compile pattern {pattern!r}: {exc}") from exc

    def match(self, line: str) -> bool:
        """Report whether ``line`` contains a match of the pattern."""
        return self._regex is None or self._regex.search(line) is not None

    def pattern(self) -> str:
        """Return the original pattern, or an empty string when there is none."""
        return self._source if self._regex is not None else ""


class Multi:
    """Several matchers that must all match (AND); empty matches everything."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._matchers = [Matcher(p) for p in patterns if p]

    def match(self, line: str) -> bool:
        """Report whether ``line`` satisfies every pattern."""
        return all(m.match(line) for m in self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)