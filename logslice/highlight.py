"""ANSI colour highlighting of pattern matches within log lines."""

from __future__ import annotations

import enum
import re

from logslice.grep import PatternError

RESET = "\033[0m"


class Color(str, enum.Enum):
    """Colour names accepted by Highlighter."""

    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"

    @property
    def ansi(self) -> str:
        """The escape sequence that switches to this colour."""
        return _ANSI[self]


_ANSI = {
    Color.YELLOW: "\033[33m",
    Color.RED: "\033[31m",
    Color.CYAN: "\033[36m",
}


def _resolve(color: str | Color) -> Color:
    try:
        return Color(str(color.value if isinstance(color, Color) else color).lower())
    except ValueError:
        return Color.YELLOW


class Highlighter:
    """Wraps every match of ``pattern`` in colour escapes.

    An empty pattern highlights nothing; unknown colours fall back to yellow.
    """

    def __init__(self, pattern: str, color: str | Color = Color.YELLOW) -> None:
        self._regex: re.Pattern[str] | None = None
        if pattern:
            try:
                self._regex = re.compile(pattern)
            except re.error as exc:
                raise PatternError(f"highlight: compile pattern {pattern!r}: {exc}") from exc
        self.color = _resolve(color)

    @property
    def enabled(self) -> bool:
        """Whether a pattern is set."""
        return self._regex is not None

    def apply(self, line: str) -> str:
        """Return ``line`` with every match wrapped in colour escapes."""
        if self._regex is None:
            return line
        opener = self.color.ansi
        return self._regex.sub(lambda m: f"{opener}{m.group(0)}{RESET}", line)