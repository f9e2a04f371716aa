"""Selecting fields from log lines split on a separator."""

from __future__ import annotations

from collections.abc import Iterable


class FieldExtractor:
    """Splits lines on ``sep`` and keeps the fields at 1-based ``indices``.

    With no indices, lines pass through unchanged. Indices beyond a line's
    field count are skipped.
    """

    def __init__(self, sep: str = " ", indices: Iterable[int] = ()) -> None:
        self.sep = sep or " "
        chosen = tuple(indices or ())
        for index in chosen:
            if index < 1:
                raise ValueError(f"fieldextract: index must be >= 1, got {index}")
        self.indices = chosen

    def apply(self, line: str) -> str:
        """Return the selected fields of ``line`` joined by the separator."""
        if not self.indices:
            return line
        parts = line.split(self.sep)
        return self.sep.join(parts[i - 1] for i in self.indices if i <= len(parts))

    def fields(self, line: str) -> int:
        """Return the number of fields in ``line``."""
        return len(line.split(self.sep))