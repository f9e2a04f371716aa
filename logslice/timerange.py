"""Inclusive time windows used to filter log lines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


class InvalidRangeError(ValueError):
    """Raised when a range's start lies after its end."""


def _format_rfc3339(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset()
    if offset is None or offset == timedelta(0):
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class TimeRange:
    """An inclusive window [start, end]; a missing bound is unbounded."""

    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise InvalidRangeError("timerange: start must be before or equal to end")

    def contains(self, moment: datetime) -> bool:
        """Report whether ``moment`` falls within the range."""
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True

    def is_unbounded(self) -> bool:
        """Report whether neither side of the range is constrained."""
        return self.start is None and self.end is None

    def __str__(self) -> str:
        start = "*" if self.start is None else _format_rfc3339(self.start)
        end = "*" if self.end is None else _format_rfc3339(self.end)
        return f"[{start}, {end}]"