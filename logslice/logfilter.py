"""A filter combining a substring pattern with a time window.

Either constraint is optional; with neither, every line is accepted. When a
time window is set, the timestamp at the start of each line is parsed and
lines without one are rejected.

    log_filter = LogFilter(start=start, end=end, pattern="ERROR")
    matching = [line for line in lines if log_filter.match(line)]
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

from logslice.timeparser import Parser, TimeParseError
from logslice.timerange import TimeRange


def _localise(moment: datetime | None, location: tzinfo) -> datetime | None:
    if moment is None or moment.tzinfo is not None:
        return moment
    return moment.replace(tzinfo=location)


class LogFilter:
    """Accepts lines containing ``pattern`` whose timestamp lies in [start, end].

    Naive ``start`` and ``end`` values are read in ``location`` (UTC by
    default). Raises InvalidRangeError when start lies after end.
    """

    def __init__(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
        pattern: str = "",
        location: tzinfo | None = None,
    ) -> None:
        zone = location if location is not None else timezone.utc
        self.pattern = pattern
        self.time_range: TimeRange | None = None
        if start is not None or end is not None:
            self.time_range = TimeRange(_localise(start, zone), _localise(end, zone))
        self._parser = Parser(zone)

    def match(self, line: str) -> bool:
        """Report whether ``line`` passes every active constraint."""
        if self.pattern and self.pattern not in line:
            return False
        if self.time_range is None:
            return True
        try:
            moment = self._parser.parse_leading(line)
        except TimeParseError:
            return False
        return self.time_range.contains(moment)