"""Printing a summary of processing statistics.

The summary gives the file count, lines read, lines matched and elapsed
time; in verbose mode the start and finish timestamps follow it.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TextIO

from logslice.stats import Stats, format_duration

_UNSET_TIME = "0001-01-01T00:00:00Z"


def _rfc3339(moment: datetime | None) -> str:
    if moment is None:
        return _UNSET_TIME
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset()
    if offset is None or offset == timedelta(0):
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


class Reporter:
    """Writes statistics summaries to ``stream``."""

    def __init__(self, stream: TextIO, verbose: bool = False) -> None:
        self._stream = stream
        self.verbose = verbose

    def report(self, stats: Stats) -> None:
        """Write a summary of ``stats``; write failures propagate."""
        snap = stats.snapshot()
        self._stream.write(
            f"files: {snap.files}  read: {snap.lines_read}  "
            f"matched: {snap.lines_matched}  duration: {format_duration(stats.elapsed())}\n"
        )
        if self.verbose:
            self._stream.write(
                f"started: {_rfc3339(snap.started_at)}  "
                f"finished: {_rfc3339(snap.finished_at)}\n"
            )