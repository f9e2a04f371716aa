"""Counters for lines read, lines matched and files processed.

    stats = Stats()
    stats.add_file()
    stats.add_read(lines_scanned)
    stats.add_matched(lines_emitted)
    stats.finish()
    stats.write(sys.stderr)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TextIO


def format_duration(duration: timedelta) -> str:
    """Render ``duration`` rounded to milliseconds, e.g. ``12ms`` or ``1m2.5s``."""
    total_ms = round(duration.total_seconds() * 1000)
    if total_ms == 0:
        return "0s"
    sign = "-" if total_ms < 0 else ""
    total_ms = abs(total_ms)
    if total_ms < 1000:
        return f"{sign}{total_ms}ms"
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    text = sign
    if hours:
        text += f"{hours}h"
    if hours or minutes:
        text += f"{minutes}m"
    if millis:
        text += f"{seconds}.{millis:03d}".rstrip("0")
    else:
        text += str(seconds)
    return text + "s"


@dataclass(frozen=True)
class Snapshot:
    """An immutable copy of the counters at one moment."""

    files: int
    lines_read: int
    lines_matched: int
    started_at: datetime
    finished_at: datetime | None


class Stats:
    """Processing counters; updates are serialised by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.lines_read = 0
        self.lines_matched = 0
        self.files_read = 0
        self.started_at = datetime.now(timezone.utc)
        self.finished_at: datetime | None = None

    def finish(self) -> None:
        """Record the completion time."""
        with self._lock:
            self.finished_at = datetime.now(timezone.utc)

    def elapsed(self) -> timedelta:
        """Return the time from start to finish, or to now if not finished."""
        with self._lock:
            end = self.finished_at
        if end is None:
            end = datetime.now(timezone.utc)
        return end - self.started_at

    def add_file(self) -> None:
        """Count one more file."""
        with self._lock:
            self.files_read += 1

    def add_read(self, n: int) -> None:
        """Add ``n`` to the lines-read count."""
        with self._lock:
            self.lines_read += n

    def add_matched(self, n: int) -> None:
        """Add ``n`` to the lines-matched count."""
        with self._lock:
            self.lines_matched += n

    def write(self, stream: TextIO) -> None:
        """Write a human-readable summary to ``stream``."""
        snap = self.snapshot()
        stream.write(
            f"files read   : {snap.files}\n"
            f"lines read   : {snap.lines_read}\n"
            f"lines matched: {snap.lines_matched}\n"
            f"elapsed      : {format_duration(self.elapsed())}\n"
        )

    def snapshot(self) -> Snapshot:
        """Return a consistent copy of the current values."""
        with self._lock:
            return Snapshot(
                files=self.files_read,
                lines_read=self.lines_read,
                lines_matched=self.lines_matched,
                started_at=self.started_at,
                finished_at=self.finished_at,
            )