"""Per-file progress messages written while files are processed."""

from __future__ import annotations

import threading
from typing import TextIO


class ProgressReporter:
    """Writes start and completion messages for each file to ``stream``.

    Start and completion messages appear only in verbose mode; errors are
    always written.
    """

    def __init__(self, stream: TextIO, total: int, verbose: bool = False) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self.total = total
        self.verbose = verbose
        self._current = 0

    def file_start(self, path: str) -> None:
        """Note that processing of ``path`` has begun."""
        with self._lock:
            self._current += 1
            if self.verbose:
                self._stream.write(f"[{self._current}/{self.total}] processing {path}\n")

    def file_done(self, path: str, read: int, matched: int) -> None:
        """Summarise ``path`` after processing: lines read and lines matched."""
        with self._lock:
            if self.verbose:
                self._stream.write(
                    f"[{self._current}/{self.total}] done    {path} — "
                    f"read {read}, matched {matched}\n"
                )

    def error(self, path: str, err: BaseException) -> None:
        """Report an error for ``path``."""
        with self._lock:
            self._stream.write(f"error: {path}: {err}\n")