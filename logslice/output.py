"""Buffered writing of log lines with optional line numbers and prefix.

    writer = OutputWriter(sys.stdout, show_line_numbers=True, prefix="[match] ")
    writer.write_line(12, "2024-01-01 ERROR connection refused")
    writer.flush()
"""

from __future__ import annotations

from types import TracebackType
from typing import TextIO

_BUFFER_SIZE = 4096


class OutputWriter:
    """Formats lines and writes them to ``dst`` through a buffer."""

    def __init__(self, dst: TextIO, show_line_numbers: bool = False, prefix: str = "") -> None:
        self._dst = dst
        self.show_line_numbers = show_line_numbers
        self.prefix = prefix
        self._pending: list[str] = []
        self._pending_size = 0

    def write_line(self, line_num: int, line: str) -> None:
        """Queue ``line``, which appeared at 1-based ``line_num`` in its source."""
        number = f"{line_num}: " if self.show_line_numbers else ""
        formatted = f"{self.prefix}{number}{line}\n"
        self._pending.append(formatted)
        self._pending_size += len(formatted)
        if self._pending_size >= _BUFFER_SIZE:
            self.flush()

    def flush(self) -> None:
        """Write every queued line to the destination."""
        if self._pending:
            self._dst.write("".join(self._pending))
            self._pending.clear()
            self._pending_size = 0
        flush = getattr(self._dst, "flush", None)
        if flush is not None:
            flush()

    def __enter__(self) -> OutputWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.flush()