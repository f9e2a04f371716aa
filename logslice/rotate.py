"""Detecting rotated log files by inode changes or size reductions."""

from __future__ import annotations

import os


class RotatedError(Exception):
    """Raised when a log file has been rotated."""

    def __init__(self, message: str = "log file has been rotated") -> None:
        super().__init__(message)


class RotationDetector:
    """Remembers a file's identity and size so rotation can be detected.

    The file is examined on construction; a missing file raises OSError.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        info = os.stat(self.path)
        self._inode = info.st_ino
        self._size = info.st_size

    def check(self) -> None:
        """Raise RotatedError if the file was replaced or shrank.

        Errors from examining the file (such as it being deleted) propagate
        as OSError.
        """
        info = os.stat(self.path)
        if info.st_ino != self._inode or info.st_size < self._size:
            raise RotatedError()

    def reset(self) -> None:
        """Take the file's current state as the new baseline."""
        info = os.stat(self.path)
        self._inode = info.st_ino
        self._size = info.st_size


def is_rotated(err: BaseException | None) -> bool:
    """Report whether ``err`` signals a rotation."""
    return isinstance(err, RotatedError)