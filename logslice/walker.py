"""Expanding files and directories into a sorted list of log files.

Plain file paths are kept as given; directories are expanded into the files
they contain. With suffixes set, only files whose names end with one of them
are kept. In recursive mode sub-directories are descended into; otherwise
only a directory's immediate files are considered.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator


class Walker:
    """Turns a mix of file and directory paths into file paths."""

    def __init__(self, recursive: bool = False, *suffixes: str) -> None:
        self.recursive = recursive
        self.suffixes = tuple(suffixes)

    def expand(self, paths: Iterable[str | os.PathLike[str]]) -> list[str]:
        """Return the matching files under ``paths``, sorted.

        A path that does not exist raises OSError.
        """
        results: list[str] = []
        for raw in paths:
            path = os.fspath(raw)
            if os.path.isdir(path):
                results.extend(self._walk(path))
                continue
            os.stat(path)
            if self._matches(os.path.basename(path)):
                results.append(path)
        return sorted(results)

    def _walk(self, root: str) -> Iterator[str]:
        with os.scandir(root) as entries:
            children = sorted(entries, key=lambda entry: entry.name)
        for entry in children:
            if entry.is_dir(follow_symlinks=False):
                if self.recursive:
                    yield from self._walk(entry.path)
            elif self._matches(entry.name):
                yield entry.path

    def _matches(self, name: str) -> bool:
        return not self.suffixes or name.endswith(self.suffixes)