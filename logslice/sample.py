"""Deterministic sampling of every Nth line."""

from __future__ import annotations


class Sampler:
    """Accepts one line in every ``n``."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"sample: n must be >= 1, got {n}")
        self._n = n
        self._counter = 0

    @property
    def n(self) -> int:
        """The sample interval."""
        return self._n

    def accept(self, line: str) -> bool:
        """Count the line and report whether it is the Nth one."""
        self._counter += 1
        return self._counter % self._n == 0

    def reset(self) -> None:
        """Start counting from zero again."""
        self._counter = 0