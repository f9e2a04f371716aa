"""Clipping long lines to a maximum byte length."""

from __future__ import annotations


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


class Truncator:
    """Clips lines longer than ``max_len`` bytes and appends ``suffix``.

    The suffix counts toward the limit, so output never exceeds ``max_len``
    bytes. A ``max_len`` of zero or less disables truncation.
    """

    def __init__(self, max_len: int, suffix: str = "...") -> None:
        self._max_len = max_len if max_len > 0 else 0
        encoded_suffix = suffix.encode("utf-8")
        if self._max_len and len(encoded_suffix) >= self._max_len:
            suffix = ""
        self._suffix = suffix
        self._suffix_len = len(suffix.encode("utf-8"))

    @property
    def enabled(self) -> bool:
        """Whether any truncation takes place."""
        return self._max_len > 0

    @property
    def suffix(self) -> str:
        """The text appended to clipped lines."""
        return self._suffix

    def apply(self, line: str) -> str:
        """Return ``line`` clipped on a character boundary when it is too long."""
        if not self._max_len:
            return line
        encoded = line.encode("utf-8")
        if len(encoded) <= self._max_len:
            return line
        cut = self._max_len - self._suffix_len
        while cut > 0 and _is_continuation(encoded[cut]):
            cut -= 1
        return encoded[:cut].decode("utf-8") + self._suffix

    def max_len(self) -> int:
        """Return the configured maximum length, or 0 when disabled."""
        return self._max_len