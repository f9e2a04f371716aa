"""Timestamp parsing for log lines using reference-time layouts.

Layouts are written with the reference moment ``Mon Jan 2 15:04:05 MST 2006``
(for example ``"2006-01-02 15:04:05"``). Naive timestamps are interpreted in
the parser's location.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

RFC3339 = "2006-01-02T15:04:05Z07:00"
RFC3339_NANO = "2006-01-02T15:04:05.999999999Z07:00"

SUPPORTED_FORMATS: tuple[str, ...] = (
    RFC3339,
    RFC3339_NANO,
    "2006-01-02 15:04:05",
    "2006-01-02 15:04:05.999999999",
    "2006-01-02T15:04:05",
    "2006-01-02",
    "02/Jan/2006:15:04:05 -0700",
)

_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_MONTH_ABBRS = tuple(name[:3] for name in _MONTH_NAMES)
_WEEKDAY_NAMES = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)
_WEEKDAY_ABBRS = tuple(name[:3] for name in _WEEKDAY_NAMES)

_ZERO_KINDS = {
    "1": "month2",
    "2": "day2",
    "3": "hour12_2",
    "4": "minute2",
    "5": "second2",
    "6": "year2",
}
_OFFSET_SUFFIXES = ("070000", "07:00:00", "0700", "07:00", "07")

_FIELD_PATTERNS = {
    "year": r"\d{4}",
    "year2": r"\d{2}",
    "month": r"\d{1,2}",
    "month2": r"\d{2}",
    "month_abbr": "(?i:" + "|".join(_MONTH_ABBRS) + ")",
    "month_name": "(?i:" + "|".join(_MONTH_NAMES) + ")",
    "weekday_abbr": "(?i:" + "|".join(_WEEKDAY_ABBRS) + ")",
    "weekday_name": "(?i:" + "|".join(_WEEKDAY_NAMES) + ")",
    "day": r"\d{1,2}",
    "day2": r"\d{2}",
    "day_space": r" ?\d{1,2}",
    "hour": r"\d{1,2}",
    "hour12": r"\d{1,2}",
    "hour12_2": r"\d{2}",
    "minute": r"\d{1,2}",
    "minute2": r"\d{2}",
    "second": r"\d{1,2}",
    "second2": r"\d{2}",
    "ampm_upper": "AM|PM",
    "ampm_lower": "am|pm",
    "tz_abbr": "[A-Z]{3,5}",
    "frac_opt": r"[.,]\d+",
}


class TimeParseError(ValueError):
    """Raised when a string cannot be parsed as a timestamp."""


@dataclass(frozen=True)
class _Layout:
    regex: re.Pattern[str]
    fields: tuple[tuple[str, str, str], ...]


def _std_chunk(rest: str) -> tuple[str | None, int]:
    first, second = rest[0], rest[1:2]
    if first == "J":
        if rest.startswith("January"):
            return "month_name", 7
        if rest.startswith("Jan"):
            return "month_abbr", 3
    elif first == "M":
        if rest.startswith("Monday"):
            return "weekday_name", 6
        if rest.startswith("Mon"):
            return "weekday_abbr", 3
        if rest.startswith("MST"):
            return "tz_abbr", 3
    elif first == "0":
        if second in _ZERO_KINDS:
            return _ZERO_KINDS[second], 2
    elif first == "1":
        return ("hour", 2) if second == "5" else ("month", 1)
    elif first == "2":
        return ("year", 4) if rest.startswith("2006") else ("day", 1)
    elif first == "_":
        if rest.startswith("_2") and not rest.startswith("_2006"):
            return "day_space", 2
    elif first in "345":
        return {"3": "hour12", "4": "minute", "5": "second"}[first], 1
    elif first == "P" and second == "M":
        return "ampm_upper", 2
    elif first == "p" and second == "m":
        return "ampm_lower", 2
    elif first in "-Z":
        for suffix in _OFFSET_SUFFIXES:
            if rest.startswith(first + suffix):
                return "offset", 1 + len(suffix)
    elif first in ".,":
        if second in ("0", "9"):
            end = 1
            while end < len(rest) and rest[end] == second:
                end += 1
            if not (end < len(rest) and rest[end].isdigit()):
                return ("frac_fixed" if second == "0" else "frac_opt"), end
    return None, 1


def _tokenize(layout: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    literal: list[str] = []
    position = 0
    while position < len(layout):
        kind, width = _std_chunk(layout[position:])
        if kind is None:
            literal.append(layout[position])
            position += 1
            continue
        if literal:
            tokens.append(("literal", "".join(literal)))
            literal = []
        tokens.append((kind, layout[position:position + width]))
        position += width
    if literal:
        tokens.append(("literal", "".join(literal)))
    return tokens


def _literal_pattern(text: str) -> str:
    return "".join(
        " +" if piece and not piece.strip(" ") else re.escape(piece)
        for piece in re.split(r"( +)", text)
    )


def _field_pattern(kind: str, text: str) -> str:
    if kind == "frac_fixed":
        return r"[.,]\d{%d}" % (len(text) - 1)
    if kind == "offset":
        body = "[+-]" + "".join(r"\d" if ch.isdigit() else re.escape(ch) for ch in text[1:])
        return f"Z|{body}" if text[0] == "Z" else body
    return _FIELD_PATTERNS[kind]


@functools.lru_cache(maxsize=128)
def _compile(layout: str) -> _Layout:
    tokens = _tokenize(layout)
    parts: list[str] = []
    fields: list[tuple[str, str, str]] = []
    for index, (kind, text) in enumerate(tokens):
        if kind == "literal":
            parts.append(_literal_pattern(text))
            continue
        name = f"f{len(fields)}"
        optional = "?" if kind == "frac_opt" else ""
        parts.append(f"(?P<{name}>{_field_pattern(kind, text)}){optional}")
        fields.append((name, kind, text))
        if kind in ("second", "second2"):
            following = tokens[index + 1][0] if index + 1 < len(tokens) else None
            if following not in ("frac_fixed", "frac_opt"):
                name = f"f{len(fields)}"
                parts.append(f"(?P<{name}>{_FIELD_PATTERNS['frac_opt']})?")
                fields.append((name, "frac_opt", ""))
    return _Layout(re.compile("".join(parts)), tuple(fields))


def _parse_offset(value: str) -> tzinfo:
    if value == "Z":
        return timezone.utc
    sign = -1 if value[0] == "-" else 1
    digits = value[1:].replace(":", "")
    hours = int(digits[0:2])
    minutes = int(digits[2:4] or 0)
    seconds = int(digits[4:6] or 0)
    offset = sign * timedelta(hours=hours, minutes=minutes, seconds=seconds)
    if offset == timedelta(0):
        return timezone.utc
    return timezone(offset)


def _build(match: re.Match[str], layout: _Layout, location: tzinfo) -> datetime:
    year, month, day = 1, 1, 1
    hour = minute = second = micro = 0
    pm: bool | None = None
    zone: tzinfo | None = None
    abbreviation: str | None = None
    for name, kind, _ in layout.fields:
        value = match.group(name)
        if value is None:
            continue
        if kind == "year":
            year = int(value)
        elif kind == "year2":
            short = int(value)
            year = short + 1900 if short >= 69 else short + 2000
        elif kind in ("month", "month2"):
            month = int(value)
        elif kind == "month_abbr":
            month = _MONTH_ABBRS.index(value.lower()) + 1
        elif kind == "month_name":
            month = _MONTH_NAMES.index(value.lower()) + 1
        elif kind in ("day", "day2", "day_space"):
            day = int(value)
        elif kind == "hour":
            hour = int(value)
        elif kind in ("hour12", "hour12_2"):
            hour = int(value)
            if hour > 12:
                raise ValueError("hour out of range")
        elif kind in ("minute", "minute2"):
            minute = int(value)
        elif kind in ("second", "second2"):
            second = int(value)
        elif kind in ("frac_fixed", "frac_opt"):
            micro = int(value[1:7].ljust(6, "0"))
        elif kind in ("ampm_upper", "ampm_lower"):
            pm = value.lower() == "pm"
        elif kind == "offset":
            zone = _parse_offset(value)
        elif kind == "tz_abbr":
            abbreviation = value
    if pm is True and hour < 12:
        hour += 12
    elif pm is False and hour == 12:
        hour = 0
    moment = datetime(year, month, day, hour, minute, second, micro)
    if zone is not None:
        return moment.replace(tzinfo=zone)
    if abbreviation is not None:
        local = moment.replace(tzinfo=location)
        if abbreviation != "UTC" and local.tzname() == abbreviation:
            return local
        return moment.replace(tzinfo=timezone.utc)
    return moment.replace(tzinfo=location)


class Parser:
    """Parses timestamps, reading zone-less values in a fixed location."""

    def __init__(self, location: tzinfo | None = None) -> None:
        self.location: tzinfo = location if location is not None else timezone.utc

    def parse(self, text: str) -> datetime:
        """Parse ``text`` with the first of SUPPORTED_FORMATS that fits it whole."""
        for layout in SUPPORTED_FORMATS:
            try:
                return self.parse_with_format(layout, text)
            except TimeParseError:
                continue
        raise TimeParseError(f"timeparser: unrecognised time string {text!r}")

    def parse_with_format(self, layout: str, text: str) -> datetime:
        """Parse ``text`` with an explicit reference-time layout."""
        compiled = _compile(layout)
        match = compiled.regex.fullmatch(text)
        if match is None:
            raise TimeParseError(
                f"timeparser: cannot parse {text!r} with layout {layout!r}"
            )
        try:
            return _build(match, compiled, self.location)
        except ValueError as exc:
            raise TimeParseError(
                f"timeparser: cannot parse {text!r} with layout {layout!r}: {exc}"
            ) from exc

    def parse_leading(self, line: str) -> datetime:
        """Parse the timestamp that starts ``line``, ignoring the text after it."""
        for layout in SUPPORTED_FORMATS:
            compiled = _compile(layout)
            match = compiled.regex.match(line)
            if match is None:
                continue
            end = match.end()
            if end < len(line) and line[end].isalnum():
                continue
            try:
                return _build(match, compiled, self.location)
            except ValueError:
                continue
        raise TimeParseError(f"timeparser: no timestamp at start of {line!r}")