"""Command-line configuration for logslice.

``parse`` reads a list of arguments (such as ``sys.argv[1:]``) into a Config.
Long flags are accepted with one or two leading dashes:

    --pattern            regex filter applied to each log line
    --start / --since    lower bound timestamp (inclusive)
    --end / --until      upper bound timestamp (inclusive)
    --layout / --time-format
                         explicit reference-time layout for the bounds
    --max-lines          cap on output lines (0 = unlimited)
    --line-numbers       prepend line numbers to output
    --prefix             prepend a custom string to every output line

Without an explicit layout, common layouts are tried in turn (RFC 3339,
ISO 8601 variants, US dates). ``parse`` does not validate; call ``validate``.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import NoReturn, TextIO

from logslice.timeparser import RFC3339, Parser, TimeParseError

KNOWN_FORMATS: tuple[str, ...] = (
    RFC3339,
    "2006-01-02T15:04:05",
    "2006-01-02 15:04:05",
    "2006-01-02",
    "01/02/2006 15:04:05",
    "01/02/2006",
)

_UTC_PARSER = Parser(timezone.utc)


@dataclass
class Config:
    """The resolved configuration for one logslice run."""

    files: list[str] = field(default_factory=list)

    pattern: str = ""
    start: datetime | None = None
    end: datetime | None = None
    layout: str = ""

    max_lines: int = 0
    line_numbers: bool = False
    prefix: str = ""
    head: int = 0
    tail: int = 0
    count_only: bool = False
    format: str = "plain"
    color: bool = False

    recursive: bool = False
    suffixes: list[str] = field(default_factory=list)
    verbose: bool = False
    stats: bool = False
    workers: int = 1

    def head_lines(self) -> int:
        """Return the number of leading lines to emit, 0 meaning no limit."""
        return self.head

    def tail_lines(self) -> int:
        """Return the number of trailing lines to emit; negatives count as 0."""
        return max(self.tail, 0)


class ValidationError(ValueError):
    """A configuration value that breaks a constraint."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f'config: invalid field "{field_name}": {message}')
        self.field = field_name
        self.message = message


class _FlagParser(argparse.ArgumentParser):
    def __init__(self, out: TextIO) -> None:
        super().__init__(prog="logslice", add_help=False, allow_abbrev=False)
        self._out = out

    def flag(self, *names: str, **kwargs: object) -> None:
        options = [form for name in names for form in (f"-{name}", f"--{name}")]
        self.add_argument(*options, **kwargs)  # type: ignore[arg-type]

    def error(self, message: str) -> NoReturn:
        self.print_usage(self._out)
        raise ValueError(f"logslice: {message}")


def _build_parser(out: TextIO) -> _FlagParser:
    parser = _FlagParser(out)
    parser.flag("h", "help", dest="help", action="store_true", help="show this help")
    parser.flag("pattern", dest="pattern", default="", help="regex pattern to match against log lines")
    parser.flag("start", "since", dest="start", default="", help="start of time range (RFC3339 or date)")
    parser.flag("end", "until", dest="end", default="", help="end of time range (RFC3339 or date)")
    parser.flag("layout", "time-format", dest="layout", default="",
                help="explicit time layout for parsing timestamps")
    parser.flag("max-lines", dest="max_lines", type=int, default=0,
                help="maximum number of matching lines to output (0 = unlimited)")
    parser.flag("line-numbers", dest="line_numbers", action="store_true",
                help="prefix each output line with its line number")
    parser.flag("prefix", dest="prefix", default="", help="static string prefix for every output line")
    parser.flag("head", "H", dest="head", type=int, default=0, help="emit only the first N lines")
    parser.flag("tail", dest="tail", type=int, default=0, help="emit only the last N lines")
    parser.flag("count", "c", dest="count_only", action="store_true",
                help="print only a count of matching lines per file")
    parser.flag("format", dest="format", default="plain", help="output format: plain, json, tsv")
    parser.flag("f", dest="short_format", default="plain", help="output format shorthand")
    parser.flag("color", dest="color", action="store_true",
                help="enable ANSI colour highlighting of matched patterns")
    parser.flag("colour", dest="colour", action="store_true", help="alias for --color")
    parser.flag("recursive", dest="recursive", action="store_true", help="recurse into directories")
    parser.flag("suffix", dest="suffix", default=".log",
                help="comma-separated file suffixes when expanding directories")
    parser.flag("verbose", dest="verbose", action="store_true", help="print verbose progress information")
    parser.flag("stats", dest="stats", action="store_true", help="print processing statistics after completion")
    parser.flag("workers", dest="workers", type=int, default=1, help="number of worker threads")
    parser.add_argument("files", nargs="*")
    return parser


def split_comma(text: str) -> list[str]:
    """Split ``text`` on commas, keeping empty parts."""
    return text.split(",")


def _split_suffixes(text: str) -> list[str]:
    if not text:
        return []
    return [part for part in split_comma(text) if part]


def parse_time(value: str, layout: str = "") -> datetime:
    """Parse ``value`` with ``layout``, or with the first known layout that fits.

    The result is in UTC. Raises TimeParseError when nothing fits.
    """
    if layout:
        try:
            moment = _UTC_PARSER.parse_with_format(layout, value)
        except TimeParseError as exc:
            raise TimeParseError(
                f"cannot parse {value!r} with format {layout!r}: {exc}"
            ) from exc
        return moment.astimezone(timezone.utc)
    for known in KNOWN_FORMATS:
        try:
            return _UTC_PARSER.parse_with_format(known, value).astimezone(timezone.utc)
        except TimeParseError:
            continue
    raise TimeParseError(f"cannot parse timestamp {value!r}: no matching format found")


def parse(args: list[str], out: TextIO | None = None) -> Config:
    """Read flags from ``args`` into a Config, writing usage text to ``out``.

    Raises ValueError for unknown flags, bad values, a help request, or
    timestamps that cannot be parsed.
    """
    stream = out if out is not None else sys.stderr
    parser = _build_parser(stream)
    ns = parser.parse_intermixed_args(list(args))
    if ns.help:
        parser.print_help(stream)
        raise ValueError("flag: help requested")

    fmt = ns.short_format if ns.short_format != "plain" else ns.format
    cfg = Config(
        files=list(ns.files),
        pattern=ns.pattern,
        layout=ns.layout,
        max_lines=ns.max_lines,
        line_numbers=ns.line_numbers,
        prefix=ns.prefix,
        head=ns.head,
        tail=ns.tail,
        count_only=ns.count_only,
        format=fmt,
        color=ns.color or ns.colour,
        recursive=ns.recursive,
        suffixes=_split_suffixes(ns.suffix),
        verbose=ns.verbose,
        stats=ns.stats,
        workers=ns.workers,
    )
    if ns.start:
        cfg.start = parse_time(ns.start, ns.layout)
    if ns.end:
        cfg.end = parse_time(ns.end, ns.layout)
    return cfg


def validate(cfg: Config | None) -> None:
    """Check ``cfg`` for logical consistency, raising on the first violation."""
    if cfg is None:
        raise ValueError("config: nil config")
    if cfg.max_lines < 0:
        raise ValidationError("max-lines", "must be >= 0")
    if cfg.start is not None and cfg.end is not None and cfg.end < cfg.start:
        raise ValidationError("end", "must not be before start")
    if cfg.workers < 1:
        raise ValidationError("workers", "must be >= 1")


def count_only(cfg: Config | None) -> bool:
    """Report whether only a count of matching lines was requested."""
    return cfg is not None and cfg.count_only


def format_of(cfg: Config | None) -> str:
    """Return the output format, ``plain`` when there is no config."""
    return "plain" if cfg is None else cfg.format


def color_enabled(cfg: Config | None) -> bool:
    """Report whether colour output is enabled."""
    return cfg is not None and cfg.color