# logslice

`logslice` is a library of small pieces for pulling the lines you care about
out of log files. You can select lines by a time window, by a substring or
regular expression, or both. You can also limit, thin out and reshape the
lines you keep.

## Installation

```
pip install .
```

## What it does not do

The package installs no command, and it has no ready-made program that opens
files, runs them through the filters and prints the result. It also has no
helper for opening files, no end-to-end processing loop, no merging of several
streams into timestamp order, and no cancellation or signal handling. You read
the lines yourself and pass them through the pieces below.

## Example

```python
import sys
from datetime import datetime, timezone

from logslice.logfilter import LogFilter
from logslice.output import OutputWriter

start = datetime(2024, 1, 15, 10, tzinfo=timezone.utc)
end = datetime(2024, 1, 15, 12, tzinfo=timezone.utc)
flt = LogFilter(start=start, end=end, pattern="WARN")

flt.match("2024-01-15 10:45:00 WARN disk usage high")  # True

with open("app.log") as src, OutputWriter(sys.stdout, show_line_numbers=True) as out:
    for number, line in enumerate(src, 1):
        line = line.rstrip("\n")
        if flt.match(line):
            out.write_line(number, line)
```

## Modules

### Time

- `logslice.timeparser.Parser` reads timestamps. `parse` tries each layout in
  `SUPPORTED_FORMATS` in turn against the whole string. `parse_with_format`
  takes an explicit layout written with the reference moment
  `Mon Jan 2 15:04:05 MST 2006`, such as `"2006-01-02 15:04:05"`.
  `parse_leading` reads the timestamp at the start of a line. A timestamp
  without a zone is read in the parser's location, which is UTC by default.
  Failures raise `TimeParseError`.
  The supported forms include `2024-01-15T08:00:00Z`, `2024-01-15 08:00:00`,
  `2024-01-15 08:00:00.123`, `2024-01-15T08:00:00`, `2024-01-15` and
  `15/Jan/2024:08:00:00 +0000`.
- `logslice.timerange.TimeRange(start, end)` is an inclusive window. Either
  bound may be `None`, which leaves that side open. A start after the end
  raises `InvalidRangeError`. It provides `contains` and `is_unbounded`.
  `str()` gives for example `[*, *]`.

### Selecting lines

- `logslice.logfilter.LogFilter(start, end, pattern, location)` keeps lines
  that contain `pattern` (a plain substring). When a time window is set, it
  also requires the line's leading timestamp to fall inside the window. A line
  whose timestamp cannot be read is then rejected.
- `logslice.grep.Matcher(pattern)` matches a regular expression anywhere in a
  line. An empty pattern matches everything. `logslice.grep.Multi(patterns)`
  requires every pattern to match. A bad pattern raises `PatternError`.
- `logslice.inverse.InverseFilter(inner)` accepts what `inner.accept` rejects.

### Limiting and thinning

- `logslice.head.HeadLimiter(n)` accepts the first `n` lines.
  `logslice.head.read_all(lines, n)` returns at most `n` leading lines. A value
  of `n <= 0` means no limit.
- `logslice.tail.Tailer(n)` keeps the last `n` lines of a stream.
- `logslice.sample.Sampler(n)` accepts every `n`th line.
- `logslice.rate.RateLimiter(per_second)` accepts at most `per_second` lines
  in each one-second window.
- `logslice.unique.UniqueFilter(window)` passes the first occurrence of each
  line. The check can be limited to a sliding window of recent lines.
- `logslice.dedupe.DedupeFilter` is a thread-safe duplicate filter. It counts
  how often each line was suppressed.
- `logslice.contextlines.ContextBuffer(before, after)` emits lines of context
  around matches, as `grep -B` and `grep -A` do. The lines are `Line(number, text)`.

### Reshaping output

- `logslice.truncate.Truncator(max_len, suffix)` clips lines to `max_len`
  UTF-8 bytes, suffix included. It always cuts on a character boundary.
- `logslice.fieldextract.FieldExtractor(sep, indices)` keeps the fields at the
  given 1-based indices.
- `logslice.highlight.Highlighter(pattern, color)` wraps matches in ANSI colour
  escapes. The colours are `Color.YELLOW`, `Color.RED` and `Color.CYAN`.
  Unknown colour names fall back to yellow.
- `logslice.output.OutputWriter(dst, show_line_numbers, prefix)` writes lines
  as `PREFIX` + `N: ` + line, through a buffer. It flushes when used as a
  context manager.

### Files and statistics

- `logslice.walker.Walker(recursive, *suffixes)` expands files and directories
  into a sorted list of files. `expand` optionally filters by suffix and can
  descend into sub-directories.
- `logslice.rotate.RotationDetector(path)` raises `RotatedError` from `check()`
  when the file was replaced or shrank. `reset()` takes the current state as
  the new baseline. `is_rotated(err)` tests an exception.
- `logslice.count.LineCounter` and `logslice.count.Accumulator` count lines,
  the latter per file with a running total.
- `logslice.stats.Stats` collects files, lines read, lines matched and elapsed
  time. `logslice.reporter.Reporter` prints a one-line summary of it, plus
  start and finish times when verbose. `logslice.progress.ProgressReporter`
  writes per-file progress messages and errors.

### Configuration

`logslice.config.settings.parse(args, out)` reads command-line style
arguments into a `Config`. For example, `--pattern`, `--start`/`--since`,
`--end`/`--until`, `--layout`/`--time-format`, `--max-lines`, `--line-numbers`,
`--prefix`, `--head`, `--tail`, `--count`, `--format`, `--color`,
`--recursive`, `--suffix`, `--verbose`, `--stats` and `--workers`, followed by
file names. Bad input raises `ValueError`.

`validate(cfg)` raises `ValidationError` for a negative `max_lines`, an end
before the start, or fewer than one worker. `parse_time(value, layout)` reads
a bound in UTC.

Nothing in the package acts on a `Config`; it only holds the settings.

## Running the tests

```
pip install ".[test]"
pytest
```