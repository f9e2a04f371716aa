from datetime import datetime, timedelta, timezone

import pytest

from logslice.logfilter import LogFilter
from logslice.timerange import InvalidRangeError

BASE = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
START = BASE
END = BASE + timedelta(hours=2)


def test_match_no_filters():
    assert LogFilter().match("any log line")


def test_match_pattern():
    log_filter = LogFilter(pattern="ERROR")
    assert log_filter.match("2024-01-15 10:30:00 ERROR something broke")
    assert not log_filter.match("2024-01-15 10:30:00 INFO all good")


def test_match_time_range_inside():
    log_filter = LogFilter(start=START, end=END)
    assert log_filter.match("2024-01-15 11:00:00 INFO within range")


def test_match_time_range_outside():
    log_filter = LogFilter(start=START, end=END)
    assert not log_filter.match("2024-01-15 13:00:00 INFO outside range")


def test_match_time_range_unparsable_line():
    log_filter = LogFilter(start=START, end=END)
    assert not log_filter.match("no timestamp here")


def test_match_pattern_and_time_range():
    log_filter = LogFilter(start=START, end=END, pattern="WARN")
    assert log_filter.match("2024-01-15 10:45:00 WARN disk usage high")
    assert not log_filter.match("2024-01-15 13:00:00 WARN too late")
    assert not log_filter.match("2024-01-15 10:45:00 INFO no pattern")


def test_invalid_range_raises():
    with pytest.raises(InvalidRangeError):
        LogFilter(start=END, end=START)


def test_bounds_are_inclusive():
    log_filter = LogFilter(start=START, end=END)
    assert log_filter.match("2024-01-15 10:00:00 first")
    assert log_filter.match("2024-01-15 12:00:00 last")


def test_naive_bounds_read_in_location():
    log_filter = LogFilter(start=datetime(2024, 1, 15, 10), end=datetime(2024, 1, 15, 12))
    assert log_filter.match("2024-01-15T11:00:00Z ok")
    assert not log_filter.match("2024-01-15T09:00:00Z early")


def test_only_start_bound():
    log_filter = LogFilter(start=START)
    assert log_filter.match("2030-01-01 00:00:00 far future")
    assert not log_filter.match("2020-01-01 00:00:00 past")