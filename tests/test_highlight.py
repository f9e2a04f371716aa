import pytest

from logslice.grep import PatternError
from logslice.highlight import Color, Highlighter


def test_empty_pattern_is_noop():
    h = Highlighter("", Color.YELLOW)
    assert h.enabled is False
    assert h.apply("hello world") == "hello world"


def test_invalid_pattern_raises():
    with pytest.raises(PatternError):
        Highlighter("[", Color.YELLOW)


def test_single_match():
    got = Highlighter("error", Color.RED).apply("an error occurred")
    assert "\033[31m" in got
    assert "error" in got
    assert "\033[0m" in got
    assert got == "an \033[31merror\033[0m occurred"


def test_no_match():
    line = "nothing to see here"
    assert Highlighter("xyz", Color.YELLOW).apply(line) == line


def test_default_color_yellow():
    h = Highlighter("warn", "unknown-color")
    assert h.color is Color.YELLOW
    assert "\033[33m" in h.apply("warn: disk low")


def test_color_name_case_insensitive():
    assert Highlighter("x", "RED").color is Color.RED


def test_regex_group():
    got = Highlighter(r"\d+", Color.CYAN).apply("pid=1234 code=500")
    assert got.count("\033[36m") == 2


def test_stripping_escapes_restores_line():
    line = "ERROR one ERROR two"
    got = Highlighter("ERROR", Color.RED).apply(line)
    assert got.replace("\033[31m", "").replace("\033[0m", "") == line