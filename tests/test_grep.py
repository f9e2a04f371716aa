import pytest

from logslice.grep import Matcher, Multi, PatternError


def test_empty_pattern_matches_all():
    m = Matcher("")
    assert all(m.match(line) for line in ["hello world", "", "2024-01-01 ERROR foo"])


def test_invalid_pattern():
    with pytest.raises(PatternError):
        Matcher("[invalid")


def test_pattern_matches():
    m = Matcher("ERROR")
    assert m.match("2024-01-01 ERROR something failed")
    assert not m.match("2024-01-01 INFO all good")


def test_regex_pattern():
    m = Matcher(r"^\d{4}-\d{2}-\d{2}")
    assert m.match("2024-06-15 INFO started")
    assert not m.match("INFO no date here")


def test_pattern_returns_original():
    assert Matcher("ERROR|WARN").pattern() == "ERROR|WARN"


def test_pattern_empty_when_no_pattern():
    assert Matcher("").pattern() == ""


def test_multi_empty():
    assert len(Multi([])) == 0


def test_multi_skips_empty_patterns():
    assert len(Multi(["", ""])) == 0


def test_multi_invalid_pattern():
    with pytest.raises(PatternError):
        Multi(["valid", "[bad"])


def test_multi_match_all():
    mu = Multi(["ERROR", "database"])
    assert mu.match("ERROR database connection refused")
    assert not mu.match("ERROR network timeout")
    assert not mu.match("INFO database ready")


def test_multi_empty_matches_all():
    mu = Multi([])
    assert all(mu.match(line) for line in ["anything", "", "ERROR foo"])


def test_multi_len():
    assert len(Multi(["a", "b", "c"])) == 3