import io

from logslice.progress import ProgressReporter


def test_file_start_verbose_prints_line():
    buf = io.StringIO()
    reporter = ProgressReporter(buf, 3, True)
    reporter.file_start("foo.log")
    assert buf.getvalue() == "[1/3] processing foo.log\n"


def test_file_start_non_verbose_silent():
    buf = io.StringIO()
    reporter = ProgressReporter(buf, 1, False)
    reporter.file_start("foo.log")
    assert buf.getvalue() == ""


def test_file_done_verbose_prints_counts():
    buf = io.StringIO()
    reporter = ProgressReporter(buf, 2, True)
    reporter.file_start("bar.log")
    buf.seek(0)
    buf.truncate()
    reporter.file_done("bar.log", 100, 42)
    out = buf.getvalue()
    assert "100" in out
    assert "42" in out
    assert out == "[1/2] done    bar.log — read 100, matched 42\n"


def test_file_done_non_verbose_silent():
    buf = io.StringIO()
    reporter = ProgressReporter(buf, 1, False)
    reporter.file_start("bar.log")
    reporter.file_done("bar.log", 50, 10)
    assert buf.getvalue() == ""


def test_error_always_prints():
    buf = io.StringIO()
    reporter = ProgressReporter(buf, 1, False)
    reporter.error("missing.log", FileNotFoundError("file not found"))
    out = buf.getvalue()
    assert "missing.log" in out
    assert "file not found" in out
    assert out == "error: missing.log: file not found\n"


def test_counter_increments_across_files():
    buf = io.StringIO()
    reporter = ProgressReporter(buf, 3, True)
    for name in ["a.log", "b.log", "c.log"]:
        reporter.file_start(name)
    assert "3/3" in buf.getvalue()
    assert buf.getvalue().count("\n") == 3