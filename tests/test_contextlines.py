from logslice.contextlines import ContextBuffer, Line


def _lines(count):
    return [Line(i, f"line {i}") for i in range(1, count + 1)]


def test_no_context_emits_only_matches():
    buf = ContextBuffer(0, 0)
    lines = _lines(5)
    emitted = []
    for line in lines:
        emitted.extend(buf.feed(line, line.number == 3))
    assert emitted == [lines[2]]


def test_negative_counts_clamped():
    buf = ContextBuffer(-3, -2)
    assert buf.before == 0
    assert buf.after == 0
    lines = _lines(2)
    assert buf.feed(lines[0], False) == []
    assert buf.feed(lines[1], True) == [lines[1]]


def test_before_context_flushed_in_order():
    buf = ContextBuffer(2, 0)
    lines = _lines(4)
    for line in lines[:3]:
        assert buf.feed(line, False) == []
    assert buf.feed(lines[3], True) == [lines[1], lines[2], lines[3]]


def test_after_context_emitted():
    buf = ContextBuffer(0, 2)
    lines = _lines(5)
    assert buf.feed(lines[0], True) == [lines[0]]
    assert buf.feed(lines[1], False) == [lines[1]]
    assert buf.feed(lines[2], False) == [lines[2]]
    assert buf.feed(lines[3], False) == []


def test_emitted_lines_are_ordered_and_unique():
    buf = ContextBuffer(2, 1)
    lines = _lines(20)
    matches = {4, 5, 12, 19}
    emitted = []
    for line in lines:
        emitted.extend(buf.feed(line, line.number in matches))
    numbers = [line.number for line in emitted]
    assert numbers == sorted(set(numbers))
    assert matches <= set(numbers)


def test_before_context_not_repeated_after_flush():
    buf = ContextBuffer(3, 0)
    lines = _lines(3)
    buf.feed(lines[0], False)
    first = buf.feed(lines[1], True)
    second = buf.feed(lines[2], True)
    assert first == [lines[0], lines[1]]
    assert second == [lines[2]]