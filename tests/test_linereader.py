import io

import pytest

from gribchik.linereader import LineReader

SAMPLES = [
    "",
    "one line without newline",
    "a\nb\nc\n",
    "first\n\nthird\nlast",
    "\n\n\n",
    "x" * 100 + "\n" + "y" * 50,
]


@pytest.mark.parametrize("data", SAMPLES)
@pytest.mark.parametrize("size", [1, 2, 5, 42, 1000])
def test_text_round_trip(data, size):
    lines = list(LineReader(io.StringIO(data), size))
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


@pytest.mark.parametrize("data", SAMPLES)
@pytest.mark.parametrize("size", [1, 3, 42])
def test_bytes_round_trip(data, size):
    raw = data.encode()
    lines = list(LineReader(io.BytesIO(raw), size))
    assert b"".join(lines) == raw
    assert lines == raw.splitlines(keepends=True)


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_lines_then_none():
    reader = LineReader(io.StringIO("ab\ncd"), 3)
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_stops_reading_at_first_newline():
    stream = io.BytesIO(b"ab\ncd\nef\n")
    reader = LineReader(stream, 1)
    assert reader.read_line() == b"ab\n"
    assert stream.tell() == 3


def test_buffered_line_served_without_reading():
    stream = io.BytesIO(b"a\nb\nc\n")
    reader = LineReader(stream, 100)
    assert reader.read_line() == b"a\n"
    position = stream.tell()
    assert reader.read_line() == b"b\n"
    assert stream.tell() == position


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("read failed")


def test_read_error_propagates_and_discards_stash():
    stream = _FailingStream()
    reader = LineReader(stream, 4)
    with pytest.raises(OSError):
        reader.read_line()
    with pytest.raises(OSError):
        reader.read_line()
    assert stream.calls == 3