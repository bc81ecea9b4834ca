import io

import pytest

from solong.linereader import LineReader, read_lines


class _RecordingStream:
    def __init__(self, data):
        self._inner = io.BytesIO(data)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self._inner.read(size)


def test_readline_sequence_bytes():
    reader = LineReader(io.BytesIO(b"ab\ncd\nef"), 10)
    assert reader.readline() == b"ab\n"
    assert reader.readline() == b"cd\n"
    assert reader.readline() == b"ef"
    assert reader.readline() is None
    assert reader.readline() is None


def test_readline_text_stream():
    reader = LineReader(io.StringIO("1111\n1P01\n"), 3)
    assert reader.readline() == "1111\n"
    assert reader.readline() == "1P01\n"
    assert reader.readline() is None


def test_trailing_newline_gives_no_empty_line():
    assert read_lines(io.BytesIO(b"x\n")) == [b"x\n"]


def test_empty_stream():
    assert LineReader(io.BytesIO(b"")).readline() is None
    assert read_lines(io.StringIO("")) == []


def test_blank_lines_preserved():
    assert read_lines(io.StringIO("\n\na\n")) == ["\n", "\n", "a\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 10, 64, 1000])
def test_lines_rejoin_to_input(size):
    data = b"11111\n1PCE1\n10001\n\n11111"
    lines = read_lines(io.BytesIO(data), size)
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_iteration_matches_read_lines():
    data = "a\nbb\nccc"
    assert list(LineReader(io.StringIO(data), 4)) == read_lines(io.StringIO(data), 4)


def test_reads_use_buffer_size():
    stream = _RecordingStream(b"line one\nline two\n")
    lines = read_lines(stream, 4)
    assert lines == [b"line one\n", b"line two\n"]
    assert stream.sizes
    assert set(stream.sizes) == {4}


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), size)