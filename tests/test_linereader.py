import io
import os

import pytest

from libmini.linereader import LineReader


def test_lines_from_bytes():
    reader = LineReader(io.BytesIO(b"a\nbb\nccc"), 10)
    assert reader.read_line() == b"a\n"
    assert reader.read_line() == b"bb\n"
    assert reader.read_line() == b"ccc"
    assert reader.read_line() is None


def test_empty_source():
    assert LineReader(io.BytesIO(b""), 4).read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 10, 1000])
def test_round_trip_any_buffer_size(size):
    data = b"first line\n\nthird is longer than the buffer\nlast"
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert lines == data.splitlines(keepends=True)


def test_text_source():
    text = "alpha\nbeta\n"
    lines = list(LineReader(io.StringIO(text), 3))
    assert lines == text.splitlines(keepends=True)


def test_default_buffer_size():
    data = b"x" * 37 + b"\ny"
    assert list(LineReader(io.BytesIO(data))) == [b"x" * 37 + b"\n", b"y"]


def test_file_descriptor():
    read_end, write_end = os.pipe()
    os.write(write_end, b"one\ntwo\n")
    os.close(write_end)
    try:
        lines = list(LineReader(read_end, 3))
    finally:
        os.close(read_end)
    assert lines == [b"one\n", b"two\n"]


def test_interleaved_readers():
    first = LineReader(io.BytesIO(b"a1\na2\n"), 2)
    second = LineReader(io.BytesIO(b"b1\nb2\n"), 5)
    assert first.read_line() == b"a1\n"
    assert second.read_line() == b"b1\n"
    assert first.read_line() == b"a2\n"
    assert second.read_line() == b"b2\n"
    assert first.read_line() is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b""), 0)


def test_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1, 10)


def test_source_without_read():
    with pytest.raises(TypeError):
        LineReader(object(), 10)