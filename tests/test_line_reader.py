import io

import pytest

from fractol.line_reader import BUFFER_SIZE, LineReader


@pytest.mark.parametrize("size", [1, 2, 3, BUFFER_SIZE, 1000])
def test_lines_keep_newlines(size):
    reader = LineReader(io.StringIO("first\nsecond\nthird\n"), size)
    assert reader.read_line() == "first\n"
    assert reader.read_line() == "second\n"
    assert reader.read_line() == "third\n"
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [1, 4, BUFFER_SIZE])
def test_last_line_without_newline(size):
    reader = LineReader(io.StringIO("alpha\nbeta"), size)
    assert list(reader) == ["alpha\n", "beta"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines():
    reader = LineReader(io.StringIO("\n\n"), 5)
    assert list(reader) == ["\n", "\n"]


def test_line_longer_than_buffer():
    text = "x" * 500 + "\n" + "y" * 3
    assert list(LineReader(io.StringIO(text), 7)) == ["x" * 500 + "\n", "y" * 3]


def test_joined_lines_reproduce_input():
    text = "one\ntwo\n\nthree\nfour"
    assert "".join(LineReader(io.StringIO(text), 3)) == text


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"ab\ncd\n"), 2)
    assert list(reader) == [b"ab\n", b"cd\n"]


def test_reads_again_after_end_of_stream():
    stream = io.StringIO()
    reader = LineReader(stream, 4)
    assert reader.read_line() is None
    stream.write("late\n")
    stream.seek(0)
    assert reader.read_line() == "late\n"


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), size)


def test_read_error_propagates():
    class Broken(io.StringIO):
        def read(self, size=-1):
            raise OSError("read failed")

    with pytest.raises(OSError):
        LineReader(Broken()).read_line()