import os

import pytest

from improvedlib.reader import LineReader, get_next_line, reset

CONTENT = b"first line\nsecond\n\nfourth line is longer than the rest\nlast"


@pytest.fixture
def make_fd(tmp_path):
    opened = []

    def _make(data, name="data.txt"):
        path = tmp_path / name
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _make
    for fd in opened:
        reset(fd)
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.mark.parametrize("size", [1, 3, 42, 1000])
def test_lines_match_splitlines(make_fd, size):
    fd = make_fd(CONTENT)
    assert list(LineReader(fd, size)) == CONTENT.splitlines(keepends=True)


def test_read_line_returns_none_at_end(make_fd):
    fd = make_fd(b"only\n")
    reader = LineReader(fd, 2)
    assert reader.read_line() == b"only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_last_line_without_newline(make_fd):
    fd = make_fd(b"a\nb")
    reader = LineReader(fd, 10)
    lines = [reader.read_line(), reader.read_line(), reader.read_line()]
    assert lines == [b"a\n", b"b", None]


def test_empty_file(make_fd):
    fd = make_fd(b"")
    assert LineReader(fd).read_line() is None


def test_joined_lines_rebuild_content(make_fd):
    fd = make_fd(CONTENT)
    assert b"".join(LineReader(fd, 5)) == CONTENT


@pytest.mark.parametrize("fd", [-1, 1025])
def test_invalid_fd(fd):
    with pytest.raises(ValueError):
        LineReader(fd)
    with pytest.raises(ValueError):
        get_next_line(fd)


def test_invalid_buffer_size(make_fd):
    fd = make_fd(CONTENT)
    with pytest.raises(ValueError):
        LineReader(fd, 0)


def test_get_next_line_reads_in_order(make_fd):
    fd = make_fd(CONTENT)
    lines = []
    while (line := get_next_line(fd)) is not None:
        lines.append(line)
    assert lines == CONTENT.splitlines(keepends=True)


def test_get_next_line_keeps_descriptors_apart(make_fd):
    one = make_fd(b"a1\na2\n", "one.txt")
    two = make_fd(b"b1\nb2\n", "two.txt")
    got = [get_next_line(one), get_next_line(two), get_next_line(one), get_next_line(two)]
    assert got == [b"a1\n", b"b1\n", b"a2\n", b"b2\n"]
    assert get_next_line(one) is None
    assert get_next_line(two) is None


def test_reset_discards_buffered_data(make_fd):
    fd = make_fd(b"x\ny\n")
    assert get_next_line(fd) == b"x\n"
    reset(fd)
    assert get_next_line(fd) is None


def test_read_error_is_raised():
    r, w = os.pipe()
    try:
        os.write(w, b"a\nb")
        reader = LineReader(r, 64)
        assert reader.read_line() == b"a\n"
    finally:
        os.close(w)
        os.close(r)
    with pytest.raises(OSError):
        reader.read_line()