"""
Tests for the hex dump encoder.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from hxx.encoder import dump_bytes, format_line, hex_dump
from hxx.errors import StreamIOError
from hxx.streams import ByteSink, ByteSource, BytesSink, BytesSource


def test_hello_world():
    """Test the default layout on a short final chunk."""
    expected = "00000000: 4865 6c6c 6f20 776f 726c 64" + " " * 14 + "Hello world\n"
    assert dump_bytes(b"Hello world") == expected


def test_short_chunk_padding():
    """2 missing bytes: 4 hex pad + 1 group pad, then the two-space separator."""
    assert dump_bytes(b"AB", 4, 2) == "00000000: 4142" + " " * 7 + "AB\n"


def test_empty_input():
    """Empty input yields no lines at all."""
    assert dump_bytes(b"") == ""


def test_zero_cols_yields_nothing():
    assert dump_bytes(b"data", cols=0) == ""


def test_full_lines_and_offsets():
    """Test offsets on consecutive full lines."""
    data = bytes(range(32))
    lines = dump_bytes(data).splitlines()
    assert lines == [
        "00000000: 0001 0203 0405 0607 0809 0a0b 0c0d 0e0f  ................",
        "00000010: 1011 1213 1415 1617 1819 1a1b 1c1d 1e1f  ................",
    ]


def test_ascii_panel_range():
    """Only 0x20..0x7e are shown as themselves."""
    line = format_line(b"\x1f ~\x7f\xff", 0, 5, 1)
    assert line == "00000000: 1f 20 7e 7f ff  . ~.."


def test_lowercase_hex():
    assert format_line(b"\xab\xcd", 0xABCDEF, 2, 2) == "00abcdef: abcd  .."


def test_group_width_one():
    assert format_line(b"abc", 0, 4, 1) == "00000000: 61 62 63" + " " * 5 + "abc"


def test_group_wider_than_cols():
    """A single group spans the whole line."""
    assert format_line(b"abcd", 0, 4, 8) == "00000000: 61626364  abcd"


def test_uneven_grouping_keeps_formula():
    """cols=5, byte_groups=2: the group padding truncates like xxd."""
    full = format_line(b"abcde", 0, 5, 2)
    short = format_line(b"a", 5, 5, 2)
    assert full == "00000000: 6162 6364 65  abcde"
    # 4 missing bytes: 8 hex pad + 4 // 2 group pad
    assert short == "00000005: 61" + " " * 10 + "  a"


@pytest.mark.parametrize("cols,byte_groups", [(16, 2), (8, 4), (12, 3), (7, 7), (1, 1), (256, 256)])
def test_panel_alignment(cols, byte_groups):
    """The panel starts at the same column on every line."""
    data = bytes(range(256))
    full = format_line(data[:cols], 0, cols, byte_groups)
    for n in range(1, cols + 1):
        line = format_line(data[:n], 0, cols, byte_groups)
        # The panel is the last n characters
        assert len(line) - n == len(full) - cols


def test_offsets_are_cumulative():
    """Each line's offset is the number of bytes on the lines before it."""
    data = bytes(range(256)) * 3
    lines = dump_bytes(data, cols=10, byte_groups=3).splitlines()
    assert len(lines) == 77
    for k, line in enumerate(lines):
        assert int(line[:8], 16) == k * 10


def test_deterministic():
    data = b"\x00\x01binary\xfe\xff" * 50
    assert dump_bytes(data, 12, 4) == dump_bytes(data, 12, 4)


def test_returns_byte_count():
    sink = BytesSink()
    with BytesSource(b"x" * 40) as source:
        assert hex_dump(source, sink) == 40
    assert sink.getvalue().count(b"\n") == 3


class TrickleSource(ByteSource):
    """Hands out at most 3 bytes per read, like a slow pipe."""

    def __init__(self, data):
        self.data = data

    def read(self, size):
        chunk, self.data = self.data[:min(size, 3)], self.data[min(size, 3):]
        return chunk


def test_short_reads_are_filled():
    """Short reads in the middle of the stream do not produce short lines."""
    data = bytes(range(40))
    sink = BytesSink()
    hex_dump(TrickleSource(data), sink)
    assert sink.getvalue().decode("ascii") == dump_bytes(data)


class FailingSource(ByteSource):
    def read(self, size):
        raise StreamIOError(StreamIOError.READ, "device gone")


class FailingSink(ByteSink):
    def write(self, data):
        raise StreamIOError(StreamIOError.WRITE, "disk full")


def test_read_failure():
    with pytest.raises(StreamIOError) as excinfo:
        hex_dump(FailingSource(), BytesSink())
    assert excinfo.value.direction == "read"
    assert "failed to read from input" in str(excinfo.value)


def test_write_failure():
    with pytest.raises(StreamIOError) as excinfo:
        hex_dump(BytesSource(b"abc"), FailingSink())
    assert excinfo.value.direction == "write"
    assert "failed to write to output: disk full" == str(excinfo.value)


if __name__ == '__main__':
    pytest.main([__file__])
