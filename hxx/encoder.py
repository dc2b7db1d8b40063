"""
Binary to hex dump conversion.

Each chunk of cols bytes becomes one line in the layout used by xxd:

    00000000: 4865 6c6c 6f20 776f 726c 64              Hello world
"""

import logging

from .streams import ByteSink, ByteSource, BytesSink, BytesSource

logger = logging.getLogger(__name__)

DEFAULT_COLS = 16
DEFAULT_BYTE_GROUPS = 2


def format_line(chunk: bytes, offset: int, cols: int, byte_groups: int) -> str:
    """
    Render one dump line, without the trailing newline.

    Args:
        chunk: Bytes for this line (at most cols of them)
        offset: Number of bytes that came before this chunk
        cols: Bytes per full line
        byte_groups: Bytes per group in the hex section (must be >= 1)
    """
    parts = [f"{offset:08x}: "]

    for i, byte in enumerate(chunk):
        if i != 0 and i % byte_groups == 0:
            parts.append(' ')
        parts.append(f"{byte:02x}")

    missing = cols - len(chunk)
    if missing > 0:
        # Same width the missing hex digits and group spaces would take.
        # The group term truncates when byte_groups does not divide cols; xxd does the same.
        parts.append(' ' * (missing * 2 + missing // byte_groups))

    parts.append('  ')
    # Printable: SP (0x20) to ~ (0x7e)
    parts.append(''.join(chr(b) if 0x20 <= b <= 0x7e else '.' for b in chunk))

    return ''.join(parts)


def hex_dump(source: ByteSource, sink: ByteSink,
             cols: int = DEFAULT_COLS, byte_groups: int = DEFAULT_BYTE_GROUPS) -> int:
    """
    Write a hex dump of everything in source to sink.

    Returns:
        Number of bytes dumped
    """
    logger.debug(f"Dumping with cols={cols}, byte_groups={byte_groups}")
    offset = 0

    while True:
        chunk = source.read_chunk(cols)
        if not chunk:
            break

        line = format_line(chunk, offset, cols, byte_groups) + '\n'
        sink.write(line.encode('ascii'))
        offset += len(chunk)

    logger.debug(f"Dumped {offset} bytes")
    return offset


def dump_bytes(data: bytes, cols: int = DEFAULT_COLS,
               byte_groups: int = DEFAULT_BYTE_GROUPS) -> str:
    """Return the hex dump of data as text."""
    sink = BytesSink()
    with BytesSource(data) as source:
        hex_dump(source, sink, cols, byte_groups)
    return sink.getvalue().decode('ascii')
