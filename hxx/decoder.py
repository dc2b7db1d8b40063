"""
Hex dump to binary conversion (xxd -r).

Only the hex section of each line is used. The offset before the colon and
the ASCII panel after the first double space are ignored, so the column
and group widths the dump was made with do not matter.
"""

import logging
import string

from .errors import (
    InvalidHexDigit,
    LineTooShort,
    MalformedLineError,
    MissingOffsetDelimiter,
    MissingPanelSeparator,
    OddDigitCount,
    OffsetMismatch,
)
from .streams import ByteSink, ByteSource, BytesSink, BytesSource

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)
# Group separators; other control characters are invalid hex
SEPARATORS = frozenset(string.whitespace)


def _hex_section(line: str) -> str:
    colon_idx = line.find(':')
    if colon_idx == -1:
        raise MissingOffsetDelimiter()

    # Skip colon and the space after it
    start = colon_idx + 2
    if start > len(line):
        raise LineTooShort()

    end = line.find('  ', start)
    if end == -1:
        raise MissingPanelSeparator()

    return line[start:end]


def parse_line(line: str) -> bytes:
    """
    Extract the bytes encoded in one dump line.

    Args:
        line: A single line, with or without its newline

    Raises:
        MalformedLineError: if the line cannot be parsed
    """
    digits = (c for c in _hex_section(line) if c not in SEPARATORS)
    data = bytearray()

    # One octet at a time
    for high in digits:
        low = next(digits, None)
        if low is None:
            raise OddDigitCount()
        if high not in HEX_DIGITS or low not in HEX_DIGITS:
            raise InvalidHexDigit(repr(high + low))
        data.append((int(high, 16) << 4) | int(low, 16))

    return bytes(data)


def _check_offset(line: str, expected: int) -> None:
    offset_text = line[:line.find(':')].strip()
    # int(x, 16) alone would also take 0x2, +2 and 0_2
    if not offset_text or not set(offset_text) <= HEX_DIGITS:
        raise OffsetMismatch(f"offset {offset_text!r} is not hexadecimal")
    offset = int(offset_text, 16)
    if offset != expected:
        raise OffsetMismatch(f"expected {expected:08x}, got {offset:08x}")


def reverse_hex_dump(source: ByteSource, sink: ByteSink, strict: bool = False) -> int:
    """
    Rebuild binary data from the hex dump in source and write it to sink.

    Args:
        source: Hex dump text
        sink: Destination for the decoded bytes
        strict: Require each line's offset to equal the number of bytes
            decoded before it

    Returns:
        Number of bytes written
    """
    logger.debug(f"Reverse dump, strict={strict}")
    written = 0

    for line_number, raw_line in enumerate(source, start=1):
        # latin-1 maps every byte to one character, so a stray byte in the
        # panel cannot break decoding of the line
        line = raw_line.decode('latin-1')
        try:
            data = parse_line(line)
            if strict:
                _check_offset(line, written)
        except MalformedLineError as e:
            raise e.at_line(line_number)

        sink.write(data)
        written += len(data)

    logger.debug(f"Wrote {written} bytes")
    return written


def undump_text(text: str, strict: bool = False) -> bytes:
    """Return the bytes encoded in the hex dump text."""
    sink = BytesSink()
    with BytesSource(text.encode('utf-8')) as source:
        reverse_hex_dump(source, sink, strict)
    return sink.getvalue()
