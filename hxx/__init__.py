"""
hxx - a minimal re-implementation of the xxd hex dump utility.

Dumps binary data from a file or stdin as xxd-style hex, and rebuilds the
binary data from such a dump.
"""

__version__ = '0.1.0'

from .decoder import parse_line, reverse_hex_dump, undump_text
from .encoder import dump_bytes, format_line, hex_dump
from .errors import HxxError

__all__ = [
    'HxxError',
    'dump_bytes',
    'format_line',
    'hex_dump',
    'parse_line',
    'reverse_hex_dump',
    'undump_text',
]
