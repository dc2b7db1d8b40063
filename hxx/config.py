"""
Command-line option resolution for hxx.

build_config() turns an argument list into a Config or raises
InvalidOptionValue. It never prints or exits; that is left to the caller.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .encoder import DEFAULT_BYTE_GROUPS, DEFAULT_COLS
from .errors import InvalidOptionValue

MAX_OPTION_VALUE = 256

# (flags, argument, description) for the usage text
FLAG_REGISTRY = [
    ('-c', 'cols', f"format <cols> octets per line (value must be <= {MAX_OPTION_VALUE}). Default {DEFAULT_COLS}."),
    ('-g', 'bytes', f"number of octets per group in normal output (value must be > 0 and <= {MAX_OPTION_VALUE}). Default {DEFAULT_BYTE_GROUPS}."),
    ('-r', '', "reverse operation: convert hexdump into binary."),
    ('-s', '', "with -r, check that every line's offset matches the bytes decoded so far."),
    ('-d', '', "print debug messages to stderr."),
    ('-h', '', "print this summary."),
    ('-v', '', "show version."),
]


@dataclass
class Config:
    """Resolved options for one run."""
    cols: int = DEFAULT_COLS
    byte_groups: int = DEFAULT_BYTE_GROUPS
    reverse: bool = False
    strict: bool = False
    infile: Optional[Path] = None
    outfile: Optional[Path] = None
    verbose: bool = False
    show_help: bool = False
    show_version: bool = False


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message):
        raise InvalidOptionValue(message)


def parse_value(value: str) -> int:
    """Parse a -c/-g value: a decimal integer in [0, 256]."""
    if not value.isdigit():
        raise argparse.ArgumentTypeError(f"invalid value {value!r}")
    number = int(value)
    if number > MAX_OPTION_VALUE:
        raise argparse.ArgumentTypeError(f"value {number} out of range [0, {MAX_OPTION_VALUE}]")
    return number


def _build_parser(program: str) -> argparse.ArgumentParser:
    parser = _OptionParser(prog=program, add_help=False, allow_abbrev=False)
    parser.add_argument('-c', dest='cols', type=parse_value, default=DEFAULT_COLS)
    parser.add_argument('-g', dest='byte_groups', type=parse_value, default=DEFAULT_BYTE_GROUPS)
    parser.add_argument('-r', dest='reverse', action='store_true')
    parser.add_argument('-s', '--strict', dest='strict', action='store_true')
    parser.add_argument('-d', '--debug', dest='verbose', action='store_true')
    parser.add_argument('-h', '--help', dest='show_help', action='store_true')
    parser.add_argument('-v', '--version', dest='show_version', action='store_true')
    parser.add_argument('infile', type=Path, nargs='?')
    parser.add_argument('outfile', type=Path, nargs='?')
    return parser


def build_config(args: Sequence[str], program: str = 'hxx') -> Config:
    """
    Resolve command-line arguments.

    Args:
        args: Arguments without the program name
        program: Program name used in messages

    Returns:
        Config for the run

    Raises:
        InvalidOptionValue: unknown flag, missing or bad value, or too many files
    """
    ns = _build_parser(program).parse_args(list(args))
    config = Config(**vars(ns))

    if config.show_help or config.show_version:
        return config

    # Grouping width is a divisor in the encoder
    if config.byte_groups == 0:
        raise InvalidOptionValue("argument -g: value must be > 0")

    return config


def format_usage(program: str = 'hxx') -> str:
    lines: List[str] = [
        "Usage:",
        f"      {program} [options] [infile [outfile]]",
        "   or",
        f"      {program} -r [options] [infile [outfile]]",
        "Options:",
    ]
    for flag, argument, description in FLAG_REGISTRY:
        lines.append(f"   {flag}  {argument:<8}  {description}")
    return '\n'.join(lines) + '\n'
