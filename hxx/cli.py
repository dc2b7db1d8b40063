#!/usr/bin/env python3
"""
Command-line interface for hxx.
"""

import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import Config, build_config, format_usage
from .decoder import reverse_hex_dump
from .encoder import hex_dump
from .errors import HxxError, InvalidOptionValue
from .streams import open_sink, open_source

logger = logging.getLogger(__name__)


def setup_log(log_level: int = logging.WARNING) -> None:
    """Send log records to stderr; stdout carries the dump."""
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def print_error(message: str) -> None:
    if sys.stderr.isatty():
        message = f"\x1b[1;91mERROR: {message}\x1b[0m"
    else:
        message = f"ERROR: {message}"
    print(message, file=sys.stderr)


def run(config: Config) -> int:
    """
    Dump or reverse dump, depending on config.reverse.

    Files named in config are opened here and closed again on every exit
    path; stdin and stdout are left open.

    Returns:
        Number of bytes dumped (or written, in reverse mode)
    """
    with open_source(config.infile) as source, open_sink(config.outfile) as sink:
        if config.reverse:
            return reverse_hex_dump(source, sink, strict=config.strict)
        return hex_dump(source, sink, config.cols, config.byte_groups)


def main(argv: Optional[Sequence[str]] = None, program: str = 'hxx') -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = build_config(argv, program)
    except InvalidOptionValue as e:
        print_error(str(e))
        print(format_usage(program), end='')
        return 1

    if config.show_help:
        print(format_usage(program), end='')
        return 1

    if config.show_version:
        print(f"{program} - {__version__}")
        return 0

    setup_log(logging.DEBUG if config.verbose else logging.WARNING)
    logger.debug(f"Config: {config}")

    try:
        run(config)
    except HxxError as e:
        logger.debug("Run aborted", exc_info=True)
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == '__main__':
    sys.exit(main())
