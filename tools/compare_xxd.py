#!/usr/bin/env python3
"""
Compare hxx output with the system xxd on random data.
"""

import argparse
import difflib
import os
import random
import shutil
import subprocess
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hxx.encoder import dump_bytes


def compare_once(data: bytes, xxd: str) -> list:
    """
    Dump data with hxx and with xxd.

    Returns:
        Unified diff lines (empty if the dumps are identical)
    """
    expected = subprocess.run([xxd], input=data, capture_output=True, check=True).stdout
    actual = dump_bytes(data)
    return list(difflib.unified_diff(
        expected.decode('ascii').splitlines(),
        actual.splitlines(),
        fromfile='xxd',
        tofile='hxx',
        lineterm='',
    ))


def main():
    parser = argparse.ArgumentParser(description='Compare hxx output with xxd')
    parser.add_argument('num_tests', type=int, help='Number of random inputs to compare')
    parser.add_argument('--min-size', type=int, default=100, help='Smallest input in bytes (default: 100)')
    parser.add_argument('--max-size', type=int, default=10000, help='Largest input in bytes (default: 10000)')

    args = parser.parse_args()

    xxd = shutil.which('xxd')
    if xxd is None:
        print("Error: 'xxd' missing or unavailable in PATH", file=sys.stderr)
        sys.exit(1)

    width = len(str(args.num_tests))

    for i in range(1, args.num_tests + 1):
        data = os.urandom(random.randint(args.min_size, args.max_size))
        diff = compare_once(data, xxd)

        if not diff:
            print(f"[Test {i:0{width}d}] Status: PASS")
            continue

        print(f"[Test {i:0{width}d}] Status: FAIL")
        print('\n'.join(diff), file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
