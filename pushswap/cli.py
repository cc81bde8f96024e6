"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as ``Error``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        print(operation)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())