"""Command-line entry point: prints the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.solver import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; print ``Error`` and fail on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())