"""
Command line interface: posbraid GENUS

Prints two lines per candidate word to stdout, the word and its DT code:

    bbb
    : 3 1 4 6 2

Diagnostics go to stderr.
"""

import argparse
import sys
from typing import Optional, Sequence

from .errors import ConfigurationError
from .search import BraidSearch, format_result


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="posbraid",
        description="List positive braid words whose closures include every "
                    "prime positive braid knot of the given genus, each with "
                    "its DT code. Duplicates and composite knots are not removed.",
    )
    p.add_argument("genus", type=int, help="Target knot genus (non-negative integer).")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Narrate every search step on stderr.")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        search = BraidSearch(args.genus, verbose=args.verbose, stream=sys.stderr)
    except ConfigurationError as e:
        print(f"posbraid: error: {e}", file=sys.stderr)
        return 2

    print(f"Working on genus {args.genus}.", file=sys.stderr)
    for result in search.run():
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
