#!/usr/bin/env python3
"""
Command-line driver: solve one tour and print the outcome.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from tour3d.common.shared_types import Position
from tour3d.common.notation import format_move_list
from tour3d.common.validation import ValidationError
from tour3d.core.api import solve
from tour3d.search.searchconfig import SearchLimits

def build_parser() -> argparse.ArgumentParser:
    defaults = SearchLimits()
    parser = argparse.ArgumentParser(prog="tour3d", description="Knight's tour over stacked boards")
    parser.add_argument("--size", type=int, default=8,
                        help="side length of each layer")
    parser.add_argument("--layers", type=int, default=3,
                        help="number of stacked layers (1 = classic planar tour)")
    parser.add_argument("--start", type=int, nargs=3, default=[7, 7, 0],
                        metavar=("X", "Y", "LAYER"), help="starting cell")
    parser.add_argument("--max-backtracks", type=int, default=defaults.max_backtracks,
                        help="give up after this many backtracks")
    parser.add_argument("--max-ms", type=float, default=defaults.max_ms,
                        help="give up after this many milliseconds")
    parser.add_argument("--json", action="store_true",
                        help="print the full result as JSON")
    parser.add_argument("--notation", action="store_true",
                        help="print the tour as a chess move list")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        help="logging level (DEBUG, INFO, WARNING, ...)")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        limits = SearchLimits(max_backtracks=args.max_backtracks, max_ms=args.max_ms)
        result = solve(args.size, args.layers, Position(*args.start), limits)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.solved:
        print(f"Tour found: {len(result.solution)} cells, "
              f"{result.backtracks} backtracks, {result.elapsed_ms:.1f} ms")
    else:
        print(f"No tour: {result.reason.value} "
              f"({result.backtracks} backtracks, {result.elapsed_ms:.1f} ms)")

    if args.notation and result.solved:
        for move in format_move_list(result.solution, args.size, args.layers):
            print(move.formatted)

    return 0 if result.solved else 1

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
