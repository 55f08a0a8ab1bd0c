"""
Command line entry point: solve the board and print every solution.
"""

import argparse
import logging
import sys

from .board import BOARD_ROWS
from .config import CFG
from .errors import PuzzleConfigError
from .pieces import ALL_PIECES, BOARD_SIDES
from .solver import distinct_layouts, search_space_size, solve_puzzle
from .viz import display_arrangement, render_svg


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bermuda-solver",
        description="Find every way to fill the Bermuda Triangle board",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=CFG.ROWS,
        help=f"Rows of the board to fill, 1-{BOARD_ROWS} (default: %(default)s)",
    )
    parser.add_argument(
        "--max-solutions",
        type=int,
        default=CFG.MAX_SOLUTIONS,
        help="Stop after this many solutions, 0 for all (default: %(default)s)",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Hide solutions that only swap identical pieces",
    )
    parser.add_argument(
        "--svg",
        nargs="?",
        const=CFG.SVG_OUT,
        default=None,
        help="Render the first solution to an SVG file (default: %(const)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else CFG.LOG_LEVEL,
        format=CFG.LOG_FORMAT,
        datefmt=CFG.LOG_DATEFMT,
    )

    piece_count = len(ALL_PIECES)
    print(f"There are {piece_count} pieces and each has 3 possible orientations.")
    print(
        f"That's {search_space_size(piece_count):,} possible ways "
        "to orient the pieces in the puzzle!"
    )

    try:
        solutions = solve_puzzle(
            ALL_PIECES, BOARD_SIDES, rows=args.rows, max_solutions=args.max_solutions
        )
    except PuzzleConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.unique:
        solutions = distinct_layouts(solutions)

    for number, solution in enumerate(solutions, start=1):
        print(f"\nSolution number {number}!")
        display_arrangement(solution)

    if not solutions:
        print("\nNo solution found")
        return 1

    print(f"\n{len(solutions)} solution(s) found")
    if args.svg:
        svg_file = render_svg(solutions[0], args.svg)
        print(f"SVG saved to: {svg_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
