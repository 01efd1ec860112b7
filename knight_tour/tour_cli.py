#! /usr/bin/env python
"""
Knight's tour from the command line.

    knight-tour 8 8 a1
    knight-tour            # asks for the board and the start square
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from rich.console import Console

from chess_notation import parse_square
from knight_tour import InvalidBoardError, SearchBudgetExceeded, solve_tour
from tour_render import board_table, format_trace

EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a knight's tour with Warnsdorff's heuristic and backtracking."
    )
    parser.add_argument("rows", nargs="?", type=int, help="Number of ranks (N)")
    parser.add_argument("cols", nargs="?", type=int, help="Number of files (M)")
    parser.add_argument("start", nargs="?", help="Start square, e.g. a1")
    parser.add_argument(
        "--iterative",
        action="store_true",
        help="Use the explicit-stack search instead of recursion",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Give up after placing this many squares",
    )
    parser.add_argument(
        "--tui", action="store_true", help="Show the tour in a terminal board viewer"
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="ERROR",
        help="Logging level",
    )
    return parser


def ask_dimensions() -> Tuple[int, int]:
    answer = input("Board dimensions (N M): ").split()
    if len(answer) != 2:
        raise InvalidBoardError("Expected two numbers, e.g. 8 8")
    try:
        return int(answer[0]), int(answer[1])
    except ValueError as err:
        raise InvalidBoardError(f"Invalid dimensions {' '.join(answer)}") from err


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.getLogger().setLevel(args.log_level)
    console = Console()

    try:
        if args.rows is None or args.cols is None:
            rows, cols = ask_dimensions()
        else:
            rows, cols = args.rows, args.cols
        if rows <= 0 or cols <= 0:
            raise InvalidBoardError(f"Invalid dimensions {rows}x{cols}")
        coord = args.start if args.start is not None else input("Start square (e.g. a1): ").strip()
        start = parse_square(coord, rows, cols)
        result = solve_tour(rows, cols, start, iterative=args.iterative, max_nodes=args.max_nodes)
    except (ValueError, SearchBudgetExceeded) as err:
        console.print(f"Error: {err}", highlight=False)
        return EXIT_BAD_INPUT

    if not result.found:
        console.print(
            f"No knight's tour found for a {rows}x{cols} board starting at {coord}.",
            highlight=False,
        )
        return EXIT_NOT_FOUND

    if args.tui:
        from tour_viewer import TourViewerApp

        TourViewerApp(rows, cols, result.path).run()
        return 0

    console.print(board_table(rows, cols, result.path))
    console.print(format_trace(result.path), highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
