"""CLI entrypoint for the word search solver."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from wordsearch.core.exceptions import WordSearchError
from wordsearch.engine.solver import SolverConfig, WordSearchSolver
from wordsearch.io.puzzle import load_puzzle
from wordsearch.io.report import compare_modes, results_frame, write_report
from wordsearch.utils.logger import configure_logging, get_logger, level_from_name
from wordsearch.utils.pretty import PLAIN, HighlightedGrid, print_summary, random_color

LOGGER = get_logger("wordsearch.cli")

REPORT_SUFFIXES = (".csv", ".json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find words in a letter grid, reading in all eight directions",
    )
    parser.add_argument(
        "puzzle",
        type=Path,
        nargs="?",
        help="Puzzle file: grid rows, a blank line, then one word per line. Prompts when omitted.",
    )
    parser.add_argument(
        "--optimize",
        action="store_true",
        help="Skip start cells where the word cannot fit before the grid edge",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Print a table comparing comparisons with and without --optimize",
    )
    parser.add_argument(
        "--report",
        type=Path,
        metavar="FILE",
        help="Write per-word results to a .csv or .json file",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for highlight colors")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def dialog() -> Tuple[Path, bool]:
    """Ask for the puzzle path and whether to optimize."""

    path = ""
    while not path:
        path = input("Input file path: ").strip()
    while True:
        choice = input("Use optimization ? (Y/n) ").strip()
        if choice in ("Y", "y"):
            return Path(path), True
        if choice in ("N", "n"):
            return Path(path), False


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))

    if args.report and args.report.suffix.lower() not in REPORT_SUFFIXES:
        parser.error("--report must end in .csv or .json")

    if args.puzzle is None:
        puzzle_path, optimize = dialog()
    else:
        puzzle_path, optimize = args.puzzle, args.optimize

    try:
        puzzle = load_puzzle(puzzle_path)
    except WordSearchError as exc:
        LOGGER.error("Cannot load puzzle: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    solver = WordSearchSolver(puzzle.grid, SolverConfig(optimize=optimize))
    highlighted = HighlightedGrid(puzzle.grid)

    started = time.perf_counter()
    results = solver.search_all(puzzle.words)
    elapsed = time.perf_counter() - started

    colors = []
    for result in results:
        if result.found:
            color = random_color(rng)
            highlighted.colorize(result, color)
        else:
            color = PLAIN
        colors.append(color)

    print_summary(highlighted, results, colors, elapsed, use_color=not args.no_color)

    if args.compare:
        print()
        print("COMPARISON")
        print(compare_modes(puzzle.grid, puzzle.words).to_string(index=False))

    if args.report:
        write_report(results_frame(results), args.report)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
