"""
Command line entry point: load a puzzle file, print it, solve it, print the result.

Usage examples
--------------

Interactive, picking a file from the `txt` folder:

    python sudoku_cli.py

Direct, with a check against a known solution:

    python sudoku_cli.py txt/easy.txt --expect txt/easy_solution.txt

The puzzle folder defaults to `txt` and can be changed with `--puzzle-dir` or
the `SUDOKU_PUZZLE_DIR` environment variable.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from loguru import logger

from puzzle_loader import PuzzleLoadError, load_puzzle
from sudoku_grid import SudokuGrid
from sudoku_solver import SudokuSolver, find_given_conflicts

DEFAULT_PUZZLE_DIR = "txt"
PUZZLE_DIR_ENV = "SUDOKU_PUZZLE_DIR"

EXIT_SOLVED = 0
EXIT_INPUT_ERROR = 1
EXIT_NO_SOLUTION = 2
EXIT_MISMATCH = 3


@dataclass(frozen=True)
class RunConfig:
    puzzle_dir: Path
    puzzle_file: Optional[str] = None
    strict: bool = True
    expect: Optional[Path] = None
    log_level: str = "WARNING"


def parse_args(argv: Optional[Sequence[str]] = None) -> RunConfig:
    parser = argparse.ArgumentParser(
        description="Solve a 9x9 Sudoku puzzle read from a text file."
    )
    parser.add_argument(
        "puzzle_file",
        nargs="?",
        default=None,
        help="Puzzle file to solve. If omitted, the file name is asked for interactively.",
    )
    parser.add_argument(
        "--puzzle-dir",
        type=Path,
        default=Path(os.getenv(PUZZLE_DIR_ENV) or DEFAULT_PUZZLE_DIR),
        help=f"Folder puzzle names are looked up in (default: ${PUZZLE_DIR_ENV} or '{DEFAULT_PUZZLE_DIR}').",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Leave missing values blank instead of rejecting under-populated files.",
    )
    parser.add_argument(
        "--expect",
        type=Path,
        default=None,
        help="Solution file the solved puzzle is compared against.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for stderr output (default: WARNING).",
    )

    args = parser.parse_args(argv)
    return RunConfig(
        puzzle_dir=args.puzzle_dir,
        puzzle_file=args.puzzle_file,
        strict=not args.lenient,
        expect=args.expect,
        log_level=args.log_level,
    )


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def _can_open(path: Path) -> bool:
    try:
        with path.open("r", encoding="utf-8"):
            return True
    except OSError:
        return False


def resolve_puzzle_path(name: str, puzzle_dir: Path) -> Path:
    """Use name as given when it exists, otherwise look it up in puzzle_dir."""

    path = Path(name)
    if path.exists() or path.is_absolute():
        return path
    return puzzle_dir / path


def prompt_for_puzzle(
    puzzle_dir: Path,
    input_fn: Optional[Callable[[], str]] = None,
) -> Optional[Path]:
    """
    Ask for a file name until one inside puzzle_dir can be opened.

    Returns:
        The path to the puzzle, or None if stdin is closed first.
    """
    read = input_fn or input
    while True:
        print(f"Enter the puzzle file name from the '{puzzle_dir}' folder: ")
        try:
            file_name = read().strip()
        except EOFError:
            return None

        file_path = puzzle_dir / file_name
        if file_name and _can_open(file_path):
            return file_path

        logger.debug("Cannot open {}", file_path)
        print(f"ERROR: Cannot open the file '{file_name}'. Please try again.")


def print_grid(title: str, grid: SudokuGrid) -> None:
    print(title)
    print(grid.render())
    print()


def run(config: RunConfig) -> int:
    if config.puzzle_file is None:
        puzzle_path = prompt_for_puzzle(config.puzzle_dir)
        if puzzle_path is None:
            print("ERROR: No puzzle file given.", file=sys.stderr)
            return EXIT_INPUT_ERROR
    else:
        puzzle_path = resolve_puzzle_path(config.puzzle_file, config.puzzle_dir)

    try:
        grid = load_puzzle(puzzle_path, strict=config.strict)
        expected = load_puzzle(config.expect) if config.expect else None
    except PuzzleLoadError as exc:
        logger.error("Failed to load puzzle: {}", exc)
        print(exc, file=sys.stderr)
        return EXIT_INPUT_ERROR

    logger.info("Solving {} ({} empty cell(s))", puzzle_path, grid.empty_cells())
    for issue in find_given_conflicts(grid):
        logger.warning("Conflicting clues: {}", issue)

    print_grid("Unsolved Puzzle: ", grid)

    solver = SudokuSolver(grid)
    if not solver.solve():
        print("This puzzle has no solution!")
        return EXIT_NO_SOLUTION

    print_grid("Solved Puzzle: ", grid)
    logger.info(
        "Solved with {} placement(s) and {} backtrack(s)",
        solver.stats.placements,
        solver.stats.backtracks,
    )

    if expected is not None:
        if grid == expected:
            print("Solved puzzle matches the expected solution.")
        else:
            print("Solved puzzle does not match the expected solution!")
            return EXIT_MISMATCH

    return EXIT_SOLVED


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    configure_logging(config.log_level)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
