"""
Load a Sudoku puzzle from a text file.

The file holds 9 lines of 9 whitespace-separated digits, 0 marking a blank:

    5 3 0 0 7 0 0 0 0
    6 0 0 1 9 5 0 0 0
    ...

Lines and values past the ninth are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from loguru import logger

from sudoku_grid import SIZE, SudokuGrid

PathLike = Union[str, Path]


class PuzzleLoadError(RuntimeError):
    """Raised when a puzzle cannot be loaded."""


class PuzzleFileError(PuzzleLoadError):
    """The puzzle file is missing or unreadable."""

    def __init__(self, path: PathLike, reason: str = "") -> None:
        self.path = str(path)
        message = f"ERROR: Cannot open the file '{self.path}'."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PuzzleFormatError(PuzzleLoadError):
    """The puzzle text holds a bad token or too few cells."""


def _parse_token(token: str, source: str, line_no: int) -> int:
    try:
        value = int(token)
    except ValueError as exc:
        raise PuzzleFormatError(
            f"ERROR: Invalid number '{token}' in file. ({source}, line {line_no})"
        ) from exc
    if not 0 <= value <= SIZE:
        raise PuzzleFormatError(
            f"ERROR: Invalid number '{token}' in file. ({source}, line {line_no})"
        )
    return value


def parse_puzzle_text(
    text: str,
    *,
    source: str = "<string>",
    strict: bool = True,
) -> SudokuGrid:
    """
    Parse puzzle text into a grid.

    Args:
        text: the file contents
        source: name used in error messages
        strict: when False, missing lines or values are left as 0 instead
            of raising

    Returns:
        SudokuGrid populated with the clues from text

    Raises:
        PuzzleFormatError: a token is not an integer in 0-9, or (strict mode)
            the text has fewer than 9 lines or a line has fewer than 9 values
    """
    grid = SudokuGrid.create_empty()
    lines = text.splitlines()[:SIZE]
    defaulted = (SIZE - len(lines)) * SIZE

    for r, line in enumerate(lines):
        tokens = line.split()[:SIZE]
        row: List[int] = [_parse_token(token, source, r + 1) for token in tokens]
        for c, value in enumerate(row):
            grid.set(r, c, value)

        if len(row) < SIZE:
            if strict:
                raise PuzzleFormatError(
                    f"ERROR: Line {r + 1} of '{source}' has {len(row)} value(s); expected {SIZE}."
                )
            defaulted += SIZE - len(row)

    if len(lines) < SIZE and strict:
        raise PuzzleFormatError(
            f"ERROR: '{source}' has {len(lines)} line(s); expected {SIZE}."
        )

    if defaulted:
        logger.warning(
            "{} is under-populated; {} cell(s) left blank",
            source,
            defaulted,
        )

    logger.debug("Loaded {} with {} clue(s)", source, len(grid.clue_positions()))
    return grid


def load_puzzle(path: PathLike, *, strict: bool = True) -> SudokuGrid:
    """Read and parse the puzzle file at path."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleFileError(path, getattr(exc, "strerror", None) or str(exc)) from exc

    return parse_puzzle_text(text, source=str(path), strict=strict)


__all__ = [
    "PuzzleLoadError",
    "PuzzleFileError",
    "PuzzleFormatError",
    "parse_puzzle_text",
    "load_puzzle",
]
