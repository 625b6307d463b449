"""
Sudoku solver.

Fills a 9x9 grid in place with depth-first backtracking: take the first empty
cell in row-major order, try 1-9 in ascending order, recurse, and undo the
placement when the branch fails.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from loguru import logger

from sudoku_grid import BASE, SIZE, SudokuGrid

DIGITS = range(1, SIZE + 1)


@dataclass
class SolveStats:
    """Counters collected during one search."""

    placements: int = 0
    backtracks: int = 0


class SudokuSolver:
    """Backtracking solver that mutates the grid it is given."""

    def __init__(self, grid: SudokuGrid) -> None:
        """
        Args:
            grid: the grid to solve; it is not copied
        """
        self.grid = grid
        self.stats = SolveStats()

    def is_valid(self, row: int, col: int, num: int) -> bool:
        """
        Check whether num may be placed at (row, col).

        Args:
            row: row index
            col: column index
            num: candidate digit (1-9)

        Returns:
            bool: True if num is absent from the row, the column and the box
        """
        if num in self.grid.row(row):
            return False

        if num in self.grid.column(col):
            return False

        if num in self.grid.box(row, col):
            return False

        return True

    def find_empty(self) -> Optional[Tuple[int, int]]:
        """Return (row, col) of the first empty cell, or None when the grid is full."""

        for r in range(SIZE):
            for c in range(SIZE):
                if self.grid.get(r, c) == 0:
                    return (r, c)
        return None

    def solve(self) -> bool:
        """
        Solve the grid in place.

        Returns:
            bool: True once every cell is filled; False if no assignment
            exists, in which case the grid is back to its starting state.
        """
        self.stats = SolveStats()
        solved = self._backtrack()
        logger.debug(
            "Search finished: solved={solved} placements={placements} backtracks={backtracks}",
            solved=solved,
            placements=self.stats.placements,
            backtracks=self.stats.backtracks,
        )
        return solved

    def _backtrack(self) -> bool:
        empty = self.find_empty()

        # no empty cell left
        if empty is None:
            return True

        row, col = empty

        for num in DIGITS:
            if self.is_valid(row, col, num):
                self.grid.set(row, col, num)
                self.stats.placements += 1

                if self._backtrack():
                    return True

                self.grid.set(row, col, 0)
                self.stats.backtracks += 1

        return False


def solve(grid: SudokuGrid) -> bool:
    """Solve grid in place; see SudokuSolver.solve."""

    return SudokuSolver(grid).solve()


# ----------------------------------------------------------------------
# Checks
# ----------------------------------------------------------------------
@dataclass
class SudokuCheckResult:
    """Outcome of checking a filled grid."""

    is_correct: bool
    issues: List[str] = field(default_factory=list)


def _group_issue(label: str, values: List[int], *, complete: bool) -> Optional[str]:
    filled = [num for num in values if num]
    duplicates = sorted({num for num in filled if filled.count(num) > 1})
    missing = sorted(set(DIGITS) - set(filled)) if complete else []

    issue_parts = []
    if missing:
        issue_parts.append(f"missing {missing}")
    if duplicates:
        issue_parts.append(f"duplicate {duplicates}")
    if not issue_parts:
        return None
    return f"{label} violates Sudoku rules: {'; '.join(issue_parts)}."


def _groups(grid: SudokuGrid) -> List[Tuple[str, List[int]]]:
    groups = [(f"Row {r + 1}", grid.row(r)) for r in range(SIZE)]
    groups.extend((f"Column {c + 1}", grid.column(c)) for c in range(SIZE))
    groups.extend(
        (
            f"Box ({box_row + 1}, {box_col + 1})",
            grid.box(box_row * BASE, box_col * BASE),
        )
        for box_row in range(BASE)
        for box_col in range(BASE)
    )
    return groups


def find_given_conflicts(grid: SudokuGrid) -> List[str]:
    """Describe every row, column or box that already holds a repeated digit."""

    issues: List[str] = []
    for label, values in _groups(grid):
        issue = _group_issue(label, values, complete=False)
        if issue:
            issues.append(issue)
    return issues


def check_solution(
    grid: SudokuGrid,
    puzzle: Optional[SudokuGrid] = None,
) -> SudokuCheckResult:
    """
    Verify that grid is a complete, valid solution.

    Args:
        grid: the grid to check
        puzzle: the starting grid; when given, every clue must be preserved

    Returns:
        SudokuCheckResult listing every problem found
    """
    issues: List[str] = []

    empty = grid.empty_cells()
    if empty:
        issues.append(f"Grid still has {empty} empty cell(s).")

    if puzzle is not None:
        for r, c in puzzle.clue_positions():
            clue = puzzle.get(r, c)
            if grid.get(r, c) != clue:
                issues.append(
                    f"Cell ({r + 1}, {c + 1}) must be {clue} per the puzzle, but holds {grid.get(r, c)}."
                )

    for label, values in _groups(grid):
        issue = _group_issue(label, values, complete=True)
        if issue:
            issues.append(issue)

    return SudokuCheckResult(is_correct=not issues, issues=issues)


__all__ = [
    "SudokuSolver",
    "SolveStats",
    "SudokuCheckResult",
    "solve",
    "check_solution",
    "find_given_conflicts",
]
