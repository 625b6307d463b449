"""
9x9 Sudoku grid model.

Holds the cell state (0 marks an empty cell, 1-9 a filled one) and renders it
in the fixed-width box layout used by the command line tool:

    +-------+-------+-------+
    | 5 3   |   7   |       |
    ...
    +-------+-------+-------+
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

BASE = 3  # box edge length
SIZE = BASE * BASE
SEPARATOR = "+-------+-------+-------+"

Board = List[List[int]]


class SudokuGrid:
    """A fixed 9x9 matrix of digits with 0 standing for an empty cell."""

    def __init__(self) -> None:
        self._cells: Board = [[0] * SIZE for _ in range(SIZE)]

    @classmethod
    def create_empty(cls) -> "SudokuGrid":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "SudokuGrid":
        """
        Build a grid from a 9x9 nested sequence.

        Args:
            rows: 9 rows of 9 ints, each in 0-9

        Raises:
            ValueError: wrong shape or a value outside 0-9
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Sudoku grid must be 9 rows of 9 cells.")

        grid = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                grid.set(r, c, value)
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, row: int, col: int) -> int:
        _check_index(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        _check_index(row, col)
        if not isinstance(value, int) or not 0 <= value <= SIZE:
            raise ValueError(f"Cell ({row}, {col}) cannot hold {value!r}; expected 0-9.")
        self._cells[row][col] = value

    def row(self, row: int) -> List[int]:
        return list(self._cells[row])

    def column(self, col: int) -> List[int]:
        return [self._cells[r][col] for r in range(SIZE)]

    def box(self, row: int, col: int) -> List[int]:
        """Values of the 3x3 box containing (row, col), read row by row."""

        start_row = (row // BASE) * BASE
        start_col = (col // BASE) * BASE
        return [
            self._cells[r][c]
            for r in range(start_row, start_row + BASE)
            for c in range(start_col, start_col + BASE)
        ]

    def rows(self) -> Board:
        """Deep copy of the cells as a nested list."""

        return [row[:] for row in self._cells]

    def copy(self) -> "SudokuGrid":
        clone = SudokuGrid()
        clone._cells = self.rows()
        return clone

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        for r in range(SIZE):
            for c in range(SIZE):
                yield r, c, self._cells[r][c]

    def clue_positions(self) -> List[Tuple[int, int]]:
        return [(r, c) for r, c, value in self.cells() if value]

    def empty_cells(self) -> int:
        return sum(1 for _, _, value in self.cells() if value == 0)

    def is_complete(self) -> bool:
        return self.empty_cells() == 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        lines: List[str] = []
        for r, row in enumerate(self._cells):
            if r % BASE == 0:
                lines.append(SEPARATOR)
            parts: List[str] = []
            for c, value in enumerate(row):
                if c % BASE == 0:
                    parts.append("| ")
                parts.append(f"{value if value else ' '} ")
            parts.append("|")
            lines.append("".join(parts))
        lines.append(SEPARATOR)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        flat = "".join(str(value) for _, _, value in self.cells())
        return f"SudokuGrid({flat!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return self._cells == other._cells


def _check_index(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f"Cell ({row}, {col}) is outside the 9x9 grid.")


__all__ = [
    "Board",
    "SudokuGrid",
    "SEPARATOR",
    "SIZE",
    "BASE",
]
