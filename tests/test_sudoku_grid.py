"""Tests for the grid model and its rendering."""

import pytest

from sudoku_grid import SEPARATOR, SudokuGrid

from conftest import PUZZLE, rows_from_string

EMPTY_RENDERING = "\n".join(
    [SEPARATOR]
    + ["|       |       |       |"] * 3
    + [SEPARATOR]
    + ["|       |       |       |"] * 3
    + [SEPARATOR]
    + ["|       |       |       |"] * 3
    + [SEPARATOR]
)


def test_create_empty_is_all_zero():
    grid = SudokuGrid.create_empty()
    assert grid.rows() == [[0] * 9 for _ in range(9)]
    assert grid.empty_cells() == 81
    assert not grid.is_complete()


def test_set_and_get_round_trip_single_cell():
    grid = SudokuGrid.create_empty()
    grid.set(4, 7, 6)
    assert grid.get(4, 7) == 6
    assert grid.clue_positions() == [(4, 7)]


def test_out_of_range_index_raises():
    grid = SudokuGrid.create_empty()
    with pytest.raises(IndexError):
        grid.get(9, 0)
    with pytest.raises(IndexError):
        grid.set(0, -1, 1)


def test_out_of_range_value_raises():
    grid = SudokuGrid.create_empty()
    with pytest.raises(ValueError):
        grid.set(0, 0, 10)


def test_from_rows_rejects_wrong_shape():
    with pytest.raises(ValueError):
        SudokuGrid.from_rows([[0] * 9] * 8)
    with pytest.raises(ValueError):
        SudokuGrid.from_rows([[0] * 8] * 9)


def test_empty_grid_rendering():
    rendered = SudokuGrid.create_empty().render()
    assert rendered == EMPTY_RENDERING
    assert rendered.count(SEPARATOR) == 4
    assert len(rendered.splitlines()) == 13


def test_rendering_places_digits_and_blanks():
    grid = SudokuGrid.from_rows(rows_from_string(PUZZLE))
    lines = grid.render().splitlines()
    assert lines[0] == SEPARATOR
    assert lines[1] == "| 5 3   |   7   |       |"
    assert lines[2] == "| 6     | 1 9 5 |       |"
    assert lines[4] == SEPARATOR
    assert lines[-2] == "|       |   8   |   7 9 |"
    assert str(grid) == grid.render()


def test_equality_and_copy_are_independent():
    grid = SudokuGrid.from_rows(rows_from_string(PUZZLE))
    clone = grid.copy()
    assert clone == grid

    clone.set(0, 2, 4)
    assert clone != grid
    assert grid.get(0, 2) == 0


def test_row_column_and_box_views():
    grid = SudokuGrid.from_rows(rows_from_string(PUZZLE))
    assert grid.row(0) == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    assert grid.column(0) == [5, 6, 0, 8, 4, 7, 0, 0, 0]
    assert grid.box(1, 1) == [5, 3, 0, 6, 0, 0, 0, 9, 8]
    assert grid.box(8, 8) == [2, 8, 0, 0, 0, 5, 0, 7, 9]
