import pytest

from numbertile.model.errors import InvalidTileValue, OutOfBounds
from numbertile.model.grid import Direction, Grid, line_cell


def test_new_grid_is_empty():
    grid = Grid(3)
    assert len(grid.empty_cells()) == 9
    assert all(value is None for _, value in grid.cells())


def test_set_get_and_clear_cell():
    grid = Grid(4)
    grid.set((1, 2), 8)
    assert grid.get((1, 2)) == 8
    assert (1, 2) not in grid.empty_cells()
    grid.set((1, 2), None)
    assert grid.get((1, 2)) is None


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (4, 0), (0, 4), (7, 7)])
def test_out_of_bounds_is_rejected(cell):
    grid = Grid(4)
    with pytest.raises(OutOfBounds):
        grid.get(cell)
    with pytest.raises(OutOfBounds):
        grid.set(cell, 2)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        Grid(2).get((2, 0))


@pytest.mark.parametrize("value", [0, 1, 3, 6, -2, True])
def test_non_power_of_two_values_are_rejected(value):
    with pytest.raises(InvalidTileValue):
        Grid(2).set((0, 0), value)


def test_dimension_must_be_positive():
    with pytest.raises(ValueError):
        Grid(0)


def test_from_rows_treats_zero_as_empty():
    grid = Grid.from_rows([[2, 0], [None, 4]])
    assert grid.snapshot() == ((2, None), (None, 4))
    assert grid.empty_cells() == {(0, 1), (1, 0)}


def test_from_rows_requires_square_input():
    with pytest.raises(ValueError):
        Grid.from_rows([[2, 0], [4]])


def test_lines_for_left_and_right_share_rows_in_opposite_order():
    grid = Grid(4)
    left = grid.cells_in_line(Direction.LEFT)
    right = grid.cells_in_line(Direction.RIGHT)
    assert left[1] == [(1, 0), (1, 1), (1, 2), (1, 3)]
    assert right[1] == [(1, 3), (1, 2), (1, 1), (1, 0)]


def test_lines_for_up_and_down_share_columns_in_opposite_order():
    grid = Grid(3)
    assert grid.cells_in_line(Direction.UP)[2] == [(0, 2), (1, 2), (2, 2)]
    assert grid.cells_in_line(Direction.DOWN)[2] == [(2, 2), (1, 2), (0, 2)]


@pytest.mark.parametrize("direction", list(Direction))
def test_every_direction_covers_each_cell_once(direction):
    grid = Grid(5)
    cells = [cell for line in grid.cells_in_line(direction) for cell in line]
    assert len(cells) == 25
    assert set(cells) == {(r, c) for r in range(5) for c in range(5)}


def test_line_cell_puts_destination_first():
    assert line_cell(Direction.LEFT, 2, 0, 4) == (2, 0)
    assert line_cell(Direction.RIGHT, 2, 0, 4) == (2, 3)
    assert line_cell(Direction.UP, 2, 0, 4) == (0, 2)
    assert line_cell(Direction.DOWN, 2, 0, 4) == (3, 2)
