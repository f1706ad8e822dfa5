"""Square cell storage for the number-tile board."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from numbertile.model.errors import InvalidTileValue, OutOfBounds

Cell = Tuple[int, int]


class Direction(Enum):
    """Direction tiles travel during a move."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


def is_tile_value(value: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 2 and value & (value - 1) == 0


def line_cell(direction: Direction, line: int, index: int, dimension: int) -> Cell:
    """Map (line, index) to a grid cell so that index 0 is where tiles travel to.

    Rows are the lines for horizontal moves, columns for vertical ones; moves
    toward the high end of an axis read that axis in reverse.
    """
    offset = dimension - 1 - index if direction in (Direction.RIGHT, Direction.DOWN) else index
    if direction.horizontal:
        return (line, offset)
    return (offset, line)


class Grid:
    """NxN array of optional tile values indexed by (row, col)."""

    def __init__(self, dimension: int):
        if dimension < 1:
            raise ValueError(f"Grid dimension must be positive, got {dimension}")
        self.dimension = dimension
        self._cells: List[List[Optional[int]]] = [[None] * dimension for _ in range(dimension)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> Grid:
        """Build a grid from a square nested sequence; 0 and None both mean empty."""
        grid = cls(len(rows))
        for r, row in enumerate(rows):
            if len(row) != grid.dimension:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {grid.dimension}")
            for c, value in enumerate(row):
                grid.set((r, c), value or None)
        return grid

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.dimension and 0 <= col < self.dimension

    def _check(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise OutOfBounds(cell, self.dimension)

    def get(self, cell: Cell) -> Optional[int]:
        self._check(cell)
        row, col = cell
        return self._cells[row][col]

    def set(self, cell: Cell, value: Optional[int]) -> None:
        self._check(cell)
        if value is not None and not is_tile_value(value):
            raise InvalidTileValue(f"Tile value must be a power of two >= 2, got {value!r}")
        row, col = cell
        self._cells[row][col] = value

    def clear(self) -> None:
        for row in self._cells:
            for c in range(self.dimension):
                row[c] = None

    def cells(self) -> Iterator[Tuple[Cell, Optional[int]]]:
        """Yield every (cell, value) pair in row-major order."""
        for r, row in enumerate(self._cells):
            for c, value in enumerate(row):
                yield (r, c), value

    def empty_cells(self) -> Set[Cell]:
        return {cell for cell, value in self.cells() if value is None}

    def cells_in_line(self, direction: Direction) -> List[List[Cell]]:
        n = self.dimension
        return [[line_cell(direction, line, index, n) for index in range(n)] for line in range(n)]

    def values(self, cells: Iterable[Cell]) -> List[Optional[int]]:
        return [self.get(cell) for cell in cells]

    def snapshot(self) -> Tuple[Tuple[Optional[int], ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Grid(dimension={self.dimension}, cells={self.snapshot()!r})"
