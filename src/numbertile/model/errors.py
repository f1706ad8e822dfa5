"""Exceptions raised by the grid and game model."""


class GameModelError(Exception):
    """Base class for game model contract violations."""


class OutOfBounds(GameModelError, IndexError):
    """A cell coordinate fell outside ``[0, dimension)``."""

    def __init__(self, cell, dimension: int):
        super().__init__(f"Cell {cell!r} is outside a {dimension}x{dimension} grid")
        self.cell = cell
        self.dimension = dimension


class EmptyBoardInsertion(GameModelError):
    """A tile insertion found no empty cell to use."""


class InvalidTileValue(GameModelError, ValueError):
    """A cell was given a value that is not a power of two >= 2."""
