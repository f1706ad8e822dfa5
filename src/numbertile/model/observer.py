"""Capability set the game model reports tile operations to."""
from __future__ import annotations

from typing import Protocol, Tuple

from numbertile.model.grid import Cell


class GameModelObserver(Protocol):
    """Receives every granular tile operation the model performs.

    Calls arrive synchronously while a move is being resolved, in the order
    the model applies them to its grid.
    """

    def on_score_changed(self, score: int) -> None: ...

    def on_tile_moved(self, src: Cell, dst: Cell, value: int) -> None: ...

    def on_tiles_merged(self, sources: Tuple[Cell, Cell], dst: Cell, value: int) -> None: ...

    def on_tile_inserted(self, pos: Cell, value: int) -> None: ...


class NullObserver:
    """Observer that ignores everything; used when no presentation is attached."""

    def on_score_changed(self, score: int) -> None:
        pass

    def on_tile_moved(self, src: Cell, dst: Cell, value: int) -> None:
        pass

    def on_tiles_merged(self, sources: Tuple[Cell, Cell], dst: Cell, value: int) -> None:
        pass

    def on_tile_inserted(self, pos: Cell, value: int) -> None:
        pass
