from __future__ import annotations

from typing import Tuple

from numbertile.events.bus import (
    EVENT_SCORE_CHANGED,
    EVENT_TILE_INSERTED,
    EVENT_TILE_MOVED,
    EVENT_TILES_MERGED,
    EventBus,
)
from numbertile.model.grid import Cell


class EventBusObserver:
    """Game model observer that republishes tile operations on the event bus."""

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus

    def on_score_changed(self, score: int) -> None:
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=score)

    def on_tile_moved(self, src: Cell, dst: Cell, value: int) -> None:
        self.event_bus.emit(EVENT_TILE_MOVED, src=src, dst=dst, value=value)

    def on_tiles_merged(self, sources: Tuple[Cell, Cell], dst: Cell, value: int) -> None:
        self.event_bus.emit(EVENT_TILES_MERGED, sources=sources, dst=dst, value=value)

    def on_tile_inserted(self, pos: Cell, value: int) -> None:
        self.event_bus.emit(EVENT_TILE_INSERTED, pos=pos, value=value)
