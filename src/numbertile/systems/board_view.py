from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from esper import World

from numbertile.components.board_position import BoardPosition
from numbertile.components.score_board import ScoreBoard
from numbertile.components.tile_view import TileView
from numbertile.events.bus import (
    EVENT_ANIMATION_START,
    EVENT_BOARD_RESET,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_INSERTED,
    EVENT_TILE_MOVED,
    EVENT_TILES_MERGED,
    EventBus,
)

logger = logging.getLogger(__name__)

BoardPos = Tuple[int, int]


class BoardViewSystem:
    """Keeps one TileView entity per visible tile, following model events.

    Tile identity matters to the renderer: a slid tile keeps its entity, a
    merge retires both source entities and creates a new one at the target.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._by_pos: Dict[BoardPos, int] = {}
        self.event_bus.subscribe(EVENT_BOARD_RESET, self.on_board_reset)
        self.event_bus.subscribe(EVENT_TILE_MOVED, self.on_tile_moved)
        self.event_bus.subscribe(EVENT_TILES_MERGED, self.on_tiles_merged)
        self.event_bus.subscribe(EVENT_TILE_INSERTED, self.on_tile_inserted)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)

    def entity_at(self, row: int, col: int) -> Optional[int]:
        return self._by_pos.get((row, col))

    def values(self) -> Dict[BoardPos, int]:
        return {pos: self.world.component_for_entity(ent, TileView).value for pos, ent in self._by_pos.items()}

    def on_board_reset(self, sender, **kwargs):
        for ent in list(self._by_pos.values()):
            self.world.delete_entity(ent, immediate=True)
        self._by_pos.clear()
        for _, score in self.world.get_component(ScoreBoard):
            score.score = 0

    def on_tile_moved(self, sender, **kwargs):
        src = kwargs.get('src'); dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        ent = self._by_pos.pop(tuple(src), None)
        if ent is None:
            logger.warning("No tile view at %s to move to %s", src, dst)
            return
        pos = self.world.component_for_entity(ent, BoardPosition)
        pos.row, pos.col = dst
        self._by_pos[tuple(dst)] = ent
        self.event_bus.emit(EVENT_ANIMATION_START, kind='slide', items=[{'from': tuple(src), 'to': tuple(dst)}])

    def on_tiles_merged(self, sender, **kwargs):
        sources = kwargs.get('sources'); dst = kwargs.get('dst'); value = kwargs.get('value')
        if not sources or dst is None or value is None:
            return
        for src in sources:
            ent = self._by_pos.pop(tuple(src), None)
            if ent is not None:
                self.world.delete_entity(ent, immediate=True)
        self._spawn_view(tuple(dst), value)
        self.event_bus.emit(
            EVENT_ANIMATION_START,
            kind='merge',
            items=[{'from': tuple(tuple(s) for s in sources), 'to': tuple(dst)}],
        )

    def on_tile_inserted(self, sender, **kwargs):
        pos = kwargs.get('pos'); value = kwargs.get('value')
        if pos is None or value is None:
            return
        self._spawn_view(tuple(pos), value)
        self.event_bus.emit(EVENT_ANIMATION_START, kind='spawn', items=[tuple(pos)])

    def on_score_changed(self, sender, **kwargs):
        score = kwargs.get('score')
        if score is None:
            return
        for _, board in self.world.get_component(ScoreBoard):
            board.score = int(score)

    def _spawn_view(self, pos: BoardPos, value: int) -> int:
        previous = self._by_pos.pop(pos, None)
        if previous is not None:
            logger.warning("Replacing stale tile view at %s", pos)
            self.world.delete_entity(previous, immediate=True)
        ent = self.world.create_entity(BoardPosition(row=pos[0], col=pos[1]), TileView(value=value))
        self._by_pos[pos] = ent
        return ent
