"""Coordinates moves, tile spawning and win/loss follow-up for one session."""
from __future__ import annotations

import logging
import random
from typing import Any

from esper import World

from numbertile.components.game_state import GameMode
from numbertile.config import GameConfig
from numbertile.events.bus import (
    EVENT_BOARD_RESET,
    EVENT_GAME_LOST,
    EVENT_GAME_WON,
    EVENT_MOVE_COMPLETED,
    EVENT_MOVE_REQUEST,
    EVENT_NEW_GAME,
    EventBus,
)
from numbertile.model.game_model import GameModel
from numbertile.model.grid import Direction
from numbertile.systems.event_bridge import EventBusObserver
from numbertile.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Forwards move requests to the model and runs the post-move follow-up.

    After a move that changed the board the player either has won, or a new
    tile is spawned and the board is checked for a loss.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config or getattr(world, "config", None) or GameConfig()
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.model = GameModel(
            self.config.dimension,
            self.config.threshold,
            EventBusObserver(event_bus),
            rng=self._rng,
        )
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self._on_move_request)
        self.event_bus.subscribe(EVENT_NEW_GAME, self._on_new_game)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_new_game(self, sender, **payload: Any) -> None:
        self.start_new_game()

    def _on_move_request(self, sender, **payload: Any) -> None:
        direction = payload.get("direction")
        if direction is None:
            return
        try:
            direction = Direction(direction)
        except ValueError:
            logger.warning("Ignoring move request with unknown direction %r", direction)
            return
        self.request_move(direction)

    # ------------------------------------------------------------------
    # Flow
    # ------------------------------------------------------------------

    def show_title_screen(self) -> None:
        """Clear the board and wait for a new-game request before accepting moves."""
        self.model.reset()
        state = get_game_state(self.world)
        if state is not None:
            state.winning_cell = None
        set_game_mode(self.world, self.event_bus, GameMode.TITLE)
        self.event_bus.emit(EVENT_BOARD_RESET, dimension=self.config.dimension)

    def start_new_game(self) -> None:
        self.model.reset()
        state = get_game_state(self.world)
        if state is not None:
            state.winning_cell = None
            state.dimension = self.config.dimension
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        self.event_bus.emit(EVENT_BOARD_RESET, dimension=self.config.dimension)
        for _ in range(self.config.initial_tiles):
            self.model.insert_tile_at_random_location(self.config.initial_value)
        logger.info("New %dx%d game started", self.config.dimension, self.config.dimension)

    def request_move(self, direction: Direction) -> None:
        state = get_game_state(self.world)
        if state is not None and state.mode != GameMode.PLAYING:
            logger.debug("Move %s ignored in mode %s", direction.value, state.mode.name)
            return

        def on_complete(changed: bool) -> None:
            self._on_move_complete(direction, changed)

        self.model.queue_move(direction, on_complete)

    def _on_move_complete(self, direction: Direction, changed: bool) -> None:
        self.event_bus.emit(EVENT_MOVE_COMPLETED, direction=direction, changed=changed)
        state = get_game_state(self.world)
        # Moves already queued behind a winning or losing one still resolve.
        if not changed or (state is not None and state.mode != GameMode.PLAYING):
            return
        self._follow_up()

    def _follow_up(self) -> None:
        won, winning_cell = self.model.user_has_won()
        if won:
            state = get_game_state(self.world)
            if state is not None:
                state.winning_cell = winning_cell
            set_game_mode(self.world, self.event_bus, GameMode.WON)
            value = self.model.grid.get(winning_cell)
            logger.info("Game won at %s with %d, score %d", winning_cell, value, self.model.score)
            self.event_bus.emit(EVENT_GAME_WON, pos=winning_cell, value=value, score=self.model.score)
            return

        self.model.insert_tile_at_random_location(self._next_tile_value())
        if self.model.user_has_lost():
            set_game_mode(self.world, self.event_bus, GameMode.LOST)
            logger.info("Game lost, final score %d", self.model.score)
            self.event_bus.emit(EVENT_GAME_LOST, score=self.model.score)

    def _next_tile_value(self) -> int:
        if self._rng.random() < self.config.four_probability:
            return self.config.bonus_value
        return self.config.spawn_value
