from __future__ import annotations

import logging
from typing import Any, Dict

from numbertile.events.bus import EVENT_KEY_PRESS, EVENT_MOVE_REQUEST, EVENT_NEW_GAME, EventBus
from numbertile.model.grid import Direction
from numbertile.utils.input_throttle import KeyThrottle

logger = logging.getLogger(__name__)

# arcade.key symbol values; kept numeric so the system imports without a window.
KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT = 65362, 65364, 65361, 65363
KEY_W, KEY_A, KEY_S, KEY_D = 119, 97, 115, 100
KEY_N, KEY_R = 110, 114
KEY_ENTER = 65293

KEY_DIRECTIONS: Dict[int, Direction] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_W: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_D: Direction.RIGHT,
}
NEW_GAME_KEYS = (KEY_N, KEY_R, KEY_ENTER)


class InputSystem:
    """Turns raw key presses into move and new-game requests."""

    def __init__(self, event_bus: EventBus, *, throttle: KeyThrottle | None = None) -> None:
        self.event_bus = event_bus
        self._throttle = throttle or KeyThrottle()
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    @property
    def throttle(self) -> KeyThrottle:
        return self._throttle

    def on_key_press(self, sender: Any, **payload: Any) -> None:
        symbol = payload.get("symbol")
        try:
            symbol = int(symbol)
        except (TypeError, ValueError):
            return
        if symbol in NEW_GAME_KEYS:
            self._throttle.reset()
            self.event_bus.emit(EVENT_NEW_GAME)
            return
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is None:
            return
        if not self._throttle.allow(symbol):
            logger.debug("Key %d throttled", symbol)
            return
        self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
