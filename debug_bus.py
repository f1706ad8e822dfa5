"""Headless run that plays random moves and logs every bus event.

Run with: ``python debug_bus.py [seed]``
"""
import logging
import os
import random
import sys

ROOT = os.path.dirname(__file__); SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path: sys.path.insert(0, SRC)

from numbertile.events import bus as events
from numbertile.events.bus import EventBus, EVENT_MOVE_REQUEST, EVENT_TICK
from numbertile.model.grid import Direction
from numbertile.systems.animation import AnimationSystem
from numbertile.systems.board_view import BoardViewSystem
from numbertile.systems.game_flow_system import GameFlowSystem
from numbertile.components.game_state import GameMode
from numbertile.utils.game_state import get_game_state
from numbertile.world import create_world

logger = logging.getLogger("debug_bus")


def main(seed: int = 0, max_moves: int = 2000) -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    rng = random.Random(seed)
    bus = EventBus()
    world = create_world(bus, rng=rng)
    for name in dir(events):
        if name.startswith("EVENT_") and name != "EVENT_TICK":
            event_name = getattr(events, name)
            bus.subscribe(event_name, lambda sender, _n=event_name, **kw: logger.debug("%s %s", _n, kw))
    BoardViewSystem(world, bus)
    AnimationSystem(world, bus)
    flow = GameFlowSystem(world, bus)
    flow.start_new_game()
    for _ in range(max_moves):
        if get_game_state(world).mode != GameMode.PLAYING:
            break
        bus.emit(EVENT_MOVE_REQUEST, direction=rng.choice(list(Direction)))
        for _ in range(10):
            bus.emit(EVENT_TICK, dt=0.02)
    for row in flow.model.grid.snapshot():
        logger.info(" \t".join(str(v or '.') for v in row))
    logger.info("mode=%s score=%d", get_game_state(world).mode.name, flow.model.score)


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 0)
