"""Entry point for the 2048 number-tile game.

Sets up the event bus, ECS world, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from numbertile.config import GameConfig
from numbertile.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from numbertile.events.bus import EVENT_KEY_PRESS, EVENT_TICK, EventBus
from numbertile.systems.animation import AnimationSystem
from numbertile.systems.board_view import BoardViewSystem
from numbertile.systems.game_flow_system import GameFlowSystem
from numbertile.systems.input import InputSystem
from numbertile.systems.render import RenderSystem
from numbertile.world import create_world


class NumberTileWindow(Window):
    def __init__(self, config: GameConfig | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, config)

        # Presentation systems subscribe before the flow system resets the board.
        self.board_view_system = BoardViewSystem(self.world, self.event_bus)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.game_flow_system.show_title_screen()

        set_background_color(color.WHITE)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    NumberTileWindow()
    run()

if __name__ == "__main__":
    main()
