from esper import World

from numbertile.components.game_state import GameMode
from numbertile.components.score_board import ScoreBoard
from numbertile.events.bus import EventBus
from numbertile.rendering.board_renderer import BoardRenderer
from numbertile.rendering.context import RenderContext, build_render_context
from numbertile.rendering.score_renderer import ScoreRenderer
from numbertile.ui.layout import compute_board_geometry
from numbertile.utils.game_state import get_game_state


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.use_easing = True
        self._board_renderer = BoardRenderer()
        self._score_renderer = ScoreRenderer()
        self.last_context: RenderContext | None = None

    def _score(self) -> int:
        for _, board in self.world.get_component(ScoreBoard):
            return board.score
        return 0

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        state = get_game_state(self.world)
        dimension = state.dimension if state else 4
        mode = state.mode if state else GameMode.PLAYING
        tile_width, padding, left, bottom, size = compute_board_geometry(
            self.window.width, self.window.height, dimension,
        )
        ctx = build_render_context(
            self.world, dimension, tile_width, padding, left, bottom, size, use_easing=self.use_easing,
        )
        self.last_context = ctx
        if headless:
            return
        self._board_renderer.draw(ctx)
        self._score_renderer.draw(ctx, self._score(), mode)
