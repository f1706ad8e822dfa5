import random

from esper import World

from numbertile.components.game_state import GameMode, GameState
from numbertile.components.score_board import ScoreBoard
from numbertile.config import GameConfig
from numbertile.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    world = World()
    config = config or GameConfig()
    setattr(world, "random", rng or random.Random())
    setattr(world, "config", config)

    # Singleton resources: game mode and the score shown to the player.
    world.create_entity(
        GameState(mode=GameMode.PLAYING, dimension=config.dimension),
        ScoreBoard(),
    )
    return world
