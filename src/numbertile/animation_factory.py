from esper import World
from numbertile.components.animation_slide import SlideAnimation
from numbertile.components.animation_merge import MergeAnimation
from numbertile.components.animation_spawn import SpawnAnimation
from numbertile.components.duration import Duration
from numbertile.constants import SLIDE_DURATION, MERGE_DURATION, SPAWN_DURATION
from typing import Tuple, List

class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_slide_group(self, moves: List[dict], duration: float = SLIDE_DURATION) -> List[int]:
        return [
            self.world.create_entity(SlideAnimation(src=m['from'], dst=m['to']), Duration(duration))
            for m in moves
        ]

    def create_merge_group(self, merges: List[dict], duration: float = MERGE_DURATION) -> List[int]:
        return [
            self.world.create_entity(MergeAnimation(sources=m['from'], dst=m['to']), Duration(duration))
            for m in merges
        ]

    def create_spawn_group(self, positions: List[Tuple[int,int]], duration: float = SPAWN_DURATION) -> List[int]:
        return [
            self.world.create_entity(SpawnAnimation(pos=pos), Duration(duration))
            for pos in positions
        ]
