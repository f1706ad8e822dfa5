from numbertile.events.bus import (EVENT_TICK, EventBus, EVENT_ANIMATION_START, EVENT_ANIMATION_COMPLETE,
                                  EVENT_BOARD_RESET)
from numbertile.components.animation_slide import SlideAnimation
from numbertile.components.animation_merge import MergeAnimation
from numbertile.components.animation_spawn import SpawnAnimation
from numbertile.components.duration import Duration
from numbertile.animation_factory import AnimationFactory
from esper import World

# Completion order within a tick: tiles finish sliding before merged tiles pop and new tiles appear.
ANIMATION_KINDS = (
    ('slide', SlideAnimation),
    ('merge', MergeAnimation),
    ('spawn', SpawnAnimation),
)


class AnimationSystem:
    """Drives timing of tile animations; each animation is its own entity."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_BOARD_RESET, self.on_board_reset)

    @property
    def busy(self) -> bool:
        return any(self.world.get_component(comp_type) for _, comp_type in ANIMATION_KINDS)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind'); items = kwargs.get('items', [])
        if not items:
            return
        if kind == 'slide':
            self.factory.create_slide_group(items)
        elif kind == 'merge':
            self.factory.create_merge_group(items)
        elif kind == 'spawn':
            self.factory.create_spawn_group(items)

    def on_board_reset(self, sender, **kwargs):
        for _, comp_type in ANIMATION_KINDS:
            for ent, _ in list(self.world.get_component(comp_type)):
                self.world.delete_entity(ent, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for kind, comp_type in ANIMATION_KINDS:
            running = list(self.world.get_component(comp_type))
            if not running:
                continue
            for ent, anim in running:
                if anim.linear < 1.0:
                    d = self.world.component_for_entity(ent, Duration)
                    anim.linear = 1.0 if d.value <= 0 else min(1.0, anim.linear + dt / d.value)
            if all(anim.linear >= 1.0 for _, anim in running):
                items = [self._describe(anim) for _, anim in running]
                for ent, _ in running:
                    self.world.delete_entity(ent, immediate=True)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=kind, items=items)

    @staticmethod
    def _describe(anim):
        if isinstance(anim, SlideAnimation):
            return {'from': anim.src, 'to': anim.dst}
        if isinstance(anim, MergeAnimation):
            return {'from': anim.sources, 'to': anim.dst}
        return anim.pos
