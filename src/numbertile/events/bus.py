from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int
EVENT_MOVE_REQUEST = "move_request"                # payload: direction=Direction
EVENT_NEW_GAME = "new_game"                        # payload: None


# ============================================================================
# TILE OPERATIONS (reported by the game model)
# ============================================================================
EVENT_TILE_MOVED = "tile_moved"                    # payload: src=(r,c), dst=(r,c), value=int
EVENT_TILES_MERGED = "tiles_merged"                # payload: sources=((r,c),(r,c)), dst=(r,c), value=int
EVENT_TILE_INSERTED = "tile_inserted"              # payload: pos=(r,c), value=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_BOARD_RESET = "board_reset"                  # payload: dimension=int
EVENT_MOVE_COMPLETED = "move_completed"            # payload: direction=Direction, changed=bool
EVENT_GAME_WON = "game_won"                        # payload: pos=(r,c), value=int, score=int
EVENT_GAME_LOST = "game_lost"                      # payload: score=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list
