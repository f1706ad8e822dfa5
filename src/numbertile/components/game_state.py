"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


class GameMode(Enum):
    """High-level game modes that decide whether moves are accepted."""
    TITLE = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and board settings."""
    mode: GameMode = GameMode.PLAYING
    dimension: int = 4
    winning_cell: Optional[Tuple[int, int]] = field(default=None)
