"""Per-session game settings."""
from __future__ import annotations

from dataclasses import dataclass

from numbertile.constants import DEFAULT_DIMENSION, DEFAULT_THRESHOLD
from numbertile.model.grid import is_tile_value


@dataclass(slots=True)
class GameConfig:
    """Board size, win threshold and the tile spawn policy of the caller.

    ``four_probability`` is the chance a spawned tile uses ``bonus_value``
    instead of ``spawn_value``.
    """

    dimension: int = DEFAULT_DIMENSION
    threshold: int = DEFAULT_THRESHOLD
    initial_tiles: int = 2
    initial_value: int = 2
    spawn_value: int = 2
    bonus_value: int = 4
    four_probability: float = 0.1

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise ValueError(f"dimension must be positive, got {self.dimension}")
        if not is_tile_value(self.threshold):
            raise ValueError(f"threshold must be a power of two >= 2, got {self.threshold}")
        if not 0 <= self.initial_tiles <= self.dimension * self.dimension:
            raise ValueError(f"initial_tiles must fit on the board, got {self.initial_tiles}")
        for name in ("initial_value", "spawn_value", "bonus_value"):
            if not is_tile_value(getattr(self, name)):
                raise ValueError(f"{name} must be a power of two >= 2, got {getattr(self, name)}")
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(f"four_probability must be within [0, 1], got {self.four_probability}")
