from dataclasses import dataclass

@dataclass(slots=True)
class TileView:
    """Presentation-side tile; paired with BoardPosition on the same entity."""
    value: int
