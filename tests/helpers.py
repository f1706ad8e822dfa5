from __future__ import annotations

import random
from collections import Counter
from typing import Optional, Sequence

from numbertile.model.game_model import GameModel


class RecordingObserver:
    """Observer stand-in that keeps every call as a tuple, in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_score_changed(self, score):
        self.events.append(("score", score))

    def on_tile_moved(self, src, dst, value):
        self.events.append(("move", src, dst, value))

    def on_tiles_merged(self, sources, dst, value):
        self.events.append(("merge", sources, dst, value))

    def on_tile_inserted(self, pos, value):
        self.events.append(("insert", pos, value))

    def of_kind(self, kind: str) -> list[tuple]:
        return [event for event in self.events if event[0] == kind]

    def clear(self) -> None:
        self.events.clear()


def model_from_rows(
    rows: Sequence[Sequence[Optional[int]]],
    *,
    threshold: int = 2048,
    seed: int = 0,
) -> tuple[GameModel, RecordingObserver]:
    """Build a model whose grid holds ``rows`` (0 or None for empty)."""

    observer = RecordingObserver()
    model = GameModel(len(rows), threshold, observer, rng=random.Random(seed))
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value:
                model.grid.set((r, c), value)
    return model, observer


def as_rows(model: GameModel) -> list[list[int]]:
    return [[value or 0 for value in row] for row in model.grid.snapshot()]


def tile_multiset(model: GameModel) -> Counter:
    return Counter(value for _, value in model.grid.cells() if value is not None)
