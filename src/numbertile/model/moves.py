"""Single-line slide and merge resolution.

A line is a destination-first sequence of cell values: index 0 is the end
tiles slide toward. ``resolve_line`` works purely on indices so the same
routine serves all four move directions; ``Grid.cells_in_line`` supplies the
index to cell mapping.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar, Union

P = TypeVar('P')
Q = TypeVar('Q')


@dataclass(frozen=True, slots=True)
class MoveOrder(Generic[P]):
    """One tile slides from ``src`` to ``dst`` without merging."""
    src: P
    dst: P
    value: int

    def translate(self, positions: Sequence[Q]) -> MoveOrder[Q]:
        return MoveOrder(positions[self.src], positions[self.dst], self.value)


@dataclass(frozen=True, slots=True)
class MergeOrder(Generic[P]):
    """Two equal tiles combine at ``dst``; ``value`` is the doubled value."""
    sources: Tuple[P, P]
    dst: P
    value: int

    def translate(self, positions: Sequence[Q]) -> MergeOrder[Q]:
        first, second = self.sources
        return MergeOrder((positions[first], positions[second]), positions[self.dst], self.value)


Order = Union[MoveOrder, MergeOrder]


@dataclass(slots=True)
class LineResult:
    values: List[Optional[int]]
    orders: List[Order]
    score: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.orders)


@dataclass(slots=True)
class _Slot:
    value: int
    sources: List[int] = field(default_factory=list)
    merged: bool = False


def resolve_line(values: Sequence[Optional[int]]) -> LineResult:
    """Slide and merge one line toward index 0.

    Each output slot absorbs at most one merge, so ``[2, 2, 2, 2]`` becomes
    ``[4, 4, None, None]`` and ``[4, 2, 2, None]`` becomes ``[4, 4, None, None]``.
    Orders come back in slot order, one per slot that changed.
    """
    slots: List[_Slot] = []
    for index, value in enumerate(values):
        if value is None:
            continue
        last = slots[-1] if slots else None
        if last is not None and not last.merged and last.value == value:
            last.value = value * 2
            last.sources.append(index)
            last.merged = True
        else:
            slots.append(_Slot(value=value, sources=[index]))

    result: List[Optional[int]] = [None] * len(values)
    orders: List[Order] = []
    score = 0
    for dst, slot in enumerate(slots):
        result[dst] = slot.value
        if slot.merged:
            first, second = slot.sources
            orders.append(MergeOrder((first, second), dst, slot.value))
            score += slot.value
        elif slot.sources[0] != dst:
            orders.append(MoveOrder(slot.sources[0], dst, slot.value))
    return LineResult(values=result, orders=orders, score=score)
