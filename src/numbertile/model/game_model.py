"""Game model: grid ownership, serialized move resolution, win/loss checks."""
from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional, Tuple

from numbertile.model.errors import EmptyBoardInsertion
from numbertile.model.grid import Cell, Direction, Grid
from numbertile.model.moves import MergeOrder, MoveOrder, resolve_line
from numbertile.model.observer import GameModelObserver, NullObserver

logger = logging.getLogger(__name__)

MoveCallback = Callable[[bool], None]


@dataclass(slots=True)
class MoveCommand:
    direction: Direction
    on_complete: MoveCallback


class GameModel:
    """Owns the board and resolves queued moves one at a time.

    Every tile operation is reported to ``observer`` as it is committed, so a
    presentation layer can keep its own view of tile identity in sync.
    """

    def __init__(
        self,
        dimension: int,
        threshold: int,
        observer: GameModelObserver | None = None,
        *,
        rng: random.Random | None = None,
    ):
        if threshold < 1:
            raise ValueError(f"Win threshold must be positive, got {threshold}")
        self.grid = Grid(dimension)
        self.threshold = threshold
        self.observer: GameModelObserver = observer or NullObserver()
        self.score = 0
        self.won = False
        self.lost = False
        self._rng = rng or random.Random()
        self._queue: Deque[MoveCommand] = deque()
        self._processing = False

    @property
    def dimension(self) -> int:
        return self.grid.dimension

    @property
    def pending_moves(self) -> int:
        return len(self._queue)

    @property
    def processing(self) -> bool:
        return self._processing

    def reset(self) -> None:
        if self._processing:
            raise RuntimeError("Cannot reset the game model while a move is being resolved")
        self.grid.clear()
        self.score = 0
        self.won = False
        self.lost = False
        self._queue.clear()

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def queue_move(self, direction: Direction, on_complete: MoveCallback) -> None:
        """Queue a move; it resolves now unless another move is in flight.

        Requests made from inside an observer callback or ``on_complete`` are
        appended and resolved after the current move has fully committed.
        If a callback raises, the remaining queued moves still resolve and the
        first error is re-raised once the queue is empty.
        """
        self._queue.append(MoveCommand(Direction(direction), on_complete))
        if self._processing:
            logger.debug("Move %s queued behind %d pending", direction, len(self._queue) - 1)
            return
        self._processing = True
        error: Exception | None = None
        try:
            while self._queue:
                command = self._queue.popleft()
                try:
                    changed = self._perform_move(command.direction)
                    command.on_complete(changed)
                except Exception as exc:
                    logger.error("Move %s failed: %s; %d queued moves still to resolve",
                                 command.direction.value, exc, len(self._queue))
                    if error is None:
                        error = exc
        finally:
            self._processing = False
        if error is not None:
            raise error

    def _perform_move(self, direction: Direction) -> bool:
        changed = False
        for line in self.grid.cells_in_line(direction):
            result = resolve_line(self.grid.values(line))
            if not result.changed:
                continue
            changed = True
            for cell, value in zip(line, result.values):
                self.grid.set(cell, value)
            for order in result.orders:
                self._report(order.translate(line))
        logger.debug("Move %s resolved, changed=%s score=%d", direction.value, changed, self.score)
        return changed

    def _report(self, order) -> None:
        if isinstance(order, MergeOrder):
            self.observer.on_tiles_merged(order.sources, order.dst, order.value)
            self.score += order.value
            self.observer.on_score_changed(self.score)
        elif isinstance(order, MoveOrder):
            self.observer.on_tile_moved(order.src, order.dst, order.value)

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_tile(self, pos: Cell, value: int) -> bool:
        """Place a tile at an empty cell; returns False if the cell is occupied."""
        if self.grid.get(pos) is not None:
            logger.debug("Insert at %s skipped, cell occupied", pos)
            return False
        self.grid.set(pos, value)
        self.observer.on_tile_inserted(pos, value)
        return True

    def _random_empty_cell(self) -> Cell:
        empty = sorted(self.grid.empty_cells())
        if not empty:
            raise EmptyBoardInsertion("No empty cell left on the board")
        return self._rng.choice(empty)

    def insert_tile_at_random_location(self, value: int) -> Optional[Cell]:
        try:
            pos = self._random_empty_cell()
        except EmptyBoardInsertion:
            logger.debug("Random insert of %d ignored, board is full", value)
            return None
        self.insert_tile(pos, value)
        return pos

    # ------------------------------------------------------------------
    # Win / loss
    # ------------------------------------------------------------------

    def user_has_won(self) -> Tuple[bool, Optional[Cell]]:
        for cell, value in self.grid.cells():
            if value is not None and value >= self.threshold:
                self.won = True
                return True, cell
        return False, None

    def user_has_lost(self) -> bool:
        """True when the board is full and no orthogonal neighbours match."""
        if self.grid.empty_cells():
            return False
        n = self.dimension
        for r in range(n):
            for c in range(n):
                value = self.grid.get((r, c))
                if c + 1 < n and self.grid.get((r, c + 1)) == value:
                    return False
                if r + 1 < n and self.grid.get((r + 1, c)) == value:
                    return False
        self.lost = True
        return True
