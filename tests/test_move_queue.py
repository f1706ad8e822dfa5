import pytest

from numbertile.model.game_model import GameModel
from numbertile.model.grid import Direction
from tests.helpers import as_rows, model_from_rows


def test_move_resolves_immediately_when_idle():
    model, _ = model_from_rows([[0, 2], [0, 0]])
    results = []
    model.queue_move(Direction.LEFT, results.append)
    assert results == [True]
    assert model.pending_moves == 0
    assert not model.processing


def test_move_queued_from_completion_waits_for_current_move():
    model, _ = model_from_rows([[0, 2], [0, 0]])
    trace = []

    def first_done(changed):
        trace.append(("first", changed))
        model.queue_move(Direction.DOWN, lambda c: trace.append(("second", c)))
        # Still inside the first move's handling: the second one has not run.
        trace.append(("first-exit", model.pending_moves))

    model.queue_move(Direction.LEFT, first_done)
    assert trace == [("first", True), ("first-exit", 1), ("second", True)]
    assert as_rows(model) == [[0, 0], [2, 0]]


def test_move_queued_from_observer_runs_after_completion():
    trace = []

    class QueueingObserver:
        def __init__(self):
            self.model = None
            self.queued = False

        def on_score_changed(self, score):
            trace.append(("score", score))

        def on_tile_moved(self, src, dst, value):
            trace.append(("move", src, dst))
            if not self.queued:
                self.queued = True
                self.model.queue_move(Direction.RIGHT, lambda c: trace.append(("done-right", c)))

        def on_tiles_merged(self, sources, dst, value):
            trace.append(("merge", dst))

        def on_tile_inserted(self, pos, value):
            trace.append(("insert", pos))

    observer = QueueingObserver()
    model = GameModel(2, 2048, observer)
    observer.model = model
    model.grid.set((0, 1), 2)
    model.grid.set((1, 1), 4)
    model.queue_move(Direction.LEFT, lambda c: trace.append(("done-left", c)))
    assert trace == [
        ("move", (0, 1), (0, 0)),
        ("move", (1, 1), (1, 0)),
        ("done-left", True),
        ("move", (0, 0), (0, 1)),
        ("move", (1, 0), (1, 1)),
        ("done-right", True),
    ]


def test_queued_moves_complete_in_request_order():
    model, _ = model_from_rows([[2, 0], [0, 0]])
    order = []

    def chain(changed):
        order.append(("right", changed))
        model.queue_move(Direction.DOWN, lambda c: order.append(("down", c)))
        model.queue_move(Direction.DOWN, lambda c: order.append(("down-again", c)))

    model.queue_move(Direction.RIGHT, chain)
    assert order == [("right", True), ("down", True), ("down-again", False)]


def test_processing_flag_resets_when_completion_raises():
    model, _ = model_from_rows([[0, 2], [0, 0]])

    def explode(changed):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        model.queue_move(Direction.LEFT, explode)
    assert not model.processing
    results = []
    model.queue_move(Direction.RIGHT, results.append)
    assert results == [True]


def test_move_queued_before_completion_raises_still_resolves():
    model, _ = model_from_rows([[0, 2], [0, 0]])
    trace = []

    def queue_down_then_explode(changed):
        model.queue_move(Direction.DOWN, lambda c: trace.append(("down", c)))
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        model.queue_move(Direction.LEFT, queue_down_then_explode)
    assert trace == [("down", True)]
    assert model.pending_moves == 0
    assert not model.processing
    assert as_rows(model) == [[0, 0], [2, 0]]

    later = []
    model.queue_move(Direction.UP, later.append)
    assert later == [True]
    assert as_rows(model) == [[2, 0], [0, 0]]


def test_reset_clears_board_and_score():
    model, _ = model_from_rows([[2, 2], [0, 0]])
    model.queue_move(Direction.LEFT, lambda c: None)
    assert model.score == 4
    model.user_has_won()
    model.reset()
    assert model.score == 0
    assert not model.won and not model.lost
    assert len(model.grid.empty_cells()) == 4


def test_reset_is_refused_mid_move():
    model, _ = model_from_rows([[0, 2], [0, 0]])
    errors = []

    def try_reset(changed):
        with pytest.raises(RuntimeError):
            model.reset()
        errors.append("refused")

    model.queue_move(Direction.LEFT, try_reset)
    assert errors == ["refused"]
