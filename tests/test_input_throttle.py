from numbertile.utils.input_throttle import KeyThrottle


class _FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def test_key_throttle_blocks_rapid_repeat():
    clock = _FakeClock()
    throttle = KeyThrottle(min_interval=0.1, clock=clock)

    assert throttle.allow(65361)
    clock.advance(0.05)
    assert not throttle.allow(65361)
    clock.advance(0.05)
    assert throttle.allow(65361)


def test_key_throttle_times_each_key_separately():
    clock = _FakeClock()
    throttle = KeyThrottle(min_interval=0.1, clock=clock)

    assert throttle.allow(65361)
    clock.advance(0.01)
    assert throttle.allow(65362)
    assert not throttle.allow(65361)


def test_rejected_press_does_not_extend_the_window():
    clock = _FakeClock()
    throttle = KeyThrottle(min_interval=0.1, clock=clock)

    assert throttle.allow(65361)
    clock.advance(0.05)
    assert not throttle.allow(65361)
    clock.advance(0.06)
    assert throttle.allow(65361)


def test_key_throttle_reset_forgets_history():
    clock = _FakeClock()
    throttle = KeyThrottle(min_interval=0.1, clock=clock)

    assert throttle.allow(65361)
    throttle.reset()
    assert throttle.allow(65361)
