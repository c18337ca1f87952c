import pytest

from chipeight.timer import Timers


class FakeClock:
    def __init__(self, *readings):
        self._readings = iter(readings)

    def __call__(self):
        return next(self._readings)


def test_starts_at_zero_and_reads_clock_once():
    timers = Timers(clock=FakeClock(100))
    assert timers.delay == 0
    assert timers.sound == 0
    assert timers.previous == 100


def test_no_countdown_when_clock_has_not_moved():
    timers = Timers(clock=FakeClock(100, 100))
    timers.delay = 5
    timers.sound = 5
    assert timers.tick() is False
    assert timers.delay == 5
    assert timers.sound == 5


def test_forward_movement_counts_down():
    timers = Timers(clock=FakeClock(100, 101))
    timers.delay = 5
    timers.sound = 3
    assert timers.tick() is True
    assert timers.delay == 4
    assert timers.sound == 2
    assert timers.previous == 101


def test_small_backward_step_does_not_count_down():
    timers = Timers(clock=FakeClock(100, 95))
    timers.delay = 5
    assert timers.tick() is False
    assert timers.delay == 5
    assert timers.previous == 95


def test_large_backward_step_counts_down():
    timers = Timers(clock=FakeClock(100, 50))
    timers.delay = 5
    assert timers.tick() is True
    assert timers.delay == 4


def test_timers_never_go_below_zero():
    timers = Timers(clock=FakeClock(0, 10, 20, 30))
    timers.delay = 1
    for _ in range(3):
        timers.tick()
    assert timers.delay == 0
    assert timers.sound == 0


@pytest.mark.parametrize("start", [0, 1000, 2**32 - 1])
def test_readings_are_kept_in_32_bits(start):
    timers = Timers(clock=FakeClock(start + 2**32))
    assert timers.previous == start