import pytest

from arcadebox.timer import Timer


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_not_started_reads_zero(clock):
    timer = Timer(clock)
    clock.now += 500
    assert timer.ticks() == 0
    assert timer.is_started() is False
    assert timer.is_paused() is False


def test_counts_elapsed_time(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 100
    assert timer.ticks() == 100
    assert timer.is_started() is True


def test_pause_freezes_and_unpause_resumes(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 100
    timer.pause()
    assert timer.is_paused() is True
    clock.now += 50
    assert timer.ticks() == 100
    timer.unpause()
    assert timer.is_paused() is False
    clock.now += 30
    assert timer.ticks() == 130


def test_stop_resets(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 100
    timer.pause()
    timer.stop()
    assert timer.ticks() == 0
    assert timer.is_started() is False
    assert timer.is_paused() is False


def test_pause_without_start_does_nothing(clock):
    timer = Timer(clock)
    timer.pause()
    assert timer.is_paused() is False
    timer.unpause()
    assert timer.ticks() == 0


def test_restart_counts_from_zero(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 100
    timer.start()
    clock.now += 20
    assert timer.ticks() == 20


def test_default_clock_is_monotonic():
    timer = Timer()
    timer.start()
    first = timer.ticks()
    second = timer.ticks()
    assert 0 <= first <= second