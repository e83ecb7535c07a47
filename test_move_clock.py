"""Tests for the passive per-move clock."""

import pytest

from board_engine import MoveClock


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def test_not_running_until_started():
    clock = MoveClock(3, FakeClock())
    assert not clock.running
    assert not clock.expired()
    assert clock.time_remaining() is None
    assert clock.seconds_left() is None


def test_counts_down_and_expires():
    fake = FakeClock()
    clock = MoveClock(3, fake).start()
    assert clock.seconds_left() == 3

    fake.now += 1.2
    assert clock.time_remaining() == pytest.approx(1.8)
    assert clock.seconds_left() == 2
    assert not clock.expired()

    fake.now += 1.8
    assert clock.expired()
    assert clock.seconds_left() == 0


def test_restart_and_stop():
    fake = FakeClock()
    clock = MoveClock(3, fake).start()
    fake.now += 5
    assert clock.expired()

    clock.start()
    assert not clock.expired()

    clock.stop()
    fake.now += 10
    assert not clock.expired()


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        MoveClock(0)
