from __future__ import annotations

import pytest

from snake.clock import TICK_EVENT, TickClock
from snake.config import SPEED_MAX, SPEED_MIN, speed_to_interval


def test_speed_mapping_endpoints():
    assert speed_to_interval(1) == 297
    assert speed_to_interval(20) == 50


def test_speed_mapping_is_strictly_decreasing():
    intervals = [speed_to_interval(s) for s in range(SPEED_MIN, SPEED_MAX + 1)]
    assert all(a > b for a, b in zip(intervals, intervals[1:]))


@pytest.mark.parametrize("setting,expected", [(0, 297), (-5, 297), (21, 50), (1000, 50)])
def test_speed_mapping_clamps(setting, expected):
    assert speed_to_interval(setting) == expected


def test_schedule_replaces_previous_timer(timer):
    clock = TickClock(set_timer=timer)
    clock.schedule(200)
    clock.schedule(100)
    assert timer.active == {TICK_EVENT: 100}
    assert clock.interval_ms == 100
    # each schedule cancels first
    assert timer.calls == [(TICK_EVENT, 0), (TICK_EVENT, 200), (TICK_EVENT, 0), (TICK_EVENT, 100)]


def test_cancel_is_idempotent(timer):
    clock = TickClock(set_timer=timer)
    clock.cancel()
    clock.schedule(150)
    clock.cancel()
    clock.cancel()
    assert timer.active == {}
    assert clock.active is False


def test_non_positive_interval_rejected(timer):
    clock = TickClock(set_timer=timer)
    with pytest.raises(ValueError):
        clock.schedule(0)
