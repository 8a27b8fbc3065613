from __future__ import annotations

import pytest

from frogger.clock import FrameClock


def test_dt_is_elapsed_milliseconds_in_seconds() -> None:
    clock = FrameClock(1000.0, max_dt=None)
    assert clock.tick(1016.0) == pytest.approx(0.016)
    assert clock.tick(1050.0) == pytest.approx(0.034)


def test_last_time_advances_every_tick() -> None:
    clock = FrameClock(0.0, max_dt=None)
    clock.tick(500.0)
    assert clock.last_time == 500.0
    assert clock.tick(600.0) == pytest.approx(0.1)


def test_long_stall_is_clamped() -> None:
    clock = FrameClock(0.0, max_dt=0.1)
    assert clock.tick(5000.0) == pytest.approx(0.1)
    # The stall is not carried into the next frame.
    assert clock.tick(5020.0) == pytest.approx(0.02)


def test_unclamped_clock_keeps_raw_delta() -> None:
    clock = FrameClock(0.0, max_dt=None)
    assert clock.tick(5000.0) == pytest.approx(5.0)


def test_time_going_backwards_gives_zero() -> None:
    clock = FrameClock(1000.0)
    assert clock.tick(900.0) == 0.0
    assert clock.last_time == 900.0


def test_negative_max_dt_is_rejected() -> None:
    with pytest.raises(ValueError):
        FrameClock(0.0, max_dt=-1.0)
