"""
clock.py: Turns host timestamps into per-tick time deltas.
"""

from typing import Optional

from .constants import MAX_FRAME_DT


class FrameClock:
    """
    Measures real time between ticks in seconds.

    The last timestamp is updated on every tick, paused or not, so that
    resuming does not produce one huge dt. Each dt is clamped to
    ``[0, max_dt]``; pass ``max_dt=None`` to keep raw wall-clock deltas.
    """

    def __init__(self, start_ms: float, max_dt: Optional[float] = MAX_FRAME_DT):
        if max_dt is not None and max_dt < 0:
            raise ValueError(f"max_dt must be non-negative, got {max_dt}")
        self.last_time = start_ms
        self.max_dt = max_dt

    def tick(self, now_ms: float) -> float:
        dt = (now_ms - self.last_time) / 1000.0
        self.last_time = now_ms

        if dt < 0:
            return 0.0
        if self.max_dt is not None:
            dt = min(dt, self.max_dt)
        return dt
