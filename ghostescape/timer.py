"""Repeating timers that flag each time an interval elapses."""

from __future__ import annotations

from typing import Any

from .objects import Object


class Timer(Object):
    """A timer that is inactive until started and latches a time-out flag."""

    def __init__(self) -> None:
        super().__init__()
        self.timer = 0.0
        self.interval = 3.0
        self._time_out = False

    def update(self, dt: float) -> None:
        self.timer += dt
        if self.timer >= self.interval:
            self.timer = 0.0
            self._time_out = True

    def start(self) -> None:
        self.is_active = True

    def stop(self) -> None:
        self.is_active = False

    def time_out(self) -> bool:
        """True once after each elapsed interval; the flag is then cleared."""
        if self._time_out:
            self._time_out = False
            return True
        return False

    @property
    def progress(self) -> float:
        """Fraction of the current interval that has passed."""
        return self.timer / self.interval


def add_timer_child(parent: Any, interval: float = 3.0) -> Timer:
    """Create a stopped timer and attach it to ``parent``."""
    timer = Timer()
    timer.interval = interval
    if parent is not None:
        parent.add_child(timer)
    timer.is_active = False
    return timer