"""A pausable millisecond stopwatch."""

from __future__ import annotations

import time
from typing import Callable, Optional


def _milliseconds() -> int:
    return int(time.monotonic() * 1000)


class Timer:
    """Counts milliseconds since start, not counting time spent paused."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _milliseconds
        self._start_ticks = 0
        self._paused_ticks = 0
        self._paused = False
        self._started = False

    def start(self) -> None:
        """Start, or restart, from zero."""
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()
        self._paused_ticks = 0

    def stop(self) -> None:
        """Stop and reset."""
        self._started = False
        self._paused = False
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        """Freeze the count if running and not already paused."""
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = self._clock() - self._start_ticks
            self._start_ticks = 0

    def unpause(self) -> None:
        """Resume counting if paused."""
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = self._clock() - self._paused_ticks
            self._paused_ticks = 0

    def ticks(self) -> int:
        """Return the elapsed milliseconds; zero when not started."""
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return self._clock() - self._start_ticks

    def is_started(self) -> bool:
        """Return whether the timer is running, paused or not."""
        return self._started

    def is_paused(self) -> bool:
        """Return whether the timer is running and paused."""
        return self._paused and self._started