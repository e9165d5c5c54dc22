"""Microsecond clock and frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


def _wall_microseconds() -> int:
    return time.time_ns() // 1000


class Clock:
    """Measures microseconds since its first reading and the time between frames."""

    def __init__(self, source: Optional[Callable[[], int]] = None) -> None:
        self._source = source if source is not None else _wall_microseconds
        self._start: Optional[int] = None
        self._last = 0

    def now(self) -> int:
        """Microseconds elapsed since the first call to :meth:`now`."""
        current = self._source()
        if self._start is None:
            self._start = current
        return current - self._start

    def tick(self) -> float:
        """Seconds elapsed since the previous tick (or since the clock started)."""
        current = self.now()
        elapsed = (current - self._last) / 1_000_000
        self._last = current
        return elapsed