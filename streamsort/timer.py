"""Wall-clock stopwatch measuring time elapsed since a start point."""

from __future__ import annotations

import time
from typing import Callable, Optional, Tuple

_US_PER_SECOND = 1_000_000
_NS_PER_US = 1_000


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


class Stopwatch:
    """Measures time since a start point.

    Unless the start point is set with :meth:`reset` or :meth:`set_start`,
    the first reading fixes it, so the first reading is always zero.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._start: Optional[Tuple[int, int]] = None

    def _now(self) -> Tuple[int, int]:
        total_us = self._clock() // _NS_PER_US
        return divmod(total_us, _US_PER_SECOND)

    def _elapsed(self) -> Tuple[int, int]:
        now = self._now()
        if self._start is None:
            self._start = now
        start_s, start_us = self._start
        return now[0] - start_s, now[1] - start_us

    def milliseconds(self) -> int:
        """Whole milliseconds elapsed since the start point."""
        seconds, micros = self._elapsed()
        return _truncating_div(micros, 1000) + seconds * 1000

    def microseconds(self) -> int:
        """Microseconds elapsed since the start point."""
        seconds, micros = self._elapsed()
        return micros + seconds * _US_PER_SECOND

    def seconds(self) -> float:
        """Seconds elapsed since the start point, as a float."""
        seconds, micros = self._elapsed()
        return micros / 1_000_000.0 + float(seconds)

    def reset(self) -> None:
        """Start measuring from now."""
        self._start = self._now()

    def set_start(self, seconds: int, microseconds: int) -> None:
        """Start measuring from a given epoch time."""
        self._start = (seconds, microseconds)