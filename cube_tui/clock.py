"""
Clock sources for the solve timer
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock abstraction.

    The timer reads time through this interface rather than calling the
    real clock directly, so wall-clock adjustments never leak into solves.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class MonotonicClock:
    """Production clock backed by time.monotonic()"""

    def now(self) -> float:
        return time.monotonic()


class FakeClock:
    """Manually advanced clock for tests"""

    def __init__(self, start: float = 0.0):
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float):
        self._now += seconds
