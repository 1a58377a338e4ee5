"""
Solve timer state machine
"""

from enum import Enum
from typing import Optional

from .clock import Clock, MonotonicClock
from .config import INSPECTION_SECONDS
from .solves import SolveRecord


class TimerState(Enum):
    IDLE = "idle"
    ARMED = "armed"  # inspection countdown
    RUNNING = "running"
    STOPPED = "stopped"


def format_time(seconds: float) -> str:
    """Format time as MM:SS.cc"""
    mins = int(seconds // 60)
    secs = seconds % 60
    return f"{mins:02d}:{secs:05.2f}"


class Timer:
    """Space-driven solve timer.

    IDLE -> RUNNING -> STOPPED -> IDLE on successive primary key presses.
    arm() starts an inspection countdown (ARMED) that hands over to RUNNING
    either on the primary key or when the countdown runs out.
    """

    def __init__(self, clock: Optional[Clock] = None, inspection_seconds: float = INSPECTION_SECONDS):
        self.clock = clock or MonotonicClock()
        self.inspection_seconds = inspection_seconds
        self.state = TimerState.IDLE
        self.last_result: Optional[float] = None
        self.elapsed = 0.0  # display only
        self._start = 0.0
        self._armed_at = 0.0

    @property
    def is_live(self) -> bool:
        return self.state in (TimerState.ARMED, TimerState.RUNNING)

    @property
    def inspection_remaining(self) -> float:
        if self.state is not TimerState.ARMED:
            return 0.0
        remaining = self.inspection_seconds - (self.clock.now() - self._armed_at)
        return max(remaining, 0.0)

    def _start_solve(self, at: float):
        self.state = TimerState.RUNNING
        self._start = at
        self.elapsed = 0.0

    def on_primary_key_event(self) -> Optional[SolveRecord]:
        """Advance on the action key; returns the draft record when a solve ends"""
        now = self.clock.now()

        if self.state in (TimerState.IDLE, TimerState.ARMED):
            self._start_solve(now)
            return None

        if self.state is TimerState.RUNNING:
            elapsed = now - self._start
            self.state = TimerState.STOPPED
            self.elapsed = elapsed
            self.last_result = elapsed
            return SolveRecord(elapsed_seconds=elapsed)

        # STOPPED: keep showing the last result
        self.state = TimerState.IDLE
        return None

    def arm(self):
        """Begin inspection"""
        if self.state in (TimerState.IDLE, TimerState.STOPPED):
            self.state = TimerState.ARMED
            self._armed_at = self.clock.now()

    def on_tick(self):
        now = self.clock.now()
        if self.state is TimerState.ARMED:
            deadline = self._armed_at + self.inspection_seconds
            if now >= deadline:
                self._start_solve(deadline)
                self.elapsed = now - deadline
        elif self.state is TimerState.RUNNING:
            self.elapsed = now - self._start

    def text(self) -> str:
        if self.state is TimerState.ARMED:
            return f"{self.inspection_remaining:.0f}"
        if self.state is TimerState.RUNNING:
            return format_time(self.elapsed)
        if self.last_result is not None:
            return format_time(self.last_result)
        return format_time(0.0)
