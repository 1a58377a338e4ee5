"""Tests for the solve timer state machine.

A ``FakeClock`` drives time explicitly so every transition and elapsed
value is deterministic.
"""

from cube_tui.clock import FakeClock
from cube_tui.timer import Timer, TimerState, format_time


def test_full_solve_cycle_measures_elapsed() -> None:
    """Idle -> Running -> Stopped yields the exact clock delta."""
    clock = FakeClock()
    timer = Timer(clock)
    assert timer.state is TimerState.IDLE

    assert timer.on_primary_key_event() is None
    assert timer.state is TimerState.RUNNING

    clock.advance(12.34)
    draft = timer.on_primary_key_event()
    assert timer.state is TimerState.STOPPED
    assert draft is not None
    assert draft.elapsed_seconds == 12.34
    assert draft.average_of_5 is None
    assert timer.last_result == 12.34


def test_press_after_stop_returns_to_idle_and_keeps_result() -> None:
    clock = FakeClock()
    timer = Timer(clock)
    timer.on_primary_key_event()
    clock.advance(12.34)
    draft = timer.on_primary_key_event()

    clock.advance(3.0)
    assert timer.on_primary_key_event() is None
    assert timer.state is TimerState.IDLE
    assert draft.elapsed_seconds == 12.34
    assert timer.last_result == 12.34
    assert timer.text() == "00:12.34"


def test_tick_only_updates_display() -> None:
    clock = FakeClock()
    timer = Timer(clock)
    timer.on_primary_key_event()
    clock.advance(2.5)
    timer.on_tick()
    assert timer.state is TimerState.RUNNING
    assert timer.elapsed == 2.5
    assert timer.last_result is None
    assert timer.text() == "00:02.50"


def test_tick_while_idle_is_noop() -> None:
    clock = FakeClock()
    timer = Timer(clock)
    clock.advance(5.0)
    timer.on_tick()
    assert timer.state is TimerState.IDLE
    assert timer.text() == "00:00.00"


def test_inspection_auto_starts_at_deadline() -> None:
    """A solve starts when inspection runs out, timed from the deadline."""
    clock = FakeClock()
    timer = Timer(clock, inspection_seconds=15.0)
    timer.arm()
    assert timer.state is TimerState.ARMED
    assert timer.is_live

    clock.advance(10.0)
    timer.on_tick()
    assert timer.state is TimerState.ARMED
    assert timer.inspection_remaining == 5.0

    clock.advance(5.5)
    timer.on_tick()
    assert timer.state is TimerState.RUNNING
    assert timer.elapsed == 0.5

    clock.advance(10.0)
    draft = timer.on_primary_key_event()
    assert draft.elapsed_seconds == 10.5


def test_primary_during_inspection_starts_early() -> None:
    clock = FakeClock()
    timer = Timer(clock)
    timer.arm()
    clock.advance(4.0)
    timer.on_primary_key_event()
    assert timer.state is TimerState.RUNNING
    clock.advance(7.0)
    assert timer.on_primary_key_event().elapsed_seconds == 7.0


def test_arm_ignored_while_running() -> None:
    timer = Timer(FakeClock())
    timer.on_primary_key_event()
    timer.arm()
    assert timer.state is TimerState.RUNNING


def test_format_time() -> None:
    assert format_time(0.0) == "00:00.00"
    assert format_time(72.5) == "01:12.50"
