"""
Session controller - owns the timer, solve history, router and scramble
"""

import logging
from pathlib import Path
from typing import Optional

from . import config
from .clock import Clock
from .history import HistoryWriteError, load_history, save_history
from .navigation import Router
from .scramble import Scrambler
from .solves import HistoryLoadError, SolveHistory, SolveRecord
from .timer import Timer

logger = logging.getLogger(__name__)


class Session:
    """Single owner of all mutable application state.

    Keys are mapped to abstract actions by config.KEY_BINDINGS and every
    action goes through one dispatch table.
    """

    def __init__(self, history_path: Path, clock: Optional[Clock] = None, scrambler: Optional[Scrambler] = None):
        self.history_path = history_path
        self.timer = Timer(clock)
        self.solves = SolveHistory()
        self.router = Router()
        self.scrambler = scrambler or Scrambler()
        self.scramble = self.scrambler.generate()
        self.notice = ""
        self.last_solve: Optional[SolveRecord] = None
        self.last_solve_was_pb = False
        self.write_failed = False

        self._dispatch = {
            config.PRIMARY: self.primary,
            config.INSPECT: self.timer.arm,
            config.ENTER: self.router.enter,
            config.ESCAPE: self.router.escape,
            config.DELETE: self.delete,
            config.HELP: self.router.help,
            config.QUIT: self.quit,
            config.RELOAD: self.reload,
        }
        for action, direction in config.MOVE_ACTIONS.items():
            self._dispatch[action] = self._mover(direction)

    def _mover(self, direction):
        def move():
            self.router.move(direction, times_count=len(self.solves))
        return move

    @property
    def tick_rate(self) -> float:
        if self.timer.is_live:
            return config.RUNNING_TICK_RATE
        return config.IDLE_TICK_RATE

    def handle_key(self, key: int) -> bool:
        """Dispatch a key press; True means the app should exit"""
        action = config.KEY_BINDINGS.get(key)
        if action is None:
            return False
        return self.handle_action(action)

    def handle_action(self, action: str) -> bool:
        return bool(self._dispatch[action]())

    def primary(self):
        draft = self.timer.on_primary_key_event()
        if draft is not None:
            self._commit(draft)

    def on_tick(self):
        self.timer.on_tick()

    def _commit(self, draft: SolveRecord):
        previous_pb = self.solves.aggregates.pb_single
        self.last_solve = self.solves.insert(draft.elapsed_seconds)
        self.last_solve_was_pb = previous_pb is None or draft.elapsed_seconds < previous_pb
        self.scramble = self.scrambler.generate()

    def delete(self):
        row = self.router.delete()
        if row is None or not self.solves:
            return
        self.solves.delete(row)
        self.router.clamp_times(len(self.solves))

    def load(self):
        """Load history from disk; bad data leaves an empty history"""
        try:
            self.solves.load(load_history(self.history_path))
        except HistoryLoadError as exc:
            self.solves.clear()
            logger.warning("Ignoring stored history: %s", exc)
            self.notice = f"History not loaded: {exc}"
        self.router.clamp_times(len(self.solves))

    def save(self) -> bool:
        try:
            save_history(self.history_path, self.solves.serialize())
        except HistoryWriteError as exc:
            logger.error("Saving history failed: %s", exc)
            self.notice = f"History not saved: {exc}"
            self.write_failed = True
            return False
        self.write_failed = False
        return True

    def reload(self):
        if self.save():
            self.notice = ""
            self.load()

    def quit(self) -> bool:
        self.save()
        return True