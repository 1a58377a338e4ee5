"""
Configuration constants for the cube timer
"""

import curses
import os
from pathlib import Path

from .navigation import Direction


class ConfigError(Exception):
    """Raised when the application cannot be configured (fatal)"""


# Timer tick rates in seconds (fast while the clock is visibly running)
RUNNING_TICK_RATE = 0.1
IDLE_TICK_RATE = 1.0

# WCA inspection length
INSPECTION_SECONDS = 15.0

# Scramble generation
SCRAMBLE_LENGTH = 20
MAX_RESAMPLE_ATTEMPTS = 64

# History file location
HISTORY_ENV_VAR = "CUBE_TUI_HISTORY"
APP_DIR_NAME = "cube-tui"
HISTORY_FILENAME = "times.json"
LOG_FILENAME = "cube-tui.log"


# Abstract actions produced by key presses
PRIMARY = "primary"
INSPECT = "inspect"
MOVE_UP = "move_up"
MOVE_DOWN = "move_down"
MOVE_LEFT = "move_left"
MOVE_RIGHT = "move_right"
ENTER = "enter"
ESCAPE = "escape"
DELETE = "delete"
HELP = "help"
QUIT = "quit"
RELOAD = "reload"

MOVE_ACTIONS = {
    MOVE_UP: Direction.UP,
    MOVE_DOWN: Direction.DOWN,
    MOVE_LEFT: Direction.LEFT,
    MOVE_RIGHT: Direction.RIGHT,
}


def ctrl(char: str) -> int:
    """Key code produced by Ctrl+<char> in raw mode"""
    return ord(char.lower()) & 0x1F


# curses key code -> action
KEY_BINDINGS = {
    ord(' '): PRIMARY,
    ord('i'): INSPECT, ord('I'): INSPECT,
    ord('h'): MOVE_LEFT, curses.KEY_LEFT: MOVE_LEFT,
    ord('j'): MOVE_DOWN, curses.KEY_DOWN: MOVE_DOWN,
    ord('k'): MOVE_UP, curses.KEY_UP: MOVE_UP,
    ord('l'): MOVE_RIGHT, curses.KEY_RIGHT: MOVE_RIGHT,
    ord('\n'): ENTER, ord('\r'): ENTER, curses.KEY_ENTER: ENTER,
    27: ESCAPE,  # Esc
    ctrl('c'): ESCAPE,
    ord('d'): DELETE,
    ord('?'): HELP,
    ord('q'): QUIT,
    ctrl('q'): QUIT,
    ctrl('w'): RELOAD,
}


def resolve_history_path(env=None) -> Path:
    """Resolve where solve history is persisted"""
    if env is None:
        env = os.environ

    override = env.get(HISTORY_ENV_VAR)
    if override:
        return Path(override).expanduser()

    data_home = env.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / APP_DIR_NAME / HISTORY_FILENAME

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigError(f"cannot resolve history location: {exc}") from exc

    return home / ".local" / "share" / APP_DIR_NAME / HISTORY_FILENAME
