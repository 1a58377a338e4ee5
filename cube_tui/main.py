"""
Terminal speedcube timer
Main entry point and control loop
"""

import argparse
import curses
import logging
import sys
import time
from pathlib import Path

from . import ui
from .config import LOG_FILENAME, ConfigError, resolve_history_path
from .logging_config import setup_logging
from .session import Session

logger = logging.getLogger(__name__)


def run(stdscr, session: Session):
    """Main loop: wait for a key or the next tick, then redraw"""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.start_color()
    ui.init_colors()
    curses.raw()  # Ctrl-C / Ctrl-Q / Ctrl-W arrive as keys
    curses.set_escdelay(25)
    stdscr.keypad(True)

    last_tick = time.monotonic()
    while True:
        ui.render(stdscr, session)

        timeout = max(session.tick_rate - (time.monotonic() - last_tick), 0.0)
        stdscr.timeout(int(timeout * 1000))
        key = stdscr.getch()
        if key != -1 and session.handle_key(key):
            return

        if time.monotonic() - last_tick >= session.tick_rate:
            session.on_tick()
            last_tick = time.monotonic()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="cube-tui",
        description="Terminal speedcube timer with scrambles and statistics",
    )
    parser.add_argument("--history", help="Solve history file (default: ~/.local/share/cube-tui/times.json)")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        history_path = Path(args.history).expanduser() if args.history else resolve_history_path()
        try:
            history_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"cannot create {history_path.parent}: {exc}") from exc
    except ConfigError as exc:
        print(f"cube-tui: {exc}", file=sys.stderr)
        return 1

    setup_logging(logging.DEBUG if args.debug else logging.INFO,
                  log_file=str(history_path.parent / LOG_FILENAME))
    logger.info("Using history file %s", history_path)

    session = Session(history_path)
    session.load()
    curses.wrapper(run, session)

    if session.write_failed:
        print(f"cube-tui: {session.notice}", file=sys.stderr)
        return 1
    return 0
