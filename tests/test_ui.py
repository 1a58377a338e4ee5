"""Smoke tests for the curses projection.

Rendering goes to a recording fake screen, so no terminal is needed.
"""

import curses

import pytest

from cube_tui import ui
from cube_tui.clock import FakeClock
from cube_tui.navigation import Tool
from cube_tui.scramble import Scrambler
from cube_tui.session import Session


class FakeScreen:
    def __init__(self, height: int = 30, width: int = 110):
        self.height = height
        self.width = width
        self.writes = []

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, row, col, text, attr=0):
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise curses.error("out of bounds")
        self.writes.append((row, col, text))

    def erase(self):
        self.writes = []

    def refresh(self):
        pass

    def text(self) -> str:
        return "\n".join(w[2] for w in self.writes)


@pytest.fixture(autouse=True)
def no_color_pairs(monkeypatch):
    # color_pair needs an initialised terminal
    monkeypatch.setattr(curses, "color_pair", lambda n: 0)


@pytest.fixture
def session(tmp_path) -> Session:
    clock = FakeClock()
    session = Session(tmp_path / "times.json", clock=clock, scrambler=Scrambler(seed=5))
    for t in (10.0, 12.0, 11.0, 9.0, 13.0, 8.5):
        session.solves.insert(t)
    return session


def test_format_stat() -> None:
    assert ui.format_stat(None) == "n/a"
    assert ui.format_stat(3.0) == "3.00"


def test_sparkline() -> None:
    assert ui.generate_sparkline([]) == ""
    assert ui.generate_sparkline([5.0, 5.0]) == "▁▁"
    line = ui.generate_sparkline([1.0, 2.0, 3.0], width=2)
    assert line == "▁█"


def test_render_default_screen(session) -> None:
    screen = FakeScreen()
    ui.render(screen, session)
    text = screen.text()
    assert " Timer " in text
    assert " Scramble " in text
    assert session.scramble in text
    assert "8.50" in text
    assert "n/a" in text  # ao100


def test_render_tools(session) -> None:
    screen = FakeScreen()
    for tool in Tool:
        session.router.active_tool = tool
        ui.render(screen, session)
        assert f" {tool.value} " in screen.text()


def test_render_help_screen(session) -> None:
    session.router.help()
    screen = FakeScreen()
    ui.render(screen, session)
    assert "Delete the solve under the cursor" in screen.text()


def test_render_small_terminal(session) -> None:
    ui.render(FakeScreen(height=8, width=30), session)


@pytest.mark.parametrize("colors, orange", [(256, 208), (8, curses.COLOR_YELLOW)])
def test_init_colors_registers_stickers_and_text(monkeypatch, colors, orange) -> None:
    pairs = {}
    monkeypatch.setattr(curses, "COLORS", colors, raising=False)
    monkeypatch.setattr(curses, "init_pair", lambda pair, fg, bg: pairs.__setitem__(pair, (fg, bg)))
    ui.init_colors()

    assert pairs[ui.STICKER_PAIRS["O"]] == (curses.COLOR_BLACK, orange)
    assert pairs[ui.STICKER_PAIRS["B"]] == (curses.COLOR_WHITE, curses.COLOR_BLUE)
    for pair, fg in ui.TEXT_PAIRS:
        assert pairs[pair] == (fg, curses.COLOR_BLACK)
    assert len(pairs) == len(ui.STICKER_PAIRS) + len(ui.TEXT_PAIRS)
