"""
UI components - panels, timer display, statistics and tool views
"""

import curses
from typing import Optional

from .navigation import TOOLS, Block, Screen, Tool
from .timer import TimerState

LEFT_WIDTH = 40

HELP_TEXT = """\
cube-tui - speedcube timer

Timer
  Space         Start / stop the timer (next press resets)
  i             15 s inspection, Space starts early

Navigation
  h j k l       Move between panels (arrow keys work too)
  Enter         Select the focused panel / confirm in a list
  Esc, Ctrl-C   Leave the panel, or close this help
  ?             Toggle this help

Times
  j / k         Move the cursor while the table is selected
  d             Delete the solve under the cursor

Session
  Ctrl-W        Save and reload history
  q, Ctrl-Q     Save and quit
"""

WELCOME_TEXT = """\
Welcome to cube-tui!

Press Space to start the timer and again to stop it.
A fresh scramble is generated after every solve.

Select the Tools panel (Enter) to switch this view
to the chart or the cube net. Press ? for help.
"""

# Solved cube net; letters are stickers
CUBE_NET = [
    "       WWWWWW",
    "       WWWWWW",
    "       WWWWWW",
    "OOOOOO GGGGGG RRRRRR BBBBBB",
    "OOOOOO GGGGGG RRRRRR BBBBBB",
    "OOOOOO GGGGGG RRRRRR BBBBBB",
    "       YYYYYY",
    "       YYYYYY",
    "       YYYYYY",
]

STICKER_PAIRS = {"B": 1, "W": 2, "O": 3, "G": 4, "R": 5, "Y": 6}

SPARK_CHARS = "▁▂▃▄▅▆▇█"


# Panel text pairs: (pair, foreground)
TEXT_PAIRS = [
    (7, curses.COLOR_GREEN),    # solving, ao5 series
    (8, curses.COLOR_RED),      # notices
    (9, curses.COLOR_WHITE),    # ready
    (10, curses.COLOR_CYAN),    # focused border, singles series
    (11, curses.COLOR_YELLOW),  # selected border, inspection
    (12, curses.COLOR_MAGENTA),  # ao12 series
]

ORANGE_256 = 208


def init_colors():
    """Register sticker backgrounds for the cube net and text colours for the panels"""
    sticker_backgrounds = {
        "B": curses.COLOR_BLUE,
        "W": curses.COLOR_WHITE,
        "G": curses.COLOR_GREEN,
        "R": curses.COLOR_RED,
        "Y": curses.COLOR_YELLOW,
        # Without a 256-colour palette orange falls back to yellow
        "O": ORANGE_256 if curses.COLORS >= 256 else curses.COLOR_YELLOW,
    }
    for sticker, pair in STICKER_PAIRS.items():
        fg = curses.COLOR_WHITE if sticker == "B" else curses.COLOR_BLACK
        curses.init_pair(pair, fg, sticker_backgrounds[sticker])

    for pair, fg in TEXT_PAIRS:
        curses.init_pair(pair, fg, curses.COLOR_BLACK)


def format_stat(value: Optional[float]) -> str:
    if value is None:
        return "n/a"
    return f"{value:.2f}"


def generate_sparkline(times: list, width: int = 20) -> str:
    """Generate ASCII sparkline from times (lower is better, so lower bar)"""
    if not times:
        return ""

    times = times[-width:]
    min_t = min(times)
    max_t = max(times)

    if max_t == min_t:
        return SPARK_CHARS[0] * len(times)

    sparkline = ""
    for t in times:
        normalized = (t - min_t) / (max_t - min_t)
        index = int(normalized * (len(SPARK_CHARS) - 1))
        sparkline += SPARK_CHARS[index]

    return sparkline


def put(stdscr, row: int, col: int, text: str, attr: int = 0):
    """addstr that ignores writes past the screen edge"""
    try:
        stdscr.addstr(row, col, text, attr)
    except curses.error:
        pass


def draw_box(stdscr, top: int, left: int, height: int, width: int, title: str, attr: int = 0):
    """Draw a bordered panel with its title on the top edge"""
    if height < 2 or width < 2:
        return
    put(stdscr, top, left, "+" + "-" * (width - 2) + "+", attr)
    for i in range(1, height - 1):
        put(stdscr, top + i, left, "|", attr)
        put(stdscr, top + i, left + width - 1, "|", attr)
    put(stdscr, top + height - 1, left, "+" + "-" * (width - 2) + "+", attr)
    put(stdscr, top, left + 2, f" {title} "[:max(width - 4, 0)], attr | curses.A_BOLD)


def border_attr(session, block: Block) -> int:
    router = session.router
    if router.is_selected(block):
        return curses.color_pair(11) | curses.A_BOLD
    if router.is_active(block):
        return curses.color_pair(10) | curses.A_BOLD
    return curses.A_DIM


def centered(text: str, left: int, width: int) -> int:
    return left + max((width - len(text)) // 2, 1)


def draw_help_and_tools(stdscr, session, top: int, height: int):
    half = LEFT_WIDTH // 2
    draw_box(stdscr, top, 0, height, half, "Help", border_attr(session, Block.HELP))
    hint = "Press ? for help"
    put(stdscr, top + height // 2, centered(hint, 0, half), hint)

    draw_box(stdscr, top, half, height, half, "Tools", border_attr(session, Block.TOOLS))
    router = session.router
    for i, tool in enumerate(TOOLS):
        label = tool.value
        attr = 0
        if tool is router.active_tool:
            label += " *"
        if router.is_selected(Block.TOOLS) and i == router.tools_cursor:
            attr = curses.A_REVERSE
        put(stdscr, top + 1 + i, half + 2, label, attr)


def draw_timer(stdscr, session, top: int, height: int):
    timer = session.timer
    draw_box(stdscr, top, 0, height, LEFT_WIDTH, "Timer", border_attr(session, Block.TIMER))

    if timer.state is TimerState.RUNNING:
        label = "SOLVING"
        color = curses.color_pair(7) | curses.A_BOLD
    elif timer.state is TimerState.ARMED:
        label = "INSPECTION"
        color = curses.color_pair(11) | curses.A_BOLD
    elif timer.last_result is not None:
        if session.last_solve_was_pb:
            label = "NEW PB!"
            color = curses.color_pair(7) | curses.A_BOLD | curses.A_BLINK
        else:
            label = "SOLVED!"
            color = curses.color_pair(10) | curses.A_BOLD
    else:
        label = "READY"
        color = curses.color_pair(9) | curses.A_BOLD

    text = timer.text()
    mid = top + height // 2
    put(stdscr, mid - 1, centered(label, 0, LEFT_WIDTH), label, color)
    put(stdscr, mid + 1, centered(text, 0, LEFT_WIDTH), text, color)


def draw_times(stdscr, session, top: int, height: int):
    draw_box(stdscr, top, 0, height, LEFT_WIDTH, "Times", border_attr(session, Block.TIMES))
    header = f"{'i':>5} {'time':>9} {'ao5':>9} {'ao12':>9}"
    put(stdscr, top + 1, 2, header, curses.A_BOLD)

    records = session.solves.records
    visible = max(height - 4, 0)
    cursor = session.router.times_cursor
    selected = session.router.is_selected(Block.TIMES)

    # Scroll so the cursor stays on screen
    first = max(cursor - visible + 1, 0) if visible else 0
    count = len(records)
    for row in range(first, min(first + visible, count)):
        record = records[count - 1 - row]
        line = (f"{count - row:>5} {record.elapsed_seconds:>9.2f} "
                f"{format_stat(record.average_of_5):>9} {format_stat(record.average_of_12):>9}")
        attr = curses.A_REVERSE if selected and row == cursor else 0
        put(stdscr, top + 3 + row - first, 2, line, attr)


def draw_scramble(stdscr, session, top: int, left: int, height: int, width: int):
    draw_box(stdscr, top, left, height, width, "Scramble", border_attr(session, Block.SCRAMBLE))
    text = session.scramble
    inner = max(width - 4, 1)
    lines = [text[i:i + inner] for i in range(0, len(text), inner)] or [""]
    for i, line in enumerate(lines[:max(height - 2, 0)]):
        put(stdscr, top + 1 + i + (1 if len(lines) == 1 else 0), centered(line, left, width), line,
            curses.A_BOLD)


def draw_stats(stdscr, session, top: int, left: int, height: int, width: int):
    agg = session.solves.aggregates
    stats = [
        ("PB Single", agg.pb_single),
        ("PB ao5", agg.pb_ao5),
        ("PB ao12", agg.pb_ao12),
        ("ao100", agg.ao100),
        ("ao1k", agg.ao1k),
        ("avg", agg.rolling_average),
    ]
    attr = border_attr(session, Block.STATS)
    cell = max(width // len(stats), 2)
    for i, (title, value) in enumerate(stats):
        col = left + i * cell
        draw_box(stdscr, top, col, height, cell, title, attr)
        text = format_stat(value)
        put(stdscr, top + 1, centered(text, col, cell), text)


def draw_welcome(stdscr, top: int, left: int):
    for i, line in enumerate(WELCOME_TEXT.splitlines()):
        put(stdscr, top + 2 + i, left + 2, line)


def draw_chart(stdscr, session, top: int, left: int, height: int, width: int):
    records = session.solves.records
    if not records:
        put(stdscr, top + 2, left + 2, "No solves yet!", curses.A_DIM)
        return

    span = max(width - 12, 1)
    series = [
        ("single", [r.elapsed_seconds for r in records], 10),
        ("ao5", [r.average_of_5 for r in records if r.average_of_5 is not None], 7),
        ("ao12", [r.average_of_12 for r in records if r.average_of_12 is not None], 12),
    ]
    row = top + 2
    for name, values, pair in series:
        put(stdscr, row, left + 2, f"{name:<7}", curses.A_DIM)
        if values:
            put(stdscr, row, left + 10, generate_sparkline(values, width=span), curses.color_pair(pair))
        else:
            put(stdscr, row, left + 10, "(not enough solves)", curses.A_DIM)
        row += 2

    agg = session.solves.aggregates
    summary = (f"best {format_stat(agg.pb_single)}   mean {format_stat(agg.rolling_average)}"
               f"   worst {format_stat(agg.worst)}   n={agg.count}")
    put(stdscr, row, left + 2, summary)


def draw_cube(stdscr, top: int, left: int):
    for row_idx, line in enumerate(CUBE_NET):
        for col_idx, char in enumerate(line):
            pair = STICKER_PAIRS.get(char)
            if pair is not None:
                put(stdscr, top + 2 + row_idx, left + 4 + col_idx, " ", curses.color_pair(pair))


def draw_main(stdscr, session, top: int, left: int, height: int, width: int):
    tool = session.router.active_tool
    draw_box(stdscr, top, left, height, width, tool.value, border_attr(session, Block.MAIN))
    if tool is Tool.CHART:
        draw_chart(stdscr, session, top, left, height, width)
    elif tool is Tool.CUBE:
        draw_cube(stdscr, top, left)
    else:
        draw_welcome(stdscr, top, left)


def draw_notice(stdscr, session, row: int):
    if session.notice:
        put(stdscr, row, 1, session.notice, curses.color_pair(8))


def draw_help_screen(stdscr):
    h, w = stdscr.getmaxyx()
    draw_box(stdscr, 0, 0, h - 1, w, "Help", curses.A_BOLD)
    for i, line in enumerate(HELP_TEXT.splitlines()):
        put(stdscr, 2 + i, 3, line)


def draw_default(stdscr, session):
    h, w = stdscr.getmaxyx()
    body = h - 1  # last row is the notice line

    tools_h, timer_h = 5, 7
    draw_help_and_tools(stdscr, session, 0, tools_h)
    draw_timer(stdscr, session, tools_h, timer_h)
    draw_times(stdscr, session, tools_h + timer_h, body - tools_h - timer_h)

    right = LEFT_WIDTH
    right_w = w - LEFT_WIDTH
    scramble_h, stats_h = 5, 3
    draw_scramble(stdscr, session, 0, right, scramble_h, right_w)
    draw_stats(stdscr, session, scramble_h, right, stats_h, right_w)
    draw_main(stdscr, session, scramble_h + stats_h, right, body - scramble_h - stats_h, right_w)

    draw_notice(stdscr, session, h - 1)


def render(stdscr, session):
    """Redraw the entire screen"""
    stdscr.erase()
    if session.router.route.screen is Screen.HELP:
        draw_help_screen(stdscr)
    else:
        draw_default(stdscr, session)
    stdscr.refresh()
