"""
Panel focus and selection state for the TUI.

The router is the single source of truth for what a context-sensitive key
means: movement keys either move focus between panels or move a list
cursor inside the selected panel, and enter/escape step between the two
levels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Screen(Enum):
    DEFAULT = "default"
    HELP = "help"


class Block(Enum):
    HELP = "Help"
    TOOLS = "Tools"
    TIMER = "Timer"
    TIMES = "Times"
    SCRAMBLE = "Scramble"
    STATS = "Stats"
    MAIN = "Main"


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Tool(Enum):
    WELCOME = "Welcome"
    CHART = "Chart"
    CUBE = "Cube"


TOOLS = list(Tool)

# Screen grid:
#   Help | Tools | Scramble
#   Timer        | Stats
#   Times        | Main
NEIGHBOURS: Dict[Block, Dict[Direction, Block]] = {
    Block.HELP: {Direction.RIGHT: Block.TOOLS, Direction.DOWN: Block.TIMER},
    Block.TOOLS: {Direction.LEFT: Block.HELP, Direction.RIGHT: Block.SCRAMBLE,
                  Direction.DOWN: Block.TIMER},
    Block.TIMER: {Direction.UP: Block.HELP, Direction.DOWN: Block.TIMES,
                  Direction.RIGHT: Block.STATS},
    Block.TIMES: {Direction.UP: Block.TIMER, Direction.RIGHT: Block.MAIN},
    Block.SCRAMBLE: {Direction.LEFT: Block.TOOLS, Direction.DOWN: Block.STATS},
    Block.STATS: {Direction.UP: Block.SCRAMBLE, Direction.LEFT: Block.TIMER,
                  Direction.DOWN: Block.MAIN},
    Block.MAIN: {Direction.UP: Block.STATS, Direction.LEFT: Block.TIMES},
}


@dataclass
class RouteState:
    screen: Screen = Screen.DEFAULT
    active_block: Block = Block.TIMER
    selected_block: Optional[Block] = None


class Router:
    """Focus/selection state machine over the panel grid"""

    def __init__(self):
        self.route = RouteState()
        self.active_tool = Tool.WELCOME
        self.tools_cursor = 0
        # Row in the times table, newest solve first
        self.times_cursor = 0

    def move(self, direction: Direction, times_count: int = 0):
        """Move focus, or the list cursor of the selected panel"""
        if self.route.screen is Screen.HELP:
            return

        selected = self.route.selected_block
        if selected is None:
            neighbour = NEIGHBOURS[self.route.active_block].get(direction)
            if neighbour is not None:
                self.route.active_block = neighbour
            return

        if direction not in (Direction.UP, Direction.DOWN):
            return
        step = -1 if direction is Direction.UP else 1

        if selected is Block.TOOLS:
            self.tools_cursor = _clamp(self.tools_cursor + step, len(TOOLS))
        elif selected is Block.TIMES:
            self.times_cursor = _clamp(self.times_cursor + step, times_count)

    def enter(self):
        """Select the focused panel, or confirm inside the selected one"""
        if self.route.screen is Screen.HELP:
            return

        selected = self.route.selected_block
        if selected is None:
            self.route.selected_block = self.route.active_block
        elif selected is Block.TOOLS:
            self.active_tool = TOOLS[self.tools_cursor]

    def escape(self):
        """Leave the help screen, else drop the current selection"""
        if self.route.screen is Screen.HELP:
            self.route.screen = Screen.DEFAULT
            return
        self.route.selected_block = None

    def help(self):
        """Toggle the help screen"""
        if self.route.screen is Screen.HELP:
            self.route.screen = Screen.DEFAULT
        else:
            self.route.screen = Screen.HELP

    def delete(self) -> Optional[int]:
        """Display row to delete, if the times table is selected"""
        if self.route.screen is Screen.HELP:
            return None
        if self.route.selected_block is not Block.TIMES:
            return None
        return self.times_cursor

    def clamp_times(self, times_count: int):
        self.times_cursor = _clamp(self.times_cursor, times_count)

    def is_active(self, block: Block) -> bool:
        return self.route.active_block is block

    def is_selected(self, block: Block) -> bool:
        return self.route.selected_block is block


def _clamp(index: int, count: int) -> int:
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))
