"""
Terminal rendering for Console Snake.

The renderer only needs three primitives from the terminal: move the cursor,
write text, set the foreground color. RenderSurface defines them, CursesSurface
implements them on a curses window, and BoardRenderer builds the game screens
on top.

The border is drawn once per session. Each frame redraws food, snake and the
status line; the vacated tail cell is blanked by clear_cell() so the screen
never needs a full clear while a game is running.
"""

import curses
import logging
from typing import Dict, List, Tuple

from domain.game_state import GameSession, ProcessState
from domain.grid import Bounds


logger = logging.getLogger(__name__)


class ColorScheme:
    """Foreground colors used on the board"""

    BORDER = "border"
    FOOD = "food"
    SNAKE = "snake"
    TEXT = "text"
    TITLE = "title"
    ALERT = "alert"


BORDER_CHAR = "#"
FOOD_CHAR = "*"
HEAD_CHAR = "O"
BODY_CHAR = "o"


class RenderSurface:
    """
    Base class/interface for a character-cell output device.
    """

    def move_cursor(self, x: int, y: int) -> None:
        raise NotImplementedError

    def write(self, text: str) -> None:
        raise NotImplementedError

    def set_color(self, color: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        """Blank the whole surface. Only used between sessions."""
        raise NotImplementedError

    def refresh(self) -> None:
        """Flush pending output. No-op for unbuffered surfaces."""


class CursesSurface(RenderSurface):
    """RenderSurface on a curses window."""

    CURSES_COLORS: Dict[str, int] = {
        ColorScheme.BORDER: curses.COLOR_BLUE,
        ColorScheme.FOOD: curses.COLOR_RED,
        ColorScheme.SNAKE: curses.COLOR_GREEN,
        ColorScheme.TEXT: curses.COLOR_WHITE,
        ColorScheme.TITLE: curses.COLOR_YELLOW,
        ColorScheme.ALERT: curses.COLOR_RED,
    }

    def __init__(self, window):
        self.window = window
        self.attrs: Dict[str, int] = {}
        self.current_attr = 0

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

        if curses.has_colors():
            curses.start_color()
            for pair_id, (name, fg) in enumerate(self.CURSES_COLORS.items(), start=1):
                curses.init_pair(pair_id, fg, curses.COLOR_BLACK)
                attr = curses.color_pair(pair_id)
                if name in (ColorScheme.TITLE, ColorScheme.ALERT):
                    attr |= curses.A_BOLD
                self.attrs[name] = attr

    def fits(self, width: int, height: int) -> bool:
        rows, cols = self.window.getmaxyx()
        return cols >= width and rows >= height

    def move_cursor(self, x: int, y: int) -> None:
        self.window.move(y, x)

    def write(self, text: str) -> None:
        try:
            self.window.addstr(text, self.current_attr)
        except curses.error:
            # addstr reports an error after writing the bottom-right cell
            pass

    def set_color(self, color: str) -> None:
        self.current_attr = self.attrs.get(color, 0)

    def clear(self) -> None:
        self.window.erase()

    def refresh(self) -> None:
        self.window.refresh()


class BoardRenderer:
    """
    Draws a GameSession and the screens around it onto a RenderSurface.
    """

    def __init__(self, surface: RenderSurface, bounds: Bounds):
        self.surface = surface
        self.bounds = bounds

    @property
    def status_row(self) -> int:
        return self.bounds.height + 1

    @property
    def banner_row(self) -> int:
        return self.bounds.height + 2

    @property
    def required_size(self) -> Tuple[int, int]:
        """(columns, rows) the game screen needs."""
        return (max(self.bounds.width, 40), self.banner_row + 1)

    def _put(self, x: int, y: int, text: str, color: str = ColorScheme.TEXT) -> None:
        self.surface.move_cursor(x, y)
        self.surface.set_color(color)
        self.surface.write(text)

    def draw_border(self) -> None:
        """Clear the screen and draw the walls. Called once per session."""
        self.surface.clear()
        width, height = self.bounds.width, self.bounds.height
        self.surface.set_color(ColorScheme.BORDER)
        for x in range(width):
            for y in (0, height - 1):
                self.surface.move_cursor(x, y)
                self.surface.write(BORDER_CHAR)
        for y in range(1, height - 1):
            for x in (0, width - 1):
                self.surface.move_cursor(x, y)
                self.surface.write(BORDER_CHAR)
        self.surface.set_color(ColorScheme.TEXT)
        self.surface.refresh()

    def draw(self, session: GameSession) -> None:
        """Draw food, snake and the score line for the current tick."""
        fx, fy = session.food
        self._put(fx, fy, FOOD_CHAR, ColorScheme.FOOD)

        for idx, (x, y) in enumerate(session.snake.positions):
            self._put(x, y, HEAD_CHAR if idx == 0 else BODY_CHAR, ColorScheme.SNAKE)

        status = (
            f"Score: {session.score}  |  "
            f"High Score: {session.process_state.high_score}"
        )
        self._put(0, self.status_row, status, ColorScheme.TEXT)
        self.surface.refresh()

    def clear_cell(self, position: Tuple[int, int]) -> None:
        x, y = position
        self._put(x, y, " ")

    def show_banner(self, text: str) -> None:
        self._put(0, self.banner_row, text, ColorScheme.TITLE)
        self.surface.refresh()

    def clear_banner(self, length: int) -> None:
        self._put(0, self.banner_row, " " * length)
        self.surface.refresh()

    def draw_game_over(self, session: GameSession, process_state: ProcessState) -> None:
        """Final screen offering restart or return."""
        lines: List[Tuple[str, str]] = [
            ("GAME OVER!", ColorScheme.ALERT),
            ("==========", ColorScheme.ALERT),
            ("", ColorScheme.TEXT),
            (f"Final Score: {session.score}", ColorScheme.TEXT),
            (f"High Score:  {process_state.high_score}", ColorScheme.TEXT),
            ("", ColorScheme.TEXT),
            ("Press 'R' to Restart or 'Q' to Quit", ColorScheme.TEXT),
        ]
        self.surface.clear()
        for row, (text, color) in enumerate(lines, start=1):
            if text:
                self._put(2, row, text, color)
        self.surface.refresh()
