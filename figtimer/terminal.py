import curses
import logging
import sys
from typing import Dict, Optional, Tuple

from .config import Style
from .painter import clip_cells

log = logging.getLogger(__name__)

ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
CUSTOM_COLOR_INDEX = 16

BASIC_RGB: Dict[str, Tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "red": (205, 0, 0),
    "green": (0, 205, 0),
    "yellow": (205, 205, 0),
    "blue": (0, 0, 238),
    "magenta": (205, 0, 205),
    "cyan": (0, 205, 205),
    "white": (229, 229, 229),
}

CURSES_COLORS = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}


class TerminalError(Exception):
    pass


def nearest_basic_color(rgb: Tuple[int, int, int]) -> str:
    def distance(name: str) -> int:
        return sum((a - b) ** 2 for a, b in zip(rgb, BASIC_RGB[name]))

    return min(BASIC_RGB, key=distance)


class CursesTerminal:
    def __init__(self) -> None:
        self._stdscr = None
        self._cursor = (0, 0)
        self._attrs: Dict[Style, int] = {}
        self._next_pair = 1
        self._default_bg = curses.COLOR_BLACK

    @property
    def active(self) -> bool:
        return self._stdscr is not None

    def init(self) -> "CursesTerminal":
        try:
            stdscr = curses.initscr()
        except curses.error as exc:
            raise TerminalError(f"cannot initialise terminal: {exc}") from exc
        self._stdscr = stdscr
        sys.stdout.write(ENTER_ALT_SCREEN)
        sys.stdout.flush()
        try:
            self._configure()
        except curses.error as exc:
            self.cleanup()
            raise TerminalError(f"cannot set up terminal modes: {exc}") from exc
        return self

    def _configure(self) -> None:
        curses.noecho()
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
                self._default_bg = -1
            except curses.error:
                pass

    def cleanup(self) -> None:
        stdscr = self._stdscr
        if stdscr is None:
            return
        self._stdscr = None
        try:
            curses.noraw()
            curses.echo()
            curses.curs_set(1)
        except curses.error:
            pass
        curses.endwin()
        sys.stdout.write(LEAVE_ALT_SCREEN)
        sys.stdout.flush()

    def move_cursor(self, col: int, row: int) -> None:
        self._cursor = (col, row)

    def write_styled(self, text: str, style: Optional[Style] = None) -> None:
        stdscr = self._require()
        col, row = self._cursor
        rows, cols = stdscr.getmaxyx()
        if row >= rows or col >= cols:
            return
        room = cols - col
        if row == rows - 1:
            # curses fails after writing the bottom-right cell
            room -= 1
        text, width = clip_cells(text, room)
        if text:
            try:
                stdscr.addstr(row, col, text, self._attr(style))
            except curses.error as exc:
                raise TerminalError(f"write failed at row {row}: {exc}") from exc
        self._cursor = (col + width, row)

    def flush(self) -> None:
        try:
            self._require().refresh()
        except curses.error as exc:
            raise TerminalError(f"refresh failed: {exc}") from exc

    def _require(self):
        if self._stdscr is None:
            raise TerminalError("terminal is not initialised")
        return self._stdscr

    def _attr(self, style: Optional[Style]) -> int:
        if style is None:
            return curses.A_NORMAL
        attr = self._attrs.get(style)
        if attr is None:
            attr = self._resolve(style)
            self._attrs[style] = attr
        return attr

    def _resolve(self, style: Style) -> int:
        attr = curses.A_BOLD if style.bold else curses.A_NORMAL
        if not curses.has_colors() or (style.color is None and style.rgb is None):
            return attr
        if style.color is not None:
            color = CURSES_COLORS[style.color]
        elif curses.can_change_color() and curses.COLORS > CUSTOM_COLOR_INDEX:
            color = CUSTOM_COLOR_INDEX
            r, g, b = (channel * 1000 // 255 for channel in style.rgb)
            curses.init_color(color, r, g, b)
        else:
            name = nearest_basic_color(style.rgb)
            log.debug("terminal cannot define %s, using %s", style.rgb, name)
            color = CURSES_COLORS[name]
        pair = self._next_pair
        self._next_pair += 1
        curses.init_pair(pair, color, self._default_bg)
        return attr | curses.color_pair(pair)
