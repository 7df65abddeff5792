"""curses-backed drawing surface and event source."""

from __future__ import annotations

import curses
import logging
from typing import Any, Callable

from blockdash.colors import RGB, Style, rgb_to_ansi256, rgb_to_basic
from blockdash.events import Event, translate
from blockdash.layout import Rect

log = logging.getLogger(__name__)

ESCAPE_DELAY_MS = 25


def _safe(win: curses.window, *args: Any) -> None:
    """addstr wrapper that swallows out-of-bounds errors."""
    try:
        win.addstr(*args)
    except curses.error:
        pass


class Palette:
    """Maps RGB styles to curses attributes, allocating colour pairs lazily."""

    def __init__(
        self,
        colors: int,
        pairs: int,
        *,
        init_pair: Callable[[int, int, int], None] = curses.init_pair,
        color_pair: Callable[[int], int] = curses.color_pair,
    ) -> None:
        self.colors = colors
        self.max_pairs = pairs
        self._init_pair = init_pair
        self._color_pair = color_pair
        self._pairs: dict[tuple[int, int], int] = {}
        self._exhausted = False

    @classmethod
    def from_curses(cls) -> Palette:
        if not curses.has_colors():
            log.info("terminal has no colour support, drawing monochrome")
            return cls(0, 0)
        curses.start_color()
        curses.use_default_colors()
        log.debug("colours=%d pairs=%d", curses.COLORS, curses.COLOR_PAIRS)
        return cls(curses.COLORS, curses.COLOR_PAIRS)

    def index(self, rgb: RGB) -> int:
        if self.colors >= 256:
            return rgb_to_ansi256(rgb)
        return rgb_to_basic(rgb)

    def attr(self, style: Style) -> int:
        if self.colors == 0:
            return 0
        key = (self.index(style.fg), self.index(style.bg))
        pair = self._pairs.get(key)
        if pair is None:
            # Pair 0 is reserved by curses for the default colours
            pair = len(self._pairs) + 1
            if pair >= self.max_pairs:
                if not self._exhausted:
                    log.warning(
                        "out of colour pairs (%d), reusing defaults", self.max_pairs
                    )
                    self._exhausted = True
                return self._color_pair(0)
            self._init_pair(pair, *key)
            self._pairs[key] = pair
        return self._color_pair(pair)


class Frame:
    """Drawing context handed to the render callback for one frame."""

    def __init__(self, win: curses.window, palette: Palette) -> None:
        self.win = win
        self.palette = palette
        max_y, max_x = win.getmaxyx()
        self.area = Rect(0, 0, max_x, max_y)

    def fill(self, rect: Rect, style: Style, char: str = " ") -> None:
        left = max(rect.left, self.area.left)
        right = min(rect.right, self.area.right)
        top = max(rect.top, self.area.top)
        bottom = min(rect.bottom, self.area.bottom)
        if right <= left or bottom <= top:
            return
        attr = self.palette.attr(style)
        line = char * (right - left)
        for y in range(top, bottom):
            _safe(self.win, y, left, line, attr)

    def put(self, x: int, y: int, text: str, style: Style) -> None:
        if not self.area.top <= y < self.area.bottom or x >= self.area.right:
            return
        if x < self.area.left:
            text = text[self.area.left - x :]
            x = self.area.left
        text = text[: self.area.right - x]
        if text:
            _safe(self.win, y, x, text, self.palette.attr(style))


class Terminal:
    """Full-screen surface: ``draw(callback)`` renders, ``read_event()`` blocks."""

    def __init__(self, stdscr: curses.window, *, mouse_capture: bool = False) -> None:
        self.stdscr = stdscr
        curses.curs_set(0)
        # Raw mode so Ctrl+C reaches us as a key instead of SIGINT
        curses.raw()
        curses.set_escdelay(ESCAPE_DELAY_MS)
        stdscr.keypad(True)
        stdscr.nodelay(False)
        if mouse_capture:
            curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        self.palette = Palette.from_curses()

    def size(self) -> tuple[int, int]:
        max_y, max_x = self.stdscr.getmaxyx()
        return max_x, max_y

    def draw(self, callback: Callable[[Frame], None]) -> None:
        self.stdscr.erase()
        callback(Frame(self.stdscr, self.palette))
        self.stdscr.noutrefresh()
        curses.doupdate()

    def read_event(self) -> Event:
        key = self.stdscr.get_wch()
        return translate(
            key, self.size(), read_next=self._read_pending, get_mouse=self._get_mouse
        )

    def _read_pending(self) -> str | None:
        self.stdscr.nodelay(True)
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            return None
        finally:
            self.stdscr.nodelay(False)
        if isinstance(key, int):
            curses.ungetch(key)
            return None
        if key == "\x1b":
            # A second ESC starts its own key, not an Alt sequence
            curses.unget_wch(key)
            return None
        return key

    @staticmethod
    def _get_mouse() -> tuple[int, int, int, int, int]:
        try:
            return curses.getmouse()
        except curses.error:
            return (0, 0, 0, 0, 0)
