"""curses backend: terminal setup, cell drawing and key polling."""

from __future__ import annotations

import curses
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from .controls import Key, key_for_char
from .errors import TerminalError
from .screen import Glyph, Style


LOGGER = logging.getLogger(__name__)

HEART_PAIR = 1

ARROW_KEYS: Dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
}


def translate_key(code: int) -> Optional[Key]:
    """Map a ``getch`` code to a :class:`Key`, or ``None`` if unbound."""

    if code in ARROW_KEYS:
        return ARROW_KEYS[code]
    if 0 <= code < 256:
        return key_for_char(chr(code))
    return None


class CursesScreen:
    """:class:`~heartbox.screen.Screen` drawing into a curses window.

    ``glyphs`` and ``attrs`` translate the game's symbols and styles into
    curses characters and attribute bits; :func:`open_terminal` builds them
    once curses is initialised.
    """

    def __init__(
        self,
        window,
        glyphs: Dict[Glyph, int],
        attrs: Dict[Style, int],
    ) -> None:
        self.window = window
        self.glyphs = glyphs
        self.attrs = attrs
        self.rows, self.cols = window.getmaxyx()

    def put(self, y: int, x: int, glyph: Glyph, style: Style = Style.PLAIN) -> None:
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            return
        try:
            self.window.addch(y, x, self.glyphs[glyph], self.attrs[style])
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass

    def write_text(self, y: int, x: int, text: str) -> None:
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            return
        try:
            self.window.addstr(y, x, text[: self.cols - x])
        except curses.error:
            pass

    def flush(self) -> None:
        self.window.refresh()

    def poll_keys(self) -> List[Key]:
        """Drain pending input without blocking and return the bound keys."""

        keys: List[Key] = []
        while True:
            code = self.window.getch()
            if code == -1:
                break
            key = translate_key(code)
            if key is not None:
                keys.append(key)
        return keys


def _setup(window) -> CursesScreen:
    curses.cbreak()
    curses.noecho()
    window.keypad(True)
    window.nodelay(True)
    try:
        curses.curs_set(0)
    except curses.error:
        LOGGER.info("Terminal cannot hide the cursor")

    heart_attr = curses.A_NORMAL
    if curses.has_colors():
        curses.start_color()
        curses.init_pair(HEART_PAIR, curses.COLOR_RED, curses.COLOR_BLACK)
        heart_attr = curses.color_pair(HEART_PAIR)

    glyphs = {Glyph.BLANK: ord(" "), Glyph.DIAMOND: curses.ACS_DIAMOND}
    attrs = {
        Style.PLAIN: curses.A_NORMAL,
        Style.HEART: heart_attr,
        Style.BORDER: curses.A_REVERSE,
    }
    return CursesScreen(window, glyphs, attrs)


@contextmanager
def open_terminal() -> Iterator[CursesScreen]:
    """Put the terminal into game mode and restore it on exit.

    Raises:
        TerminalError: If curses cannot initialise the terminal.
    """

    try:
        window = curses.initscr()
    except curses.error as exc:
        raise TerminalError(f"Cannot initialise terminal: {exc}") from exc

    try:
        try:
            screen = _setup(window)
        except curses.error as exc:
            raise TerminalError(f"Cannot configure terminal: {exc}") from exc
        LOGGER.info("Terminal opened (%d rows, %d cols)", screen.rows, screen.cols)
        yield screen
    finally:
        window.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        LOGGER.info("Terminal restored")
