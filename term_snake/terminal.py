"""
terminal.py — curses-backed terminal driver for Terminal Snake.

Wraps the few curses calls the game needs: entering the alternate screen
in raw mode, queued single-cell writes, clear / flush, and blocking or
polled key reads translated into KeyEvent values.  Every curses failure
surfaces as a TerminalError, which the entry point treats as fatal.
"""

import contextlib
import curses
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from term_snake.constants import POLL_TIMEOUT_MS, QUIT_KEY
from term_snake.entities import Coords

logger = logging.getLogger(__name__)

CTRL = "ctrl"

_SPECIAL_KEYS = {
    curses.KEY_UP:        "up",
    curses.KEY_DOWN:      "down",
    curses.KEY_LEFT:      "left",
    curses.KEY_RIGHT:     "right",
    curses.KEY_ENTER:     "enter",
    curses.KEY_BACKSPACE: "backspace",
    27:  "esc",
    10:  "enter",
    13:  "enter",
    9:   "tab",
    8:   "backspace",
    127: "backspace",
}

# Codes curses reports that are not keypresses.
_NOT_KEYS = {-1, curses.KEY_RESIZE, curses.KEY_MOUSE}


class TerminalError(RuntimeError):
    """The terminal could not be driven; the game cannot continue."""


@dataclass(frozen=True)
class KeyEvent:
    code: str
    modifiers: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def ctrl(self) -> bool:
        return CTRL in self.modifiers


def is_quit(event: KeyEvent) -> bool:
    """Ctrl+C, the quit chord accepted on every screen."""
    return event.ctrl and event.code == QUIT_KEY


def translate_key(code: int) -> Optional[KeyEvent]:
    """
    Map a curses getch() code to a KeyEvent.

    Returns None for codes that are not keypresses (no input, resize,
    mouse).  In raw mode control chords arrive as codes 1-26; the ones
    without a dedicated name become (letter, {"ctrl"}).
    """
    if code in _NOT_KEYS:
        return None
    if code in _SPECIAL_KEYS:
        return KeyEvent(_SPECIAL_KEYS[code])
    if 1 <= code <= 26:
        return KeyEvent(chr(ord("a") + code - 1), frozenset({CTRL}))
    if 32 <= code <= 255:
        return KeyEvent(chr(code))
    return KeyEvent(f"<{code}>")


class CursesTerminal:
    """
    The real terminal.

    write() only queues a cell on the curses virtual screen; nothing is
    visible until flush().
    """

    def __init__(self):
        self._screen = None
        self._width = 0
        self._height = 0

    @property
    def active(self) -> bool:
        return self._screen is not None

    def setup(self):
        """Enter the alternate screen with raw input and a hidden cursor."""
        try:
            self._screen = curses.initscr()
            curses.noecho()
            curses.raw()
            self._screen.keypad(True)
            if hasattr(curses, "set_escdelay"):
                curses.set_escdelay(25)
        except curses.error as exc:
            # initscr() may have taken over the terminal already.
            if self.active:
                self._screen = None
                curses.endwin()
            raise TerminalError(f"Error setting up the terminal: {exc}") from exc

        self._set_cursor_visibility(False)
        self._height, self._width = self._screen.getmaxyx()
        logger.info("Terminal ready: %dx%d", self._width, self._height)

    def restore(self):
        """Leave raw mode and the alternate screen.  Safe to call twice."""
        if not self.active:
            return
        screen, self._screen = self._screen, None
        self._set_cursor_visibility(True)
        try:
            screen.keypad(False)
            curses.noraw()
            curses.echo()
            curses.endwin()
        except curses.error as exc:
            raise TerminalError(f"Error restoring the terminal: {exc}") from exc
        logger.info("Terminal restored")

    def size(self) -> Coords:
        return self._width, self._height

    def write(self, pos: Coords, ch: str):
        x, y = pos
        try:
            # The bottom-right cell cannot be written with addstr: curses
            # fails trying to advance the cursor past the screen.
            if (x, y) == (self._width - 1, self._height - 1):
                self._screen.insstr(y, x, ch)
            else:
                self._screen.addstr(y, x, ch)
        except curses.error as exc:
            raise TerminalError(f"Error writing {ch!r} at {pos}: {exc}") from exc

    def clear(self):
        try:
            self._screen.clear()
            self._screen.refresh()
        except curses.error as exc:
            raise TerminalError(f"Error clearing: {exc}") from exc

    def flush(self):
        try:
            self._screen.refresh()
        except curses.error as exc:
            raise TerminalError(f"Error flushing: {exc}") from exc

    def read_key_blocking(self) -> KeyEvent:
        self._screen.timeout(-1)
        while True:
            event = translate_key(self._screen.getch())
            if event is not None:
                return event

    def poll_keys(self) -> List[KeyEvent]:
        """Every key event currently queued, oldest first.  Never blocks long."""
        self._screen.timeout(POLL_TIMEOUT_MS)
        events = []
        while True:
            code = self._screen.getch()
            if code == -1:
                return events
            event = translate_key(code)
            if event is not None:
                events.append(event)

    def _set_cursor_visibility(self, visible: bool):
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            # Some terminals cannot hide the cursor; the game still works.
            logger.debug("Cursor visibility not supported by this terminal")


@contextlib.contextmanager
def terminal_session(term):
    """Set the terminal up and guarantee it is restored on the way out."""
    term.setup()
    try:
        yield term
    finally:
        term.restore()
