"""
renderer.py — Terminal rendering for Terminal Snake.

ScreenBuffer keeps a mirror of everything the game has drawn, so only
changed cells are ever repainted, and a centered overlay message can be
dismissed by copying the mirrored cells back over it.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from term_snake.constants import (
    BLANK_CHAR, BORDER_CORNER, BORDER_HORIZ, BORDER_VERT,
)
from term_snake.entities import Coords

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message:
    """Geometry of the overlay box currently on screen."""
    top_left: Coords
    width: int
    height: int


class ScreenBuffer:
    """
    Mirror of the visible terminal content, overlay excluded.

    *term* is the terminal driver (see terminal.CursesTerminal); it must
    provide size(), write(pos, ch), clear() and flush().  Both write paths
    only queue output: nothing is guaranteed visible before flush().
    """

    def __init__(self, term):
        self.term = term
        self.width, self.height = term.size()
        self.cells = self._blank_cells()
        self.message: Optional[Message] = None

    def _blank_cells(self) -> List[List[str]]:
        return [[BLANK_CHAR] * self.width for _ in range(self.height)]

    # ── Game content ──────────────────────────────────────────────────────

    def print_at(self, pos: Coords, ch: str):
        """Draw *ch* at *pos* and remember it in the mirror."""
        x, y = pos
        self.term.write(pos, ch)
        self.cells[y][x] = ch

    def cell_at(self, pos: Coords) -> str:
        x, y = pos
        return self.cells[y][x]

    def draw_borders(self, size: Optional[Coords] = None):
        """
        Frame the rectangle of *size* (default: the whole terminal) that
        starts at the top-left corner.
        """
        width, height = size if size is not None else (self.width, self.height)
        end_x, end_y = width - 1, height - 1

        for x in range(width):
            ch = BORDER_CORNER if x in (0, end_x) else BORDER_HORIZ
            self.print_at((x, 0), ch)
            self.print_at((x, end_y), ch)

        for y in range(1, end_y):
            self.print_at((0, y), BORDER_VERT)
            self.print_at((end_x, y), BORDER_VERT)

        self.flush()

    def clear(self):
        self.term.clear()
        self.cells = self._blank_cells()

    def flush(self):
        self.term.flush()

    # ── Overlay message ───────────────────────────────────────────────────

    def has_message(self) -> bool:
        return self.message is not None

    def show_message(self, lines: List[str]):
        """
        Draw *lines* in a box centered on the terminal.

        The box is one blank cell wider than the longest line on each side
        and has a blank row above and below.  Replaces any message already
        shown.  The mirror is left untouched so hide_message() can restore
        what was underneath.
        """
        if self.has_message():
            self.hide_message()

        msg_width = max((len(line) for line in lines), default=0) + 2
        msg_height = len(lines) + 2
        top_left = (max(self.width // 2 - msg_width // 2, 0),
                    max(self.height // 2 - msg_height // 2, 0))
        left, top = top_left

        # Blank top and bottom rows
        for y in (top, top + msg_height - 1):
            for dx in range(msg_width):
                self._print_at_no_save((left + dx, y), BLANK_CHAR)

        for i, line in enumerate(lines):
            padded = f"{line:^{msg_width}}"
            for dx, ch in enumerate(padded):
                self._print_at_no_save((left + dx, top + i + 1), ch)

        self.message = Message(top_left, msg_width, msg_height)
        logger.debug("Showing message %r at %s", lines[:1], top_left)
        self.flush()

    def hide_message(self):
        """Repaint the area under the current message from the mirror."""
        if not self.has_message():
            return

        msg, self.message = self.message, None
        left, top = msg.top_left

        for dy in range(msg.height):
            for dx in range(msg.width):
                pos = (left + dx, top + dy)
                if self._on_screen(pos):
                    self._print_at_no_save(pos, self.cell_at(pos))

        self.flush()

    def _print_at_no_save(self, pos: Coords, ch: str):
        # Overlay writes go to the terminal only; the mirror keeps the
        # content that the overlay covers.
        if self._on_screen(pos):
            self.term.write(pos, ch)

    def _on_screen(self, pos: Coords) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height
