"""Shared fixtures: a terminal stand-in that records what the game draws."""

import pytest

from term_snake.terminal import CTRL, KeyEvent, TerminalError


def key(code, ctrl=False):
    return KeyEvent(code, frozenset({CTRL}) if ctrl else frozenset())


CTRL_C = key("c", ctrl=True)
ESC = key("esc")


class FakeTerminal:
    """
    Records writes and only makes them visible on flush(), like curses.

    blocking_keys feed read_key_blocking(); polls is a list of per-tick
    batches returned by poll_keys(), after which polls return nothing.
    """

    def __init__(self, width=20, height=10, blocking_keys=None, polls=None,
                 fail_on_setup=False):
        self.width = width
        self.height = height
        self.blocking_keys = list(blocking_keys or [])
        self.polls = list(polls or [])
        self.fail_on_setup = fail_on_setup
        self.queued = {}
        self.visible = {}
        self.writes = []
        self.flushes = 0
        self.clears = 0
        self.setups = 0
        self.restores = 0

    def setup(self):
        self.setups += 1
        if self.fail_on_setup:
            raise TerminalError("Error setting up the terminal: no tty")

    def restore(self):
        self.restores += 1

    def size(self):
        return self.width, self.height

    def write(self, pos, ch):
        x, y = pos
        assert 0 <= x < self.width and 0 <= y < self.height, pos
        self.writes.append((pos, ch))
        self.queued[pos] = ch

    def clear(self):
        self.clears += 1
        self.queued.clear()
        self.visible.clear()

    def flush(self):
        self.flushes += 1
        self.visible.update(self.queued)
        self.queued.clear()

    def visible_at(self, pos):
        return self.visible.get(pos, " ")

    def visible_row(self, y):
        return "".join(self.visible_at((x, y)) for x in range(self.width))

    def read_key_blocking(self):
        if not self.blocking_keys:
            raise AssertionError("unexpected blocking read")
        return self.blocking_keys.pop(0)

    def poll_keys(self):
        return self.polls.pop(0) if self.polls else []


@pytest.fixture
def term():
    return FakeTerminal()
