"""
game.py — The fixed-tick game loop for Terminal Snake.

SnakeGame owns the ScreenBuffer and drives rounds: every tick it drains
the queued key events, and every few ticks (fewer as the score grows) it
steps the snake, spawns apples and repaints only the cells that changed.
Ctrl+C is checked wherever keys are consumed and always leaves through
clean_exit(), which restores the terminal before the process exits.
"""

import logging
import random
import sys
import time
from typing import NamedTuple, Optional

from term_snake.config import GameConfig
from term_snake.constants import (
    APPLE_CHAR, BLANK_CHAR, DEAD_SNAKE_CHAR, DIRECTION_KEYS, INTRO_LINES,
    PAUSE_KEY, PAUSE_LINES, ROUND_OVER_FOOTER, SNAKE_BODY_CHAR, Direction,
)
from term_snake.engine import (
    arena_cells, center, free_cells, score, snake_fits, ticks_until_step,
)
from term_snake.entities import Coords, Crashed, Moved, Snake
from term_snake.renderer import ScreenBuffer
from term_snake.terminal import TerminalError, is_quit

logger = logging.getLogger(__name__)


class RoundResult(NamedTuple):
    score: int
    won: bool


class SnakeGame:
    """
    Parameters
    ----------
    term   : terminal driver (terminal.CursesTerminal or a stand-in).
    config : GameConfig, defaults when omitted.
    choose : callable picking one element of a non-empty list uniformly
             at random.  Defaults to a random.Random seeded from config.
    sleep  : called with the tick interval at the top of every tick.
    """

    def __init__(self, term, config: Optional[GameConfig] = None,
                 choose=None, sleep=time.sleep):
        self.term = term
        self.config = config or GameConfig()
        self.screen: Optional[ScreenBuffer] = None
        self.width = 0
        self.height = 0
        self.paused = False
        self.arena = []
        self._choose = choose or random.Random(self.config.seed).choice
        self._sleep = sleep

    def initialize(self):
        """Size the game to the terminal; the terminal must already be set up."""
        self.screen = ScreenBuffer(self.term)
        self.width, self.height = self.screen.width, self.screen.height

        if not snake_fits(self.width, self.height, self.config.initial_length):
            raise TerminalError(
                f"Terminal too small ({self.width}x{self.height}) for a snake "
                f"of length {self.config.initial_length}.")

        self.arena = arena_cells(self.width, self.height)

    def run(self):
        """Intro screen, then rounds until the player quits."""
        self.initialize()
        self.show_intro()
        while True:
            self.play()

    def show_intro(self):
        self.screen.show_message(INTRO_LINES)
        self._wait_for_key()
        self.screen.hide_message()

    def play(self) -> RoundResult:
        """
        Play one round and wait for a key once it is over.

        Returns the final score and whether the arena was filled.
        """
        screen = self.screen
        screen.clear()
        screen.draw_borders((self.width, self.height))
        screen.hide_message()
        self.paused = False

        baseline = self.config.ticks_per_step
        max_x, max_y = self.width - 2, self.height - 2

        snake = Snake(center(self.width, self.height),
                      self.config.initial_length, Direction.RIGHT)
        apple = self.spawn_apple(snake)
        dir_change: Optional[Direction] = None
        ticks_left = interval = baseline
        current_score = 0

        self.print_snake(snake)
        logger.info("Round started on a %dx%d arena", max_x, max_y)

        while apple is not None:
            self._sleep(self.config.tick_interval)

            for event in self.term.poll_keys():
                if is_quit(event):
                    self.clean_exit()
                elif event.code in DIRECTION_KEYS:
                    dir_change = DIRECTION_KEYS[event.code]
                elif event.code == PAUSE_KEY:
                    self.toggle_pause()

            if self.paused:
                continue

            ticks_left -= 1
            if ticks_left > 0:
                continue

            # ── Game step ──
            if dir_change is not None:
                snake.set_direction(dir_change)
                dir_change = None

            current_score = score(snake, self.config.initial_length)
            ticks_left = ticks_until_step(current_score, snake.direction, baseline)
            if ticks_left != interval:
                logger.debug("Step interval %d -> %d ticks (score %d, %s)",
                             interval, ticks_left, current_score, snake.direction.value)
                interval = ticks_left

            move = snake.move(max_x, max_y)
            if isinstance(move, Crashed):
                return self._end_round(snake, current_score, won=False)

            if move.new_head == apple:
                snake.grow()
                apple = self.spawn_apple(snake)
            self.print_snake_update(snake, move)

        # No free cell left for an apple
        return self._end_round(snake, current_score, won=True)

    def spawn_apple(self, snake: Snake) -> Optional[Coords]:
        """Drop an apple on a random free arena cell, or None if there is none."""
        choices = free_cells(self.arena, snake)
        if not choices:
            return None

        apple = self._choose(choices)
        self.screen.print_at(apple, APPLE_CHAR)
        self.screen.flush()
        logger.debug("Apple at %s (%d free cells)", apple, len(choices))
        return apple

    def print_snake(self, snake: Snake):
        for pos in snake.body[:-1]:
            self.screen.print_at(pos, SNAKE_BODY_CHAR)
        self.screen.print_at(snake.head, snake.head_glyph())
        self.screen.flush()

    def print_snake_update(self, snake: Snake, move: Moved):
        """Repaint only the cells a step changed."""
        self.screen.print_at(move.new_head, snake.head_glyph())
        self.screen.print_at(move.old_head, SNAKE_BODY_CHAR)
        if move.old_tail is not None:
            self.screen.print_at(move.old_tail, BLANK_CHAR)
        self.screen.flush()

    def toggle_pause(self):
        if self.paused:
            self.screen.hide_message()
        else:
            self.screen.show_message(PAUSE_LINES)
        self.paused = not self.paused
        logger.debug("Paused: %s", self.paused)

    def clean_exit(self):
        logger.info("Quit requested")
        self.term.restore()
        sys.exit(0)

    # ──────────────────────────────────────────────────────────────────────

    def _end_round(self, snake: Snake, final_score: int, won: bool) -> RoundResult:
        if not won:
            for pos in snake.body:
                self.screen.print_at(pos, DEAD_SNAKE_CHAR)

        title = "You won!" if won else "Game over!"
        self.screen.show_message([title, f"Score: {final_score}"] + ROUND_OVER_FOOTER)
        logger.info("Round over: %s score=%d", "won" if won else "crashed", final_score)

        self._wait_for_key()
        return RoundResult(final_score, won)

    def _wait_for_key(self):
        if is_quit(self.term.read_key_blocking()):
            self.clean_exit()
