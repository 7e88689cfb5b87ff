"""
engine.py — Core game rules for Terminal Snake.

Arena geometry, apple candidates, scoring and the step-speed formula.
No I/O or rendering happens here; the game loop in game.py drives these.
"""

import math

from term_snake.constants import SPEEDUP_EVERY, VERTICAL, VERTICAL_SLOWDOWN, Direction
from term_snake.entities import Coords, Snake


def arena_cells(width: int, height: int) -> list:
    """
    Every cell inside the border of a *width* x *height* terminal.

    Ordered row by row, left to right.  Empty when the terminal is too
    small to hold any interior.
    """
    return [(x, y) for y in range(1, height - 1) for x in range(1, width - 1)]


def free_cells(arena: list, snake: Snake) -> list:
    """Arena cells not covered by the snake's body."""
    occupied = set(snake.body)
    return [pos for pos in arena if pos not in occupied]


def score(snake: Snake, initial_length: int) -> int:
    """
    Growth past the starting length.

    A pending grow() is not counted until the move that applies it.
    """
    return max(len(snake.body) - initial_length, 0)


def ticks_until_step(current_score: int, direction: Direction,
                     baseline: int) -> int:
    """
    Number of ticks to wait before the next snake step.

    The interval drops by one tick every SPEEDUP_EVERY points and never
    goes below one tick.  Vertical travel is stretched by
    VERTICAL_SLOWDOWN, rounded up, so the perceived speed matches
    horizontal travel on cells that are taller than wide.
    """
    ticks = max(baseline - current_score // SPEEDUP_EVERY, 1)
    if direction in VERTICAL:
        ticks = math.ceil(ticks * VERTICAL_SLOWDOWN)
    return ticks


def center(width: int, height: int) -> Coords:
    return width // 2, height // 2


def snake_fits(width: int, height: int, length: int) -> bool:
    """
    Whether a right-facing snake of *length* cells starting at the
    terminal center stays inside the arena.
    """
    cx, cy = center(width, height)
    return (cx - (length - 1) >= 1 and cx <= width - 2
            and 1 <= cy <= height - 2)
