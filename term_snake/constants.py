"""
constants.py — Shared constants for Terminal Snake.

Directional data, screen glyphs, key bindings, overlay texts and timing
defaults live here so every other module can import them from a single
authoritative source.
"""

from enum import Enum


# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

class Direction(str, Enum):
    UP    = "up"
    DOWN  = "down"
    LEFT  = "left"
    RIGHT = "right"


# Directional arrows used to render the snake's head.
HEAD_ARROWS = {
    Direction.UP:    "^",
    Direction.DOWN:  "v",
    Direction.LEFT:  "<",
    Direction.RIGHT: ">",
}

# Column / row deltas (dx, dy) for each compass direction.
# y grows downwards, like terminal rows.
DIR_DELTA = {
    Direction.UP:    ( 0, -1),
    Direction.DOWN:  ( 0,  1),
    Direction.LEFT:  (-1,  0),
    Direction.RIGHT: ( 1,  0),
}

OPPOSITE = {
    Direction.UP:    Direction.DOWN,
    Direction.DOWN:  Direction.UP,
    Direction.LEFT:  Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

VERTICAL = frozenset({Direction.UP, Direction.DOWN})


# ═══════════════════════════════════════════════════════════════════════════
#  SCREEN GLYPHS
# ═══════════════════════════════════════════════════════════════════════════

SNAKE_BODY_CHAR = "█"
DEAD_SNAKE_CHAR = "X"
APPLE_CHAR      = "O"
BLANK_CHAR      = " "

BORDER_CORNER = "+"
BORDER_HORIZ  = "-"
BORDER_VERT   = "|"


# ═══════════════════════════════════════════════════════════════════════════
#  KEY BINDINGS
# ═══════════════════════════════════════════════════════════════════════════

# Two alternate key sets: arrow keys and WASD.
DIRECTION_KEYS = {
    "up":    Direction.UP,
    "w":     Direction.UP,
    "down":  Direction.DOWN,
    "s":     Direction.DOWN,
    "left":  Direction.LEFT,
    "a":     Direction.LEFT,
    "right": Direction.RIGHT,
    "d":     Direction.RIGHT,
}

PAUSE_KEY = "esc"
QUIT_KEY  = "c"        # together with the "ctrl" modifier


# ═══════════════════════════════════════════════════════════════════════════
#  OVERLAY TEXTS
# ═══════════════════════════════════════════════════════════════════════════

INTRO_LINES = [
    "Arrow keys or WASD to move",
    "Esc to pause",
    "CTRL+C to quit",
    "",
    "Press any key to begin",
]

PAUSE_LINES = [
    "Paused",
    "Press Esc to resume",
    "or Ctrl+C to quit",
]

ROUND_OVER_FOOTER = [
    "",
    "Press any key to play again,",
    "or CTRL+C to quit.",
]


# ═══════════════════════════════════════════════════════════════════════════
#  TIMING
# ═══════════════════════════════════════════════════════════════════════════

# Seconds slept at the top of every tick of the outer loop.
TICK_INTERVAL = 0.005

# Ticks between two snake steps at score 0.
TICKS_PER_STEP = 10

# The step interval shrinks by one tick every SPEEDUP_EVERY points.
SPEEDUP_EVERY = 7

# Terminal cells are taller than wide; vertical steps take this much longer.
VERTICAL_SLOWDOWN = 1.35

# Milliseconds curses waits for input when the loop polls for key events.
POLL_TIMEOUT_MS = 1

INITIAL_SNAKE_LENGTH = 6
