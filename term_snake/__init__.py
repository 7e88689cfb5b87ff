"""
term_snake — A terminal snake game.

This package exposes the modules needed to run the game or drive it
from tests with a stand-in terminal:

  constants  – directions, glyphs, key bindings, timing defaults.
  entities   – Snake class, Moved / Crashed move results.
  engine     – arena cells, score, step-speed formula.
  terminal   – curses driver, KeyEvent, TerminalError.
  renderer   – ScreenBuffer with overlay messages.
  config     – GameConfig.
  game       – SnakeGame, the fixed-tick game loop.
"""

__version__ = "0.1.0"
