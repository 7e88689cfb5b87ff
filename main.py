#!/usr/bin/env python3
"""
main.py — Entry point for Terminal Snake.

Run from the repository root:
    python main.py                      # default speed
    python main.py --ticks-per-step 6   # faster snake
    python main.py --log-file snake.log --log-level DEBUG
"""

import argparse
import logging
import sys

from term_snake.config import GameConfig
from term_snake.constants import INITIAL_SNAKE_LENGTH, TICK_INTERVAL, TICKS_PER_STEP
from term_snake.game import SnakeGame
from term_snake.terminal import CursesTerminal, TerminalError, terminal_session

logger = logging.getLogger("term_snake")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Steer a snake around the terminal, eat apples, don't crash.")
    parser.add_argument("--tick-ms", type=_positive_float,
                        default=TICK_INTERVAL * 1000,
                        help="milliseconds between input polls (default: %(default)s)")
    parser.add_argument("--ticks-per-step", type=_positive_int, default=TICKS_PER_STEP,
                        help="ticks between snake steps at score 0 (default: %(default)s)")
    parser.add_argument("--length", type=_positive_int, default=INITIAL_SNAKE_LENGTH,
                        help="initial snake length (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for apple placement")
    parser.add_argument("--log-file", default=None,
                        help="write diagnostics to this file (the screen is the game)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        tick_interval=args.tick_ms / 1000,
        ticks_per_step=args.ticks_per_step,
        initial_length=args.length,
        seed=args.seed,
    )


def configure_logging(log_file, level: str):
    """Log to *log_file* if given; stdout and stderr belong to the game screen."""
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    logger.setLevel(level)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    game = SnakeGame(CursesTerminal(), build_config(args))
    try:
        with terminal_session(game.term):
            game.run()
    except TerminalError as exc:
        logger.exception("Fatal terminal error")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # SIGINT from outside the raw-mode terminal, e.g. `kill -INT`.
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
