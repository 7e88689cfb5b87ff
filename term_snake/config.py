"""
config.py — Tunable game settings.

Defaults come from constants.py; main.py overrides them from the command
line.
"""

from dataclasses import dataclass
from typing import Optional

from term_snake.constants import INITIAL_SNAKE_LENGTH, TICK_INTERVAL, TICKS_PER_STEP


@dataclass
class GameConfig:
    """
    Attributes
    ----------
    tick_interval  : float – seconds slept at the top of every tick.
    ticks_per_step : int   – ticks between snake steps at score 0.
    initial_length : int   – cells in a freshly spawned snake.
    seed           : int or None – seeds apple placement for replays.
    """

    tick_interval: float = TICK_INTERVAL
    ticks_per_step: int = TICKS_PER_STEP
    initial_length: int = INITIAL_SNAKE_LENGTH
    seed: Optional[int] = None

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.ticks_per_step < 1:
            raise ValueError(f"ticks_per_step must be at least 1, got {self.ticks_per_step}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be at least 1, got {self.initial_length}")
