"""
entities.py — The snake and the results of moving it.

No I/O happens here.  The two policies that guard the snake's movement,
refusing a direct reversal and ignoring the tail cell during collision
checks, are exposed as standalone predicates so they can be tested on
their own.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from term_snake.constants import DIR_DELTA, HEAD_ARROWS, OPPOSITE, Direction

Coords = Tuple[int, int]


@dataclass(frozen=True)
class Moved:
    """
    A successful step.

    old_tail is None when the snake grew this step (no cell was freed).
    """
    new_head: Coords
    old_head: Coords
    old_tail: Optional[Coords]


@dataclass(frozen=True)
class Crashed:
    """The head hit a wall or the body.  Terminal state for the round."""


MoveResult = Union[Moved, Crashed]


def is_reversal(current: Direction, new: Direction) -> bool:
    """True when *new* points straight back along *current*."""
    return OPPOSITE[current] == new


def hits_wall(pos: Coords, max_x: int, max_y: int) -> bool:
    """True when *pos* lies on the border or outside the arena."""
    x, y = pos
    return x <= 0 or y <= 0 or x > max_x or y > max_y


def hits_body(pos: Coords, body: List[Coords]) -> bool:
    """
    True when *pos* overlaps the body, the tail cell (body[0]) excluded.

    The tail is skipped even if the snake is about to grow and the tail
    will therefore stay put.  Chasing your own tail into that cell is
    allowed.
    """
    return pos in body[1:]


class Snake:
    """
    The player's snake.

    Attributes
    ----------
    body           : list  – [(x, y), ...] ordered **tail → head**.
                             body[-1] is always the HEAD.
    direction      : Direction – applied on the next move().
    grow_next_move : bool  – the next successful move keeps the tail.
    """

    def __init__(self, start: Coords, length: int, direction: Direction):
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}.")

        dx, dy = DIR_DELTA[direction]
        x, y = start
        self.body = [(x - dx * i, y - dy * i) for i in range(length - 1, -1, -1)]
        self.direction = direction
        self.grow_next_move = False

    @property
    def head(self) -> Coords:
        return self.body[-1]

    @property
    def tail(self) -> Coords:
        return self.body[0]

    def __len__(self):
        return len(self.body)

    def move(self, max_x: int, max_y: int) -> MoveResult:
        """
        Advance the head one cell along the current direction.

        *max_x* / *max_y* are the largest legal arena coordinates; 0 on
        either axis is the border.
        """
        old_head = self.head
        dx, dy = DIR_DELTA[self.direction]
        new_head = (old_head[0] + dx, old_head[1] + dy)

        if hits_wall(new_head, max_x, max_y) or hits_body(new_head, self.body):
            return Crashed()

        self.body.append(new_head)

        if self.grow_next_move:
            self.grow_next_move = False
            return Moved(new_head, old_head, None)

        old_tail = self.body.pop(0)
        return Moved(new_head, old_head, old_tail)

    def set_direction(self, new_direction: Direction):
        # Reversing into the neck would be an instant crash; ignore it.
        if is_reversal(self.direction, new_direction):
            return
        self.direction = new_direction

    def grow(self):
        self.grow_next_move = True

    def head_glyph(self) -> str:
        return HEAD_ARROWS[self.direction]
