"""
Snake entity for the game engine.
"""

from collections import deque
from itertools import islice
from typing import List, Tuple, Optional

from .constants import (
    DIRECTION_OFFSETS,
    MAX_SNAKE_LENGTH,
    OPPOSITE,
    RIGHT,
    VALID_MOVES,
)
from .grid import Bounds


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: current heading, one of UP/DOWN/LEFT/RIGHT
        max_length: segment capacity; growth past it is a no-op
    """

    def __init__(
        self,
        positions: List[Tuple[int, int]],
        direction: str = RIGHT,
        max_length: int = MAX_SNAKE_LENGTH
    ):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        if len(positions) > max_length:
            raise ValueError(
                f"Snake of length {len(positions)} exceeds capacity {max_length}."
            )
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.positions = deque(positions)
        self.direction = direction
        self.max_length = max_length

    @classmethod
    def horizontal(cls, head: Tuple[int, int], length: int, **kwargs) -> "Snake":
        """Build a snake lying left of `head`, facing right."""
        hx, hy = head
        return cls([(hx - i, hy) for i in range(length)], direction=RIGHT, **kwargs)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position) -> bool:
        return position in self.positions

    def set_direction(self, direction: str) -> bool:
        """
        Change heading. A 180-degree reversal is ignored.

        Returns:
            True if the direction was applied
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")
        if direction == OPPOSITE[self.direction]:
            return False
        self.direction = direction
        return True

    def advance(self, direction: Optional[str] = None) -> Tuple[int, int]:
        """
        Move one cell. Every segment takes the place of the one ahead of it
        and the head steps along `direction` (the current heading if omitted).

        Returns:
            The vacated tail position
        """
        dx, dy = DIRECTION_OFFSETS[direction or self.direction]
        hx, hy = self.head
        vacated = self.positions.pop()
        self.positions.appendleft((hx + dx, hy + dy))
        return vacated

    def grow(self, saved_tail: Tuple[int, int]) -> bool:
        """Append a segment at `saved_tail` unless already at capacity."""
        if len(self.positions) >= self.max_length:
            return False
        self.positions.append(saved_tail)
        return True

    def hits_wall(self, bounds: Bounds) -> bool:
        return bounds.is_wall(self.head)

    def hits_self(self) -> bool:
        head = self.head
        return any(segment == head for segment in islice(self.positions, 1, None))

    def __repr__(self):
        return f"<Snake len={len(self)} head={self.head} dir={self.direction}>"
