"""
Food placement on free interior cells.
"""

import random
from typing import Tuple

from .grid import Bounds
from .snake import Snake


def place_food(snake: Snake, bounds: Bounds, rng=random) -> Tuple[int, int]:
    """
    Return a random interior cell (x, y) not occupied by the snake.

    Samples until a free cell comes up, which terminates as long as the
    interior has room left.

    Raises:
        ValueError: if the snake already covers every interior cell
    """
    occupied = set(snake.positions)
    free_cells = bounds.interior_area - sum(
        1 for pos in occupied if not bounds.is_wall(pos)
    )
    if free_cells <= 0:
        raise ValueError("No free cell left for food.")

    while True:
        x = rng.randint(1, bounds.width - 2)
        y = rng.randint(1, bounds.height - 2)
        if (x, y) not in occupied:
            return (x, y)
