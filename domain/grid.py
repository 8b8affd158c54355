"""
Playfield geometry: board size and the border kill zone.
"""

from typing import Tuple

from .constants import BOARD_WIDTH, BOARD_HEIGHT


class Bounds:
    """
    Board dimensions. The outermost row and column on each side are walls,
    so the playable interior is x in 1..width-2 and y in 1..height-2.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        if width < 3 or height < 3:
            raise ValueError(f"Board {width}x{height} has no playable interior.")
        self.width = width
        self.height = height

    def is_wall(self, position: Tuple[int, int]) -> bool:
        x, y = position
        return x <= 0 or x >= self.width - 1 or y <= 0 or y >= self.height - 1

    @property
    def interior_area(self) -> int:
        return (self.width - 2) * (self.height - 2)

    @property
    def centre(self) -> Tuple[int, int]:
        return (self.width // 2, self.height // 2)

    def __repr__(self):
        return f"<Bounds {self.width}x{self.height}>"
