"""
Shared fakes for the terminal and keyboard so tests never need a real screen.
"""

import os
import sys
from collections import deque

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from controls.base import KeySource  # noqa: E402
from services.terminal import RenderSurface  # noqa: E402


class FakeKeySource(KeySource):
    """Replays a fixed list of key codes."""

    def __init__(self, codes=()):
        self.codes = deque(codes)

    def read(self):
        return self.codes.popleft() if self.codes else None

    def wait(self):
        if not self.codes:
            raise AssertionError("wait() called with no keys left")
        return self.codes.popleft()

    def push_back(self, code):
        self.codes.appendleft(code)


class RecordingSurface(RenderSurface):
    """Keeps every write as (x, y, text, color)."""

    def __init__(self, columns=80, rows=30):
        self.columns = columns
        self.rows = rows
        self.cursor = (0, 0)
        self.color = None
        self.writes = []
        self.clears = 0
        self.refreshes = 0

    def fits(self, width, height):
        return self.columns >= width and self.rows >= height

    def move_cursor(self, x, y):
        self.cursor = (x, y)

    def write(self, text):
        x, y = self.cursor
        self.writes.append((x, y, text, self.color))
        self.cursor = (x + len(text), y)

    def set_color(self, color):
        self.color = color

    def clear(self):
        self.clears += 1
        self.writes.clear()

    def refresh(self):
        self.refreshes += 1

    def text_at(self, x, y):
        """Last text written starting at (x, y), or None."""
        for wx, wy, text, _ in reversed(self.writes):
            if (wx, wy) == (x, y):
                return text
        return None


@pytest.fixture
def make_keys():
    return FakeKeySource


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def make_surface():
    return RecordingSurface
