"""
Key source backed by a curses window.
"""

import curses
from typing import Optional

from .base import KeySource


class CursesKeySource(KeySource):
    """
    Reads keys from a curses window kept in no-delay mode, so getch()
    returns -1 immediately when no key is waiting.
    """

    def __init__(self, window):
        self.window = window
        self.window.keypad(True)
        self.window.nodelay(True)

    def read(self) -> Optional[int]:
        code = self.window.getch()
        if code == -1:
            return None
        return code

    def wait(self) -> int:
        self.window.nodelay(False)
        try:
            return self.window.getch()
        finally:
            self.window.nodelay(True)

    def push_back(self, code: int) -> None:
        curses.ungetch(code)
