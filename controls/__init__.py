"""
Input handling for Console Snake.

Raw key sources deliver terminal key codes; the KeyboardPoller turns at most
one logical key event per call into an Intent (a direction, PAUSE or QUIT).
"""

from .base import KeySource
from .curses_source import CursesKeySource
from .keyboard import KeyboardPoller

__all__ = [
    'KeySource',
    'CursesKeySource',
    'KeyboardPoller',
]
