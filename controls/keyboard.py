"""
Keyboard poller - maps raw key codes to player intents.
"""

import curses
import logging
from typing import Dict, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, PAUSE, QUIT
from .base import KeySource


logger = logging.getLogger(__name__)

ESC = 27

# Prefix codes that announce a two-part extended key (DOS/Windows console style)
EXTENDED_PREFIXES = {0, 224}

EXTENDED_KEYS: Dict[int, str] = {
    72: UP,
    80: DOWN,
    75: LEFT,
    77: RIGHT,
}

# Final byte of ESC [ A..D when the terminal does not translate arrows
ANSI_ARROWS: Dict[int, str] = {
    ord('A'): UP,
    ord('B'): DOWN,
    ord('C'): RIGHT,
    ord('D'): LEFT,
}

CURSES_ARROWS: Dict[int, str] = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}

LETTER_KEYS: Dict[int, str] = {}
for _letter, _intent in (('w', UP), ('s', DOWN), ('a', LEFT), ('d', RIGHT), ('p', PAUSE)):
    LETTER_KEYS[ord(_letter)] = _intent
    LETTER_KEYS[ord(_letter.upper())] = _intent


class KeyboardPoller:
    """
    Non-blocking poller that consumes one logical key event per call.

    Arrow keys reported as two codes (an extended prefix followed by a scan
    code, or an ESC [ sequence) are read in full within a single poll so the
    second part is never mistaken for a keystroke of its own.
    """

    def __init__(self, source: KeySource):
        self.source = source

    def poll(self) -> Optional[str]:
        """
        Returns:
            One of UP, DOWN, LEFT, RIGHT, PAUSE, QUIT, or None when no key is
            pending or the key has no meaning in the game
        """
        code = self.source.read()
        if code is None:
            return None

        if code in CURSES_ARROWS:
            return CURSES_ARROWS[code]

        if code in EXTENDED_PREFIXES:
            scan = self.source.read()
            return EXTENDED_KEYS.get(scan) if scan is not None else None

        if code == ESC:
            return self._read_escape()

        intent = LETTER_KEYS.get(code)
        if intent is None:
            logger.debug("Ignoring key code %d", code)
        return intent

    def _read_escape(self) -> Optional[str]:
        follow = self.source.read()
        if follow is None:
            return QUIT
        if follow != ord('['):
            # A lone ESC followed by an unrelated key
            self.source.push_back(follow)
            return QUIT
        final = self.source.read()
        return ANSI_ARROWS.get(final) if final is not None else None

    def wait_for_key(self) -> int:
        """Block until any key is pressed."""
        return self.source.wait()
