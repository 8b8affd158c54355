"""
Base key source interface for the input poller.
"""

from typing import Optional


class KeySource:
    """
    Base class/interface for raw key input.

    A key source yields integer key codes as the terminal delivers them.
    Multi-code keys (escape sequences, extended-key prefixes) arrive as
    several codes; assembling them is the poller's job.
    """

    def read(self) -> Optional[int]:
        """
        Return the next pending key code without blocking.

        Returns:
            The key code, or None if nothing is pending
        """
        raise NotImplementedError

    def wait(self) -> int:
        """Block until a key is pressed and return its code."""
        raise NotImplementedError

    def push_back(self, code: int) -> None:
        """Return a code to the front of the queue so the next read sees it."""
        raise NotImplementedError
