"""
Data access layer for Console Snake.

Only one value is persisted between runs: the high score.
"""

from .high_score import load_high_score, save_high_score

__all__ = [
    'load_high_score',
    'save_high_score',
]
