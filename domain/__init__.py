"""
Domain entities for the Console Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, keyboard, high-score file).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, PAUSE, QUIT,
    RUNNING, OVER, EASY, MEDIUM, HARD, DIFFICULTIES, FOOD_REWARD,
)
from .grid import Bounds
from .snake import Snake
from .food import place_food
from .game_state import GameSession, ProcessState, StepResult

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'PAUSE', 'QUIT',
    'RUNNING', 'OVER', 'EASY', 'MEDIUM', 'HARD', 'DIFFICULTIES', 'FOOD_REWARD',
    'Bounds',
    'Snake',
    'place_food',
    'GameSession',
    'ProcessState',
    'StepResult',
]
