"""
Game constants for Console Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dx, dy) per direction; y grows downward like terminal rows
DIRECTION_OFFSETS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Non-movement intents
PAUSE = "PAUSE"
QUIT = "QUIT"
VALID_INTENTS = VALID_MOVES | {PAUSE, QUIT}

# Session states
RUNNING = "RUNNING"
OVER = "OVER"

# Difficulty tiers, milliseconds per tick
EASY = 150
MEDIUM = 100
HARD = 50
DIFFICULTIES = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}

# Game settings
BOARD_WIDTH = 40
BOARD_HEIGHT = 20
MAX_SNAKE_LENGTH = 100
INITIAL_SNAKE_LENGTH = 3
FOOD_REWARD = 10
HIGHSCORE_FILE = "highscore.txt"
