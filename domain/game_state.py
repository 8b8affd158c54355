"""
Game session state machine and process-wide state.

A GameSession is one playthrough: it owns the snake, the food, the score and
the RUNNING/OVER state, and advances one tick at a time through step().
ProcessState holds what outlives a session (high score, difficulty).
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    FOOD_REWARD,
    INITIAL_SNAKE_LENGTH,
    MAX_SNAKE_LENGTH,
    MEDIUM,
    OVER,
    QUIT,
    RUNNING,
    VALID_MOVES,
    HIGHSCORE_FILE,
)
from .food import place_food
from .grid import Bounds
from .snake import Snake


logger = logging.getLogger(__name__)


@dataclass
class ProcessState:
    """State shared across sessions; only changed between games."""

    high_score: int = 0
    difficulty: int = MEDIUM
    high_score_path: str = HIGHSCORE_FILE

    @property
    def tick_seconds(self) -> float:
        return self.difficulty / 1000.0


@dataclass
class StepResult:
    """
    Outcome of one tick.

    Attributes:
        state: RUNNING or OVER after the tick
        cleared: the vacated tail cell the renderer must blank, if any
        ate_food: whether food was consumed this tick
        death_reason: 'wall', 'self' or 'quit' once the session is over
    """

    state: str
    cleared: Optional[Tuple[int, int]] = None
    ate_food: bool = False
    death_reason: Optional[str] = None


class GameSession:
    """
    One game from setup to game over.

    Attributes:
        bounds: board geometry
        snake: the player's snake
        food: current food position
        score: points earned this session
        state: RUNNING or OVER
        death_reason: why the session ended ('wall', 'self', 'quit')
        tick: number of ticks in which the snake moved
        process_state: shared high score / difficulty, updated in place
    """

    def __init__(
        self,
        process_state: ProcessState,
        bounds: Optional[Bounds] = None,
        snake: Optional[Snake] = None,
        food: Optional[Tuple[int, int]] = None,
        rng=None
    ):
        self.process_state = process_state
        self.bounds = bounds or Bounds()
        self.rng = rng or random.Random()
        if snake is None:
            snake = Snake.horizontal(
                self.bounds.centre, INITIAL_SNAKE_LENGTH, max_length=MAX_SNAKE_LENGTH
            )
        self.snake = snake
        self.food = food if food is not None else place_food(self.snake, self.bounds, self.rng)
        self.score = 0
        self.state = RUNNING
        self.death_reason: Optional[str] = None
        self.tick = 0

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    def _end(self, reason: str) -> StepResult:
        self.state = OVER
        self.death_reason = reason
        logger.info(
            "Game over: %s (score=%d, tick=%d, length=%d)",
            reason, self.score, self.tick, len(self.snake)
        )
        logger.debug("Final board:\n%s", self.print_board())
        return StepResult(state=OVER, death_reason=reason)

    def step(self, intent: Optional[str] = None) -> StepResult:
        """
        Execute one tick:
          1) Quit ends the session without moving
          2) A movement intent turns the snake (reversals are ignored)
          3) Advance, remembering the vacated tail
          4) Wall, then self collision end the session
          5) Eating food scores, grows the snake and places new food
          6) Otherwise the vacated tail cell is reported for clearing
        """
        if self.state == OVER:
            return StepResult(state=OVER, death_reason=self.death_reason)

        if intent == QUIT:
            return self._end("quit")

        if intent in VALID_MOVES:
            self.snake.set_direction(intent)

        saved_tail = self.snake.advance()
        self.tick += 1

        if self.snake.hits_wall(self.bounds):
            return self._end("wall")

        if self.snake.hits_self():
            return self._end("self")

        if self.snake.head == self.food:
            self.score += FOOD_REWARD
            if self.score > self.process_state.high_score:
                self.process_state.high_score = self.score
            grew = self.snake.grow(saved_tail)
            self.food = place_food(self.snake, self.bounds, self.rng)
            logger.debug(
                "Food eaten at tick %d, score=%d, next food at %s",
                self.tick, self.score, self.food
            )
            # At capacity the tail still moved on and its old cell is empty
            return StepResult(state=RUNNING, ate_food=True, cleared=None if grew else saved_tail)

        return StepResult(state=RUNNING, cleared=saved_tail)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        . = empty space
        * = food
        O = snake head
        o = snake body
        """
        width, height = self.bounds.width, self.bounds.height
        board = [['.' for _ in range(width)] for _ in range(height)]

        for y in range(height):
            for x in range(width):
                if self.bounds.is_wall((x, y)):
                    board[y][x] = '#'

        fx, fy = self.food
        board[fy][fx] = '*'

        for idx, (x, y) in enumerate(self.snake.positions):
            if 0 <= x < width and 0 <= y < height:
                board[y][x] = 'O' if idx == 0 else 'o'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameSession state={self.state}, tick={self.tick}, "
            f"score={self.score}, food={self.food}, snake={self.snake!r}>"
        )
