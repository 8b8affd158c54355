"""
Tests for the GameSession state machine.
"""

import random
from unittest.mock import patch

import pytest

from domain.constants import UP, LEFT, RIGHT, QUIT, PAUSE, RUNNING, OVER, FOOD_REWARD, MEDIUM
from domain.food import place_food
from domain.game_state import GameSession, ProcessState, StepResult
from domain.grid import Bounds
from domain.snake import Snake


def make_session(snake=None, food=(5, 5), high_score=0, bounds=None, seed=1):
    process_state = ProcessState(high_score=high_score)
    return GameSession(
        process_state,
        bounds=bounds or Bounds(40, 20),
        snake=snake,
        food=food,
        rng=random.Random(seed)
    )


class TestProcessState:
    """Tests for the ProcessState dataclass."""

    def test_defaults(self):
        state = ProcessState()
        assert state.high_score == 0
        assert state.difficulty == MEDIUM
        assert state.high_score_path == "highscore.txt"

    def test_tick_seconds(self):
        assert ProcessState(difficulty=150).tick_seconds == pytest.approx(0.15)


class TestSessionSetup:
    """Tests for a freshly created session."""

    def test_new_session_starts_running_with_centred_snake(self):
        session = GameSession(ProcessState(), rng=random.Random(0))

        assert session.state == RUNNING
        assert session.running is True
        assert session.score == 0
        assert session.tick == 0
        assert session.death_reason is None
        assert list(session.snake.positions) == [(20, 10), (19, 10), (18, 10)]
        assert session.snake.direction == RIGHT

    def test_initial_food_is_off_snake(self):
        for seed in range(20):
            session = GameSession(ProcessState(), rng=random.Random(seed))
            assert session.food not in session.snake.positions
            assert not session.bounds.is_wall(session.food)


class TestStep:
    """Tests for GameSession.step()."""

    def test_plain_move_reports_vacated_tail(self):
        session = make_session()

        result = session.step()

        assert result == StepResult(state=RUNNING, cleared=(18, 10))
        assert list(session.snake.positions) == [(21, 10), (20, 10), (19, 10)]
        assert session.tick == 1
        assert session.score == 0

    def test_movement_intent_turns_snake(self):
        session = make_session()
        session.step(UP)
        assert session.snake.head == (20, 9)
        assert session.snake.direction == UP

    def test_reversal_intent_is_ignored(self):
        session = make_session()
        session.step(LEFT)
        assert session.snake.head == (21, 10)
        assert session.state == RUNNING

    def test_pause_intent_does_not_affect_step(self):
        session = make_session()
        result = session.step(PAUSE)
        assert result.state == RUNNING
        assert session.snake.head == (21, 10)

    def test_wall_collision_ends_session(self):
        session = make_session(snake=Snake.horizontal((38, 10), 3), high_score=30)

        result = session.step()

        assert result.state == OVER
        assert result.death_reason == "wall"
        assert result.cleared is None
        assert session.state == OVER
        assert session.score == 0
        assert session.process_state.high_score == 30

    def test_self_collision_ends_session(self):
        snake = Snake([(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)], direction=UP)
        session = make_session(snake=snake, food=(20, 15))

        result = session.step(RIGHT)

        assert result.state == OVER
        assert result.death_reason == "self"

    def test_quit_ends_session_without_moving(self):
        session = make_session()

        result = session.step(QUIT)

        assert result.state == OVER
        assert result.death_reason == "quit"
        assert session.snake.head == (20, 10)
        assert session.tick == 0

    def test_step_after_game_over_changes_nothing(self):
        session = make_session()
        session.step(QUIT)
        head = session.snake.head

        result = session.step(UP)

        assert result.state == OVER
        assert result.death_reason == "quit"
        assert session.snake.head == head

    def test_eating_food_scores_grows_and_replaces_food(self):
        session = make_session(food=(21, 10))

        with patch("domain.game_state.place_food", wraps=place_food) as mock_place:
            result = session.step()

        assert result.state == RUNNING
        assert result.ate_food is True
        assert result.cleared is None
        assert session.score == FOOD_REWARD
        assert session.process_state.high_score == FOOD_REWARD
        assert list(session.snake.positions) == [(21, 10), (20, 10), (19, 10), (18, 10)]
        mock_place.assert_called_once()
        assert session.food not in session.snake.positions

    def test_high_score_only_updated_when_exceeded(self):
        session = make_session(food=(21, 10), high_score=50)

        session.step()

        assert session.score == FOOD_REWARD
        assert session.process_state.high_score == 50

    def test_high_score_tracks_score_once_exceeded(self):
        session = make_session(food=(21, 10), high_score=10)
        session.step()
        assert session.process_state.high_score == 10

        session.food = (22, 10)
        session.step()
        assert session.score == 20
        assert session.process_state.high_score == 20

    def test_growth_capped_at_capacity(self):
        snake = Snake([(20, 10), (19, 10), (18, 10)], max_length=3)
        session = make_session(snake=snake, food=(21, 10))

        result = session.step()

        assert result.ate_food is True
        assert session.score == FOOD_REWARD
        assert len(session.snake) == 3

    def test_eating_at_capacity_reports_vacated_tail(self):
        snake = Snake([(20, 10), (19, 10), (18, 10)], max_length=3)
        session = make_session(snake=snake, food=(21, 10))

        result = session.step()

        assert result.ate_food is True
        assert result.cleared == (18, 10)
        assert (18, 10) not in session.snake.positions

    def test_eating_below_capacity_clears_nothing(self):
        session = make_session(food=(21, 10))
        assert session.step().cleared is None

    def test_run_into_right_wall_from_start(self):
        session = make_session()
        ticks = 0
        while session.running:
            session.step()
            ticks += 1

        assert ticks == 19
        assert session.death_reason == "wall"
        assert session.score == 0


class TestPrintBoard:
    """Tests for the text board snapshot."""

    def test_board_markers(self):
        session = make_session(bounds=Bounds(8, 5), snake=Snake.horizontal((4, 2), 3), food=(6, 3))

        board = session.print_board().split("\n")

        assert board == [
            "########",
            "#......#",
            "#.ooO..#",
            "#.....*#",
            "########",
        ]

    def test_repr(self):
        session = make_session()
        text = repr(session)
        assert "state=RUNNING" in text
        assert "score=0" in text
