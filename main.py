import argparse
import curses
import logging
import os
import random
import time
from typing import Callable, Optional

from dotenv import load_dotenv

from controls import CursesKeySource, KeyboardPoller
from data_access import load_high_score, save_high_score
from domain.constants import DIFFICULTIES, HIGHSCORE_FILE, PAUSE
from domain.game_state import GameSession, ProcessState
from domain.grid import Bounds
from services.terminal import BoardRenderer, CursesSurface


logger = logging.getLogger(__name__)

PAUSE_BANNER = "Paused - press any key to continue"
RESTART_KEYS = {ord('r'), ord('R')}
LEAVE_KEYS = {ord('q'), ord('Q'), ord('m'), ord('M'), 27}


# -------------------------------
# Process state lifecycle
# -------------------------------

def load_process_state(high_score_path: str, difficulty: int) -> ProcessState:
    """Build the process-wide state, reading the stored high score."""
    return ProcessState(
        high_score=load_high_score(high_score_path),
        difficulty=difficulty,
        high_score_path=high_score_path
    )


def finish_session(session: GameSession, process_state: ProcessState) -> bool:
    """
    Persist the high score at the end of a session.

    A failed write is logged by the data access layer and otherwise ignored.
    """
    logger.info(
        "Session finished: score=%d, high score=%d, reason=%s",
        session.score, process_state.high_score, session.death_reason
    )
    return save_high_score(process_state.high_score_path, process_state.high_score)


def setup_session(process_state: ProcessState, bounds: Optional[Bounds] = None, rng=None) -> GameSession:
    session = GameSession(process_state, bounds=bounds, rng=rng)
    logger.info(
        "New game: difficulty=%dms, high score=%d, food at %s",
        process_state.difficulty, process_state.high_score, session.food
    )
    return session


# -------------------------------
# Tick driver
# -------------------------------

def run_session(
    session: GameSession,
    poller: KeyboardPoller,
    renderer: BoardRenderer,
    tick_seconds: float,
    sleep: Callable[[float], None] = time.sleep
) -> GameSession:
    """
    Run the game loop until the session is over.

    Each tick: draw -> poll one intent -> step -> blank the vacated tail ->
    sleep. PAUSE blocks on the next key press before the tick continues.
    """
    while session.running:
        renderer.draw(session)

        intent = poller.poll()
        if intent == PAUSE:
            renderer.show_banner(PAUSE_BANNER)
            poller.wait_for_key()
            renderer.clear_banner(len(PAUSE_BANNER))
            intent = None

        result = session.step(intent)

        # The head may have moved into the cell the tail just left
        if result.cleared is not None and result.cleared not in session.snake:
            renderer.clear_cell(result.cleared)

        if session.running:
            sleep(tick_seconds)

    return session


def game_over_screen(
    session: GameSession,
    process_state: ProcessState,
    poller: KeyboardPoller,
    renderer: BoardRenderer
) -> bool:
    """
    Show the final score and wait for a choice.

    Returns:
        True to start another game, False to leave
    """
    renderer.draw_game_over(session, process_state)
    while True:
        key = poller.wait_for_key()
        if key in RESTART_KEYS:
            return True
        if key in LEAVE_KEYS:
            return False


def play(stdscr, process_state: ProcessState, rng=None, bounds: Optional[Bounds] = None) -> int:
    """
    Play games on a curses screen until the player leaves.

    Returns:
        The number of games played
    """
    bounds = bounds or Bounds()
    rng = rng or random.Random()
    surface = CursesSurface(stdscr)
    renderer = BoardRenderer(surface, bounds)
    poller = KeyboardPoller(CursesKeySource(stdscr))

    columns, rows = renderer.required_size
    if not surface.fits(columns, rows):
        raise SystemExit(
            f"Terminal too small: need at least {columns}x{rows} characters."
        )

    games = 0
    while True:
        session = setup_session(process_state, bounds=bounds, rng=rng)
        renderer.draw_border()
        run_session(session, poller, renderer, process_state.tick_seconds)
        games += 1
        finish_session(session, process_state)
        if not game_over_screen(session, process_state, poller, renderer):
            return games


# -------------------------------
# Entry point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Arrow keys or WASD to move, P to pause, ESC to quit."
    )
    parser.add_argument("--difficulty", type=str.lower, choices=sorted(DIFFICULTIES),
                        default=os.getenv("SNAKE_DIFFICULTY", "medium").lower(),
                        help="Game speed: easy (150ms/tick), medium (100ms) or hard (50ms)")
    parser.add_argument("--highscore-file", type=str,
                        default=os.getenv("SNAKE_HIGHSCORE_FILE", HIGHSCORE_FILE),
                        help="File holding the high score")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (for reproducible games)")
    parser.add_argument("--log-file", type=str,
                        default=os.getenv("SNAKE_LOG_FILE", "snake.log"),
                        help="Where to write logs (the terminal is used by the game)")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        default=os.getenv("SNAKE_LOG_LEVEL", "WARNING").upper(),
                        help="Logging verbosity")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check env-derived defaults against choices
    if args.difficulty not in DIFFICULTIES:
        parser.error(f"unknown difficulty: {args.difficulty!r}")
    if not isinstance(logging.getLevelName(args.log_level), int):
        parser.error(f"unknown log level: {args.log_level!r}")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.FileHandler(args.log_file, delay=True)],
    )

    process_state = load_process_state(args.highscore_file, DIFFICULTIES[args.difficulty])
    rng = random.Random(args.seed)

    # Keep ESC responsive; curses otherwise waits a full second for a sequence
    os.environ.setdefault("ESCDELAY", "25")

    games = curses.wrapper(play, process_state, rng)

    print(f"Thanks for playing! Games: {games}  |  High Score: {process_state.high_score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
