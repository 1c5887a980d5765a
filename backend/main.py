"""
Headless driver for Snake Arcade.

Plays the engine with an autopilot, honoring the tick cadence, and keeps the
high score file up to date. A graphical host would replace the player with
key presses and draw get_current_state() each frame.
"""

import argparse
import json
import logging
import random
import time
from typing import Callable, Dict, Optional

from config import get_log_level, load_engine_config
from domain.errors import InvariantViolation
from players.base import Player
from players.random_player import RandomPlayer
from session import GameSession

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Decides when the next tick is due.

    A tick is due once at least the current tick interval has passed since
    the previous one.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.last_tick: Optional[float] = None

    def due(self, interval_ms: int) -> bool:
        if self.last_tick is None:
            return True
        return (self.clock() - self.last_tick) * 1000.0 >= interval_ms

    def wait_time(self, interval_ms: int) -> float:
        """Seconds until the next tick is due (0 if it already is)."""
        if self.last_tick is None:
            return 0.0
        remaining = interval_ms / 1000.0 - (self.clock() - self.last_tick)
        return max(0.0, remaining)

    def mark(self) -> None:
        self.last_tick = self.clock()


# -------------------------------
# Session loop
# -------------------------------

def run_session(
    session: GameSession,
    player: Player,
    max_ticks: int,
    max_games: Optional[int] = None,
    realtime: bool = False,
    scheduler: Optional[TickScheduler] = None,
    sleep: Callable[[float], None] = time.sleep
) -> Dict:
    """
    Run the engine until `max_ticks` ticks have been applied or `max_games`
    games have been lost.

    Args:
        session: The session whose engine is driven
        player: Chooses a direction before every tick
        max_ticks: Upper limit on applied ticks
        max_games: Stop after this many losses (no limit if None)
        realtime: Wait out each tick interval instead of ticking immediately
        scheduler: Tick cadence; a monotonic-clock scheduler by default

    Returns:
        A dictionary summarizing the run.
    """
    engine = session.engine
    scheduler = scheduler or TickScheduler()
    ticks = 0
    final_scores = []
    recoveries = 0

    if engine.paused:
        engine.toggle_pause()

    while ticks < max_ticks and (max_games is None or len(final_scores) < max_games):
        if realtime:
            wait = scheduler.wait_time(engine.state.tick_interval_ms)
            if wait > 0:
                sleep(wait)

        move = player.get_move(engine.get_current_state())
        if move is not None:
            engine.submit_direction(move)

        try:
            outcome = engine.advance_tick()
        except InvariantViolation:
            logger.exception("Engine state became invalid, resetting")
            engine.reset()
            engine.toggle_pause()
            recoveries += 1
            continue
        finally:
            scheduler.mark()

        ticks += 1

        if outcome is not None and outcome.lost:
            final_scores.append(outcome.final_score)
            logger.info(f"Game {len(final_scores)} ended ({outcome.death_reason}), score {outcome.final_score}")
            # losing pauses the engine; resume for the next game
            engine.toggle_pause()

    session.save()

    state = session.get_current_state()
    return {
        "ticks": ticks,
        "games_finished": len(final_scores),
        "final_scores": final_scores,
        "current_score": state.score,
        "high_scores": state.high_scores,
        "best_score": session.scores.best,
        "recoveries": recoveries,
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run Snake Arcade headless with a random autopilot."
    )
    parser.add_argument("--ticks", type=int, required=False, default=1000,
                        help="Maximum number of ticks to apply")
    parser.add_argument("--games", type=int, required=False, default=None,
                        help="Stop after this many games have been lost")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--scores-file", type=str, required=False, default=None,
                        help="High score file (defaults to SNAKE_SCORES_PATH)")
    parser.add_argument("--realtime", action="store_true",
                        help="Wait out each tick interval like an interactive game")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the final board")

    args = parser.parse_args(argv)

    if args.ticks < 0:
        parser.error("--ticks must not be negative")
    if args.games is not None and args.games < 1:
        parser.error("--games must be at least 1")

    logging.basicConfig(level=get_log_level())

    rng = random.Random(args.seed)
    session = GameSession.load(path=args.scores_file, config=load_engine_config(), rng=rng)
    player = RandomPlayer(rng=random.Random(args.seed))

    result = run_session(
        session,
        player,
        max_ticks=args.ticks,
        max_games=args.games,
        realtime=args.realtime
    )

    if args.show_board:
        print(session.get_current_state().print_board())

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
