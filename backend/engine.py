"""
Snake Arcade game engine.

Owns board state, the snake, food, direction and timing. A host calls
submit_direction() any number of times per frame and advance_tick() once per
elapsed tick interval, then reads get_current_state() to draw.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from domain.board import FoodGrid
from domain.constants import Direction, RIGHT, EngineConfig
from domain.errors import InvariantViolation
from domain.game_state import GameState
from domain.score_history import ScoreHistory
from domain.snake import Position, Snake

logger = logging.getLogger(__name__)


@dataclass
class EngineState:
    """
    Everything that is wiped when a game is lost.
    """
    snake: Snake
    food: FoodGrid
    previous_tail: Position
    tick_interval_ms: int
    direction: Direction = RIGHT
    pending_direction: Optional[Direction] = None
    tick: int = 1
    paused: bool = True
    last_final_score: Optional[int] = None

    @classmethod
    def initial(cls, config: EngineConfig) -> "EngineState":
        tail_x, y = config.start_position
        positions = [(tail_x + i, y) for i in reversed(range(config.start_length))]
        return cls(
            snake=Snake(positions),
            food=FoodGrid(config.width, config.height),
            previous_tail=(tail_x - 1, y),
            tick_interval_ms=config.initial_interval_ms,
        )


@dataclass
class TickOutcome:
    """What happened during one advance_tick()."""
    tick: int
    ate_food: bool = False
    lost: bool = False
    death_reason: Optional[str] = None   # 'wall' or 'self'
    final_score: Optional[int] = None
    food_placed: Optional[Position] = field(default=None, repr=False)


class SnakeEngine:
    """
    Manages:
      - Board (width, height) and food
      - The snake and its direction
      - Pause state
      - Tick interval (speeds up with score)
      - The high score list across games
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        scores: Optional[ScoreHistory] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or EngineConfig()
        self.scores = scores if scores is not None else ScoreHistory(capacity=self.config.max_high_scores)
        self.rng = rng or random.Random()
        self.state = EngineState.initial(self.config)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def score(self) -> int:
        return len(self.state.snake) - self.config.start_length

    @property
    def paused(self) -> bool:
        return self.state.paused

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        state = self.state
        return GameState(
            tick=state.tick,
            snake=list(state.snake),
            food=sorted(state.food),
            score=self.score,
            paused=state.paused,
            direction=state.direction,
            pending_direction=state.pending_direction,
            previous_tail=state.previous_tail,
            tick_interval_ms=state.tick_interval_ms,
            last_final_score=state.last_final_score,
            high_scores=self.scores.to_list(),
            width=self.config.width,
            height=self.config.height
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle_pause(self) -> None:
        self.state.paused = not self.state.paused

    def submit_direction(self, direction: Direction) -> bool:
        """
        Queue a direction for the next tick. Returns False if it was ignored
        (engine paused, or a reversal of the current direction).
        """
        state = self.state
        if state.paused:
            logger.debug(f"Ignoring {direction.value}: engine is paused")
            return False
        if direction == state.direction.reverse:
            logger.debug(f"Ignoring {direction.value}: reverses {state.direction.value}")
            return False
        state.pending_direction = direction
        return True

    def reset(self) -> None:
        """Start over from the initial state without recording a score."""
        self.state = EngineState.initial(self.config)

    def advance_tick(self) -> Optional[TickOutcome]:
        """
        Execute one tick:
          1) Commit the pending direction
          2) Recompute the tick interval from the score
          3) Move the head, losing on a wall
          4) Eat (keep the tail) or move on (drop the tail)
          5) Lose on self-collision
          6) Maybe spawn food

        Returns None while paused.
        """
        state = self.state
        if state.paused:
            return None

        if state.pending_direction is not None:
            state.direction = state.pending_direction
            state.pending_direction = None

        score = self.score
        state.tick_interval_ms = self.config.interval_for_score(score)

        hx, hy = state.snake.head
        dx, dy = state.direction.delta
        new_head = (hx + dx, hy + dy)

        if not self.config.in_bounds(new_head):
            return self._lost("wall", score)

        state.previous_tail = state.snake.tail

        ate_food = new_head in state.food
        if ate_food:
            state.food.remove(new_head)
        else:
            # the tail moves out of the way before the collision check
            state.snake.pop_tail()

        if new_head in state.snake:
            return self._lost("self", score)

        state.snake.push_head(new_head)

        placed = self._maybe_spawn_food()

        outcome = TickOutcome(tick=state.tick, ate_food=ate_food, food_placed=placed)
        state.tick += 1

        self._check_invariants()
        return outcome

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _maybe_spawn_food(self) -> Optional[Position]:
        state = self.state
        food_count = len(state.food)
        if food_count == 0:
            should_spawn = True
        elif food_count < self.config.max_food:
            chance = (state.tick_interval_ms / 1000.0) / self.config.spawn_period_seconds
            should_spawn = self.rng.random() < chance
        else:
            should_spawn = False

        if not should_spawn:
            return None

        options = state.food.free_cells(set(state.snake))
        if not options:
            logger.debug("No free cell for food, skipping spawn")
            return None

        cell = self.rng.choice(options)
        state.food.place(cell)
        logger.debug(f"Placed food at {cell} ({len(state.food)} on board)")
        return cell

    def _lost(self, reason: str, score: int) -> TickOutcome:
        """Record `score` (taken before the tick touched the snake) and start over."""
        tick = self.state.tick
        made_board = self.scores.record(score)
        logger.info(
            f"Game over: {reason} at tick {tick}, score {score}"
            + (" (new high score entry)" if made_board else "")
        )

        self.state = EngineState.initial(self.config)
        self.state.last_final_score = score

        return TickOutcome(tick=tick, lost=True, death_reason=reason, final_score=score)

    def _check_invariants(self) -> None:
        state = self.state
        state.snake.check_invariants(self.config.width, self.config.height)
        for cell in state.food:
            if cell in state.snake:
                raise InvariantViolation(f"Food at {cell} overlaps the snake")
        if len(state.food) > self.config.max_food:
            raise InvariantViolation(
                f"{len(state.food)} food cells exceed the maximum of {self.config.max_food}"
            )
