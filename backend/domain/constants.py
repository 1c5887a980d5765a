"""
Game constants for Snake Arcade.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Movement directions. Screen coordinates: y grows downward."""

    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def reverse(self) -> "Direction":
        return _REVERSES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_REVERSES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}

UP = Direction.UP
RIGHT = Direction.RIGHT
DOWN = Direction.DOWN
LEFT = Direction.LEFT
VALID_MOVES = {UP, RIGHT, DOWN, LEFT}

# Board
WIDTH = 40
HEIGHT = 20

# Snake
START_LENGTH = 3
START_POSITION = (2, 3)  # tail cell of the initial snake

# Timing (milliseconds)
INITIAL_INTERVAL_MS = 100
BASE_INTERVAL_MS = 200
DIFFICULTY_CONSTANT = 20

# Food
MAX_FOOD = 10
SPAWN_PERIOD_SECONDS = 3.0

# Leaderboard
MAX_HIGH_SCORES = 10


@dataclass(frozen=True)
class EngineConfig:
    """
    Tuning values for the engine.

    The speed curve and spawn rate are feel parameters, not contracts:
        interval_ms = base_interval_ms * (difficulty_constant / (score + difficulty_constant))
        spawn chance per tick = interval_seconds / spawn_period_seconds
    """

    width: int = WIDTH
    height: int = HEIGHT
    start_length: int = START_LENGTH
    start_position: Tuple[int, int] = START_POSITION
    initial_interval_ms: int = INITIAL_INTERVAL_MS
    base_interval_ms: int = BASE_INTERVAL_MS
    difficulty_constant: float = DIFFICULTY_CONSTANT
    max_food: int = MAX_FOOD
    spawn_period_seconds: float = SPAWN_PERIOD_SECONDS
    max_high_scores: int = MAX_HIGH_SCORES

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.width}x{self.height}.")
        if self.start_length < 2:
            raise ValueError(f"start_length must be at least 2, got {self.start_length}.")
        tail_x, tail_y = self.start_position
        if not (0 <= tail_x and tail_x + self.start_length - 1 < self.width
                and 0 <= tail_y < self.height):
            raise ValueError(
                f"Starting snake at {self.start_position} with length "
                f"{self.start_length} does not fit on a {self.width}x{self.height} board."
            )
        if self.base_interval_ms <= 0 or self.initial_interval_ms <= 0:
            raise ValueError("Tick intervals must be positive.")
        if self.difficulty_constant <= 0:
            raise ValueError(f"difficulty_constant must be positive, got {self.difficulty_constant}.")
        if self.max_food < 1:
            raise ValueError(f"max_food must be at least 1, got {self.max_food}.")
        if self.spawn_period_seconds <= 0:
            raise ValueError(f"spawn_period_seconds must be positive, got {self.spawn_period_seconds}.")
        if self.max_high_scores < 1:
            raise ValueError(f"max_high_scores must be at least 1, got {self.max_high_scores}.")

    def interval_for_score(self, score: int) -> int:
        """Tick interval in whole milliseconds for the given score."""
        k = self.difficulty_constant
        return int(self.base_interval_ms * (k / (score + k)))

    def in_bounds(self, position: Tuple[int, int]) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height
