"""
GameState entity - a read-only snapshot of the engine for renderers.
"""

from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction

Position = Tuple[int, int]


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: tick counter (starts at 1)
        snake: list of (x, y), head first
        food: sorted list of (x, y) food cells
        score: snake length minus the starting length
        paused: whether the engine is paused
        direction: current direction
        pending_direction: direction queued for the next tick, if any
        previous_tail: tail cell before the last move, for interpolation
        tick_interval_ms: current tick interval in milliseconds
        last_final_score: score of the last lost game, if any
        high_scores: leaderboard, highest first
        width, height: board dimensions
    """

    def __init__(
        self,
        tick: int,
        snake: List[Position],
        food: List[Position],
        score: int,
        paused: bool,
        direction: Direction,
        pending_direction: Optional[Direction],
        previous_tail: Position,
        tick_interval_ms: int,
        last_final_score: Optional[int],
        high_scores: List[int],
        width: int,
        height: int
    ):
        self.tick = tick
        self.snake = snake
        self.food = food
        self.score = score
        self.paused = paused
        self.direction = direction
        self.pending_direction = pending_direction
        self.previous_tail = previous_tail
        self.tick_interval_ms = tick_interval_ms
        self.last_final_score = last_final_score
        self.high_scores = high_scores
        self.width = width
        self.height = height

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def previous_head(self) -> Position:
        """Where the head was one tick ago (the neck)."""
        return self.snake[1]

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for fx, fy in self.food:
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        return "\n".join(f"{y:2d} {' '.join(board[y])}" for y in range(self.height))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "tick": self.tick,
            "snake": [list(p) for p in self.snake],
            "food": [list(p) for p in self.food],
            "score": self.score,
            "paused": self.paused,
            "direction": self.direction.value,
            "pending_direction": self.pending_direction.value if self.pending_direction else None,
            "previous_tail": list(self.previous_tail),
            "tick_interval_ms": self.tick_interval_ms,
            "last_final_score": self.last_final_score,
            "high_scores": list(self.high_scores),
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, score={self.score}, "
            f"paused={self.paused}, food={len(self.food)}>"
        )
