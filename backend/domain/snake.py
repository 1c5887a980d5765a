"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List, Tuple

from .errors import InvariantViolation

Position = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Position]):
        if not positions:
            raise ValueError("A snake needs at least one position.")
        self.positions = deque(positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def push_head(self, position: Position) -> None:
        self.positions.appendleft(position)

    def pop_tail(self) -> Position:
        return self.positions.pop()

    def check_invariants(self, width: int, height: int) -> None:
        """Raise InvariantViolation if the body overlaps itself or leaves the board."""
        if len(set(self.positions)) != len(self.positions):
            raise InvariantViolation(f"Snake body has duplicate cells: {list(self.positions)}")
        for x, y in self.positions:
            if not (0 <= x < width and 0 <= y < height):
                raise InvariantViolation(f"Snake cell {(x, y)} is outside the {width}x{height} board")

    def __contains__(self, position: object) -> bool:
        return position in self.positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)}>"
