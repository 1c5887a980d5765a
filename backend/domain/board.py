"""
Food grid for the game engine.
"""

from typing import Container, Iterator, List, Set, Tuple

Position = Tuple[int, int]


class FoodGrid:
    """
    The cells currently holding food.

    Stored as a set of (x, y) rather than a 2D array so that listing free
    cells and counting food stay cheap.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells: Set[Position] = set()

    def place(self, position: Position) -> None:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Food out of bounds at {position}.")
        self._cells.add(position)

    def remove(self, position: Position) -> None:
        self._cells.discard(position)

    def free_cells(self, occupied: Container[Position]) -> List[Position]:
        """
        Cells holding neither food nor anything in `occupied`, in row-major order.
        """
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in self._cells and (x, y) not in occupied
        ]

    def __contains__(self, position: object) -> bool:
        return position in self._cells

    def __iter__(self) -> Iterator[Position]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)
