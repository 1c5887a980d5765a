"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = game_state.snake
        head_x, head_y = snake_positions[0]
        current = game_state.direction

        # Filter out moves that:
        # 1. Reverse into the neck (the engine would drop them anyway)
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        candidates = sorted(VALID_MOVES - {current.reverse}, key=lambda d: d.value)
        valid_moves: List[Direction] = []
        for move in candidates:
            dx, dy = move.delta
            new_x, new_y = head_x + dx, head_y + dy

            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(valid_moves)
