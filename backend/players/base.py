"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state and decides which direction
    to submit before the next tick.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None to keep going straight
        """
        raise NotImplementedError
