"""
Domain entities for the Snake Arcade engine.

This module contains the core game entities that are independent of
infrastructure concerns (files, clocks, input devices).
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    WIDTH, HEIGHT, START_LENGTH, EngineConfig,
)
from .errors import SnakeEngineError, InvariantViolation, CorruptScoreHistoryError
from .snake import Snake
from .board import FoodGrid
from .score_history import ScoreHistory
from .game_state import GameState

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'WIDTH', 'HEIGHT', 'START_LENGTH', 'EngineConfig',
    'SnakeEngineError', 'InvariantViolation', 'CorruptScoreHistoryError',
    'Snake',
    'FoodGrid',
    'ScoreHistory',
    'GameState',
]
