"""
Data access layer for Snake Arcade.

The only state that survives a process restart is the high score list.
"""

from .scores import load_score_history, save_score_history
from .repositories import ScoreRepository

__all__ = [
    'load_score_history',
    'save_score_history',
    'ScoreRepository',
]
