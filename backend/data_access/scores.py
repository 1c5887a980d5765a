"""
High score persistence functions.

These functions delegate to the ScoreRepository for actual file operations.
"""

from typing import Optional

from config import get_scores_path
from domain.score_history import ScoreHistory

from .repositories import ScoreRepository


def _repository(path: Optional[str]) -> ScoreRepository:
    return ScoreRepository(path or get_scores_path())


def load_score_history(path: Optional[str] = None) -> ScoreHistory:
    """
    Load the high score list.

    Args:
        path: Score file; defaults to the configured SNAKE_SCORES_PATH

    Returns:
        The stored ScoreHistory (empty if the file does not exist)
    """
    return _repository(path).load()


def save_score_history(history: ScoreHistory, path: Optional[str] = None) -> None:
    """
    Save the high score list.

    Args:
        history: The leaderboard to store
        path: Score file; defaults to the configured SNAKE_SCORES_PATH
    """
    _repository(path).save(history)
