"""
Score repository for persisting the high score list.
"""

import json
import logging
from typing import Any

from domain.constants import MAX_HIGH_SCORES
from domain.errors import CorruptScoreHistoryError
from domain.score_history import ScoreHistory

from .base import BaseRepository

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class ScoreRepository(BaseRepository):
    """
    Repository for the JSON score file:

        {"version": 1, "scores": [12, 9, 9, 4]}
    """

    def __init__(self, path: str, capacity: int = MAX_HIGH_SCORES):
        super().__init__(path)
        self.capacity = capacity

    def load(self) -> ScoreHistory:
        """
        Load the score history.

        Returns:
            The stored history, or an empty one if no file exists yet.

        Raises:
            CorruptScoreHistoryError: If the file cannot be parsed or holds
                a list that could not have been recorded.
        """
        if not self.exists():
            logger.info(f"No score file at {self.path}, starting with an empty leaderboard")
            return ScoreHistory(capacity=self.capacity)

        try:
            with self.reader() as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Score file {self.path} is not valid JSON: {e}")
            raise CorruptScoreHistoryError(f"Unreadable score file {self.path}: {e}") from e

        scores = self._extract_scores(data)
        history = ScoreHistory.from_list(scores, capacity=self.capacity)
        logger.info(f"Loaded {len(history)} high scores from {self.path}")
        return history

    def save(self, history: ScoreHistory) -> None:
        """
        Save the score history, replacing the file atomically.

        Args:
            history: The leaderboard to store
        """
        data = {"version": FORMAT_VERSION, "scores": history.to_list()}
        with self.writer() as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved {len(history)} high scores to {self.path}")

    def _extract_scores(self, data: Any) -> Any:
        if not isinstance(data, dict):
            logger.error(f"Score file {self.path} does not hold a JSON object")
            raise CorruptScoreHistoryError(f"Score file {self.path} does not hold a JSON object")
        if data.get("version") != FORMAT_VERSION:
            logger.error(f"Score file {self.path} has unsupported version {data.get('version')!r}")
            raise CorruptScoreHistoryError(
                f"Unsupported score file version {data.get('version')!r} in {self.path}"
            )
        if "scores" not in data:
            logger.error(f"Score file {self.path} has no 'scores' entry")
            raise CorruptScoreHistoryError(f"Score file {self.path} has no 'scores' entry")
        return data["scores"]
