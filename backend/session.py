"""
GameSession - the top-level application object.

Bundles the engine with the high score list it records into, and gives the
host explicit load/save hooks for the process boundary.
"""

import logging
import random
from typing import Optional

from config import get_scores_path
from data_access.repositories import ScoreRepository
from domain.constants import EngineConfig
from domain.errors import CorruptScoreHistoryError
from domain.game_state import GameState
from domain.score_history import ScoreHistory
from engine import SnakeEngine

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, engine: SnakeEngine, repository: ScoreRepository):
        self.engine = engine
        self.repository = repository

    @classmethod
    def load(
        cls,
        path: Optional[str] = None,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None
    ) -> "GameSession":
        """
        Create a session whose leaderboard is read from `path`.

        A corrupt score file is logged and replaced by an empty leaderboard;
        the next save() overwrites it.
        """
        config = config or EngineConfig()
        repository = ScoreRepository(path or get_scores_path(), capacity=config.max_high_scores)
        try:
            scores = repository.load()
        except CorruptScoreHistoryError as e:
            logger.warning(f"Discarding unusable high scores: {e}")
            scores = ScoreHistory(capacity=config.max_high_scores)

        engine = SnakeEngine(config=config, scores=scores, rng=rng)
        return cls(engine, repository)

    @property
    def scores(self) -> ScoreHistory:
        return self.engine.scores

    def save(self) -> None:
        self.repository.save(self.engine.scores)

    def get_current_state(self) -> GameState:
        return self.engine.get_current_state()
