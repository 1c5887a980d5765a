"""
ScoreHistory - the top-N leaderboard that outlives individual games.
"""

from typing import Iterable, List

from .constants import MAX_HIGH_SCORES
from .errors import CorruptScoreHistoryError


class ScoreHistory:
    """
    Past final scores, highest first, capped at `capacity` entries.

    Equal scores keep insertion order (an older score stays ahead of a newer
    one with the same value).
    """

    def __init__(self, scores: Iterable[int] = (), capacity: int = MAX_HIGH_SCORES):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}.")
        self.capacity = capacity
        self._scores: List[int] = []
        for score in scores:
            self.record(score)

    @classmethod
    def from_list(cls, scores: List[int], capacity: int = MAX_HIGH_SCORES) -> "ScoreHistory":
        """
        Rebuild a history from a persisted list, refusing anything that could
        not have been produced by `record`.
        """
        if not isinstance(scores, list):
            raise CorruptScoreHistoryError(f"Expected a list of scores, got {type(scores).__name__}")
        if len(scores) > capacity:
            raise CorruptScoreHistoryError(
                f"Score list has {len(scores)} entries, more than the {capacity} allowed"
            )
        for score in scores:
            # bool is an int subclass but never a valid score
            if isinstance(score, bool) or not isinstance(score, int) or score <= 0:
                raise CorruptScoreHistoryError(f"Invalid score entry: {score!r}")
        if any(a < b for a, b in zip(scores, scores[1:])):
            raise CorruptScoreHistoryError(f"Score list is not sorted descending: {scores}")

        history = cls(capacity=capacity)
        history._scores = list(scores)
        return history

    def record(self, score: int) -> bool:
        """
        Add a final score. Returns True if it made the leaderboard.

        Only positive scores are kept.
        """
        if score <= 0:
            return False
        # a score tied with a full board's lowest entry sorts after it and is cut
        made_it = len(self._scores) < self.capacity or score > self._scores[-1]
        self._scores.append(score)
        # sorted() is stable, so equal scores keep insertion order
        self._scores = sorted(self._scores, key=lambda s: -s)[:self.capacity]
        return made_it

    def to_list(self) -> List[int]:
        return list(self._scores)

    @property
    def best(self) -> int:
        return self._scores[0] if self._scores else 0

    def __iter__(self):
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScoreHistory):
            return NotImplemented
        return self._scores == other._scores

    def __repr__(self):
        return f"<ScoreHistory {self._scores}>"
