"""
Exceptions raised by the Snake Arcade engine.

Losing a game is not an error; these only signal broken state.
"""


class SnakeEngineError(Exception):
    """Base class for engine errors."""


class InvariantViolation(SnakeEngineError):
    """Engine state broke an invariant (duplicate snake cells, food on the snake, ...)."""


class CorruptScoreHistoryError(InvariantViolation):
    """A persisted score list could not be used."""
