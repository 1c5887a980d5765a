"""
Repository pattern implementations for data access.

This module provides a clean abstraction over file operations
with atomic writes and error handling.
"""

from .base import BaseRepository
from .score_repository import ScoreRepository

__all__ = ['BaseRepository', 'ScoreRepository']
