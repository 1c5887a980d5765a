"""
Host configuration for Snake Arcade.

Only the host process reads the environment; the engine itself takes an
EngineConfig. Values can be set in a .env file next to the process.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Callable, Dict, Optional, TypeVar

from dotenv import load_dotenv

from domain.constants import EngineConfig

load_dotenv()

T = TypeVar('T')

SCORES_PATH_ENV = 'SNAKE_SCORES_PATH'
LOG_LEVEL_ENV = 'SNAKE_LOG_LEVEL'

# environment variable -> (EngineConfig field, parser)
ENGINE_OVERRIDES: Dict[str, tuple] = {
    'SNAKE_BASE_INTERVAL_MS': ('base_interval_ms', int),
    'SNAKE_DIFFICULTY_CONSTANT': ('difficulty_constant', float),
    'SNAKE_SPAWN_PERIOD_SECONDS': ('spawn_period_seconds', float),
    'SNAKE_MAX_FOOD': ('max_food', int),
}


def get_scores_path() -> str:
    """
    Determine where the high score file lives.

    Returns:
        Path to the JSON score file.
        - SNAKE_SCORES_PATH if set
        - otherwise backend/snake_scores.json
    """
    configured = os.getenv(SCORES_PATH_ENV)
    if configured:
        return configured

    backend_dir = Path(__file__).parent
    return str(backend_dir / 'snake_scores.json')


def get_log_level() -> int:
    """Log level from SNAKE_LOG_LEVEL (a level name), INFO by default."""
    name = os.getenv(LOG_LEVEL_ENV, 'INFO').strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV}={name!r} is not a logging level name")
    return level


def _parse(env_name: str, parser: Callable[[str], T]) -> Optional[T]:
    raw = os.getenv(env_name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return parser(raw.strip())
    except ValueError as e:
        raise ValueError(f"Invalid value for {env_name}: {raw!r}") from e


def load_engine_config(base: Optional[EngineConfig] = None) -> EngineConfig:
    """
    Build an EngineConfig, applying any SNAKE_* tuning overrides found in
    the environment on top of `base` (defaults if omitted).
    """
    base = base or EngineConfig()
    overrides = {}
    for env_name, (field_name, parser) in ENGINE_OVERRIDES.items():
        value = _parse(env_name, parser)
        if value is not None:
            overrides[field_name] = value

    if not overrides:
        return base

    return replace(base, **overrides)
