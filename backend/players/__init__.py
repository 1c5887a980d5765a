"""
Player implementations for Snake Arcade.

This module contains the things that steer the snake: an autopilot and
the keyboard binding table a host uses to forward key presses.
"""

from .base import Player
from .random_player import RandomPlayer
from .keyboard import KeyBindings, dispatch_keys

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyBindings',
    'dispatch_keys',
]
