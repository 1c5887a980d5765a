"""
Key bindings - translate pressed key names into engine calls.

Device polling lives in the host; this module only knows key names.
Three groups of bindings exist (arrow keys, WASD, vim keys). Within a group
the first pressed key in the order up, right, down, left wins; the groups
are then submitted in order, so with several groups pressed in the same frame
the last one the engine accepts becomes the pending direction.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from domain.constants import Direction, UP, RIGHT, DOWN, LEFT
from engine import SnakeEngine

PAUSE_KEY = "Space"

ARROW_KEYS: Tuple[Tuple[str, Direction], ...] = (
    ("ArrowUp", UP), ("ArrowRight", RIGHT), ("ArrowDown", DOWN), ("ArrowLeft", LEFT),
)
WASD_KEYS: Tuple[Tuple[str, Direction], ...] = (
    ("W", UP), ("D", RIGHT), ("S", DOWN), ("A", LEFT),
)
VIM_KEYS: Tuple[Tuple[str, Direction], ...] = (
    ("K", UP), ("L", RIGHT), ("J", DOWN), ("H", LEFT),
)

DEFAULT_GROUPS = (ARROW_KEYS, WASD_KEYS, VIM_KEYS)


class KeyBindings:
    def __init__(self, groups=DEFAULT_GROUPS, pause_key: str = PAUSE_KEY):
        self.groups = groups
        self.pause_key = pause_key

    @property
    def key_map(self) -> Dict[str, Direction]:
        """Every bound key name and the direction it stands for."""
        return {key: direction for group in self.groups for key, direction in group}

    def directions_for(self, pressed: Iterable[str]) -> List[Direction]:
        """
        Directions to submit for one frame, at most one per group, in group order.
        Key names are matched case-insensitively.
        """
        pressed = {key.lower() for key in pressed}
        directions = []
        for group in self.groups:
            for key, direction in group:
                if key.lower() in pressed:
                    directions.append(direction)
                    break
        return directions

    def pause_pressed(self, pressed: Iterable[str]) -> bool:
        return any(key.lower() == self.pause_key.lower() for key in pressed)


def dispatch_keys(
    engine: SnakeEngine,
    pressed: Iterable[str],
    bindings: Optional[KeyBindings] = None
) -> None:
    """
    Apply one frame of key presses to the engine: pause toggles first, then
    directions (only while running).
    """
    bindings = bindings or KeyBindings()
    pressed = list(pressed)

    if bindings.pause_pressed(pressed):
        engine.toggle_pause()

    if engine.paused:
        return

    for direction in bindings.directions_for(pressed):
        engine.submit_direction(direction)
