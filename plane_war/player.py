"""
Player Module
==============
The player's plane and keyboard-to-intent mapping.
"""

import logging
from typing import Iterable, Iterator, Optional

from .components import Position, Shape, PLAYER_SHAPE, Intent, MOVE_DELTAS
from .config import GameConfig


logger = logging.getLogger(__name__)


class Player:
    """The single player plane. Repositioned by intents, never destroyed."""

    def __init__(self, config: GameConfig):
        self.config = config
        x, y = config.player_start
        self.position = Position(x, y)
        self.shape: Shape = PLAYER_SHAPE

    def move(self, intent: Intent) -> None:
        """
        Step in the intent's direction, clamped to the interior bounds.

        Non-movement intents are ignored.
        """
        delta = MOVE_DELTAS.get(intent)
        if delta is None:
            return
        cfg = self.config
        step = cfg.player_step
        pos = self.position
        pos.x = max(cfg.player_min_x, min(cfg.player_max_x, pos.x + delta[0] * step))
        pos.y = max(cfg.player_min_y, min(cfg.player_max_y, pos.y + delta[1] * step))

    def muzzle(self) -> Position:
        """Where a fired projectile starts: one row above the anchor."""
        return Position(self.position.x, self.position.y - 1)


# =============================================================================
# INPUT MAPPING
# =============================================================================

# Only the lowercase letters and a plain space are recognized
KEY_INTENTS = {
    'w': Intent.UP,
    's': Intent.DOWN,
    'a': Intent.LEFT,
    'd': Intent.RIGHT,
    ' ': Intent.FIRE,
}


class InputHandler:
    """
    Translates raw key codes into intents.

    Accepts blessed keystrokes as well as plain one-character strings.
    Escape sequences (arrows, function keys) are never recognized.
    """

    def map_key(self, key) -> Optional[Intent]:
        """Return the intent for a key, or None for unrecognized keys."""
        if key is None or not key:
            return None

        if getattr(key, 'is_sequence', False):
            return None

        return KEY_INTENTS.get(str(key))

    def map_keys(self, keys: Iterable) -> Iterator[Intent]:
        """Map keys in arrival order, dropping unrecognized ones."""
        for key in keys:
            intent = self.map_key(key)
            if intent is None:
                logger.debug('Ignoring key %r', key)
                continue
            yield intent
