"""
Spawn Queue
============
The whole session's enemies are rolled up front and released one at a
time on a fixed frame cadence. The queue never grows after creation.
"""

import logging
import random
from collections import deque
from typing import Deque, List, Optional

from .components import SpawnDescriptor
from .config import GameConfig
from .enemies import Enemy


logger = logging.getLogger(__name__)


def roll_spawns(config: GameConfig, rng: random.Random) -> List[SpawnDescriptor]:
    """
    Roll ``config.enemy_count`` spawn descriptors.

    Columns are uniform over the interior width, start rows uniform over
    the band above the visible grid, speeds uniform over the configured range.
    """
    min_x, max_x = config.spawn_x_range
    descriptors = []
    for _ in range(config.enemy_count):
        x = rng.randint(min_x, max_x)
        y = rng.randint(-config.spawn_height, -1)
        speed = rng.uniform(config.enemy_speed_min, config.enemy_speed_max)
        descriptors.append(SpawnDescriptor(x, y, speed))
    return descriptors


class SpawnQueue:
    """Fixed backlog of pending enemies, drained front to back."""

    def __init__(self, descriptors: List[SpawnDescriptor], interval: int):
        self._pending: Deque[SpawnDescriptor] = deque(descriptors)
        self.interval = interval
        self.total = len(self._pending)

    @classmethod
    def create(cls, config: GameConfig, rng: random.Random) -> 'SpawnQueue':
        return cls(roll_spawns(config, rng), config.enemy_spawn_interval)

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def empty(self) -> bool:
        return not self._pending

    def clear(self) -> None:
        self._pending.clear()

    def release(self, frame: int) -> Optional[Enemy]:
        """
        Return the next enemy if ``frame`` is on the cadence and any remain.

        At most one enemy is released per call.
        """
        if frame % self.interval != 0 or not self._pending:
            return None
        enemy = Enemy.from_descriptor(self._pending.popleft())
        logger.debug('Spawned %r on frame %d (%d pending)', enemy, frame, len(self._pending))
        return enemy
