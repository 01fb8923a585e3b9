"""
Game Configuration
===================
Grid size, pacing, spawn and collision tunables, plus the interior
bounds derived from them.
"""

import os
from dataclasses import dataclass


# =============================================================================
# CONSTANTS
# =============================================================================

GRID_WIDTH = 55
GRID_HEIGHT = 35
ENEMY_COUNT = 20
ENEMY_SPAWN_INTERVAL = 30  # frames between two spawns
FRAME_TIME = 0.033  # seconds per tick (~30 FPS)
PLAYER_STEP = 2
HIT_RADIUS = 2

# Sprite half-width (3x5 shapes anchored on their centre cell)
SPRITE_HALF_WIDTH = 2


@dataclass(frozen=True)
class GameConfig:
    """Tunables for one game session. Defaults reproduce the classic layout."""
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    enemy_count: int = ENEMY_COUNT
    enemy_spawn_interval: int = ENEMY_SPAWN_INTERVAL
    frame_time: float = FRAME_TIME
    player_step: int = PLAYER_STEP
    hit_radius: int = HIT_RADIUS
    enemy_speed_min: float = 0.2
    enemy_speed_max: float = 0.7
    spawn_height: int = 20  # enemies queue up to this many rows above the grid
    log_path: str = 'plane_war.log'
    title: str = 'Plane War'

    def __post_init__(self):
        if self.width < 12 or self.height < 12:
            raise ValueError(
                f'Grid too small: {self.width}x{self.height} (minimum 12x12)'
            )
        if self.enemy_count < 0:
            raise ValueError(f'enemy_count must be >= 0, got {self.enemy_count}')
        if self.enemy_spawn_interval <= 0:
            raise ValueError(
                f'enemy_spawn_interval must be > 0, got {self.enemy_spawn_interval}'
            )
        if self.frame_time < 0:
            raise ValueError(f'frame_time must be >= 0, got {self.frame_time}')
        if self.player_step <= 0:
            raise ValueError(f'player_step must be > 0, got {self.player_step}')
        if self.hit_radius < 0:
            raise ValueError(f'hit_radius must be >= 0, got {self.hit_radius}')
        if not 0 <= self.enemy_speed_min <= self.enemy_speed_max:
            raise ValueError(
                f'Bad enemy speed range: [{self.enemy_speed_min}, {self.enemy_speed_max}]'
            )
        if self.spawn_height < 1:
            raise ValueError(f'spawn_height must be >= 1, got {self.spawn_height}')

    @classmethod
    def from_env(cls, environ=None) -> 'GameConfig':
        """Build a config, applying PLANE_WAR_* overrides from the environment."""
        environ = os.environ if environ is None else environ
        overrides = {}
        if environ.get('PLANE_WAR_ENEMIES'):
            overrides['enemy_count'] = int(environ['PLANE_WAR_ENEMIES'])
        if environ.get('PLANE_WAR_LOG'):
            overrides['log_path'] = environ['PLANE_WAR_LOG']
        return cls(**overrides)

    # -------------------------------------------------------------------------
    # Player interior bounds
    # -------------------------------------------------------------------------

    @property
    def player_min_x(self) -> int:
        return SPRITE_HALF_WIDTH + 1

    @property
    def player_max_x(self) -> int:
        return self.width - 6

    @property
    def player_min_y(self) -> int:
        """Top margin keeps the sprite clear of the HUD row."""
        return 4

    @property
    def player_max_y(self) -> int:
        return self.height - 7

    @property
    def player_start(self):
        return self.width // 2, self.player_max_y

    # -------------------------------------------------------------------------
    # Playfield layout
    # -------------------------------------------------------------------------

    @property
    def hud_row(self) -> int:
        return 0

    @property
    def border_row(self) -> int:
        """Bottom wall, one row above the last grid row."""
        return self.height - 2

    @property
    def enemy_exit_row(self) -> int:
        return self.height - 1

    @property
    def projectile_top(self) -> int:
        return 1

    @property
    def spawn_x_range(self):
        return 2, self.width - 3

    def in_playfield(self, x: int, y: int) -> bool:
        """Interior rectangle used to clip projectile and enemy glyphs."""
        return 1 <= x < self.width - 1 and 1 <= y < self.border_row


DEFAULT_CONFIG = GameConfig()
