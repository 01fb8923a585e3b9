#!/usr/bin/env python3
"""
PLANE WAR - Terminal Shoot-'em-up
==================================
Fly a plane up and down the screen and shoot the descending enemies.
Each hit scores a point; being rammed costs one. Lose every point you
earned, or let the last wave pass, and the game is over.

Controls:
    WASD           - Move
    SPACE          - Fire
"""

import logging
import os
import random
import sys
import time
from typing import Callable, List, Optional, Union

from .components import Intent, Score
from .config import GameConfig
from .engine import DoubleBuffer
from .enemies import Enemy
from .log import setup_logging
from .player import InputHandler, Player
from .projectiles import Projectile, projectile_system, spawn_projectile
from .spawner import SpawnQueue
from .systems import collision_system, enemy_system, render_system
from .terminal import KeyboardSource, Terminal, TerminalDisplay, TerminalTooSmall


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Game phases
PHASE_RUNNING = 'running'
PHASE_OVER = 'over'

# How long the end screen waits for a key before the terminal is restored
GAME_OVER_HOLD = 30.0

GAME_OVER_TITLE = 'GAME OVER!'
EXIT_PROMPT = 'press any key to exit'


# =============================================================================
# UI RENDERING
# =============================================================================

def render_ui(buffer: DoubleBuffer, config: GameConfig, score: Score):
    """Score readout at the left end of the HUD row."""
    buffer.draw_string(0, config.hud_row, f'Score:{score.value}')


def render_border(buffer: DoubleBuffer, config: GameConfig):
    """Side walls from row 1 down to the floor, and the floor itself."""
    floor = config.border_row
    for x in range(config.width):
        buffer.draw(x, floor, '#')
    for y in range(1, config.height - 1):
        buffer.draw(0, y, '#')
        buffer.draw(config.width - 1, y, '#')


def game_over_text(score: Score) -> str:
    """
    End-of-game score line.

    A depleted score and a never-positive one read the same; the
    ``ever_scored`` flag only matters for deciding when the game ends.
    """
    return f'final score: {score.value}'


def render_game_over_screen(buffer: DoubleBuffer, config: GameConfig, score: Score,
                            prompt: bool = True):
    """Centered end-of-game message on an otherwise blank grid."""
    lines = [GAME_OVER_TITLE, game_over_text(score)]
    if prompt:
        lines.extend(['', EXIT_PROMPT])

    y = config.height // 2 - 1
    for i, line in enumerate(lines):
        x = (config.width - len(line)) // 2
        buffer.draw_string(x, y + i, line)


# =============================================================================
# GAME STATE
# =============================================================================

class GameState:
    """
    Central game state: entities, score, buffers and the phase machine.

    ``display`` receives changed cells each frame; ``keyboard`` is polled
    until it returns None. ``clock`` and ``sleep`` drive frame pacing.
    """

    def __init__(
        self,
        display,
        keyboard,
        config: Optional[GameConfig] = None,
        rng: Union[random.Random, int, None] = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or GameConfig()
        if not isinstance(rng, random.Random):
            rng = random.Random(rng)
        self.rng = rng

        self.display = display
        self.keyboard = keyboard
        self.clock = clock
        self.sleep = sleep

        self.buffer = DoubleBuffer(self.config.width, self.config.height)
        self.input_handler = InputHandler()

        self.phase = PHASE_RUNNING
        self.over_reason: Optional[str] = None
        self.frame_count = 0

        self.player = Player(self.config)
        self.enemies: List[Enemy] = []
        self.projectiles: List[Projectile] = []
        self.launched: List[Projectile] = []
        self.spawn_queue = SpawnQueue.create(self.config, self.rng)
        self.score = Score()

        logger.info(
            'New game: grid %dx%d, %d enemies every %d frames',
            self.config.width, self.config.height,
            self.spawn_queue.total, self.config.enemy_spawn_interval,
        )

    @property
    def running(self) -> bool:
        return self.phase == PHASE_RUNNING

    def end_game(self, reason: str):
        """Move to the terminal phase. Later calls keep the first reason."""
        if self.phase == PHASE_OVER:
            return
        self.phase = PHASE_OVER
        self.over_reason = reason
        logger.info('Game over (%s) on frame %d, score %d',
                    reason, self.frame_count, self.score.value)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def drain_keys(self) -> List:
        """Pull every pending key from the keyboard source."""
        keys = []
        key = self.keyboard.poll()
        while key is not None:
            keys.append(key)
            key = self.keyboard.poll()
        return keys

    def handle_input(self):
        """Apply all pending intents in arrival order."""
        for intent in self.input_handler.map_keys(self.drain_keys()):
            self.apply_intent(intent)

    def apply_intent(self, intent: Intent):
        if intent is Intent.FIRE:
            self.launched.append(spawn_projectile(self.player.muzzle()))
        else:
            self.player.move(intent)

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def update(self):
        """Spawn, move, collide and check for a cleared field."""
        cfg = self.config

        enemy = self.spawn_queue.release(self.frame_count)
        if enemy is not None:
            self.enemies.append(enemy)

        self.projectiles = projectile_system(self.projectiles, cfg.projectile_top)
        self.enemies = enemy_system(self.enemies, cfg.enemy_exit_row)

        # Shots fired this tick join after movement, at their muzzle row
        self.projectiles.extend(self.launched)
        self.launched = []

        events = collision_system(
            self.player, self.projectiles, self.enemies, self.score, cfg.hit_radius
        )
        for event in events:
            if event['type'] == 'hit':
                logger.info('Hit enemy at (%d, %d), score %d',
                            event['x'], event['y'], event['score'])
            elif event['type'] == 'player_hit':
                logger.info('Player rammed at (%d, %d), score %d',
                            event['x'], event['y'], event['score'])
                if event['depleted']:
                    self.end_game('player_hit')

        if self.spawn_queue.empty and not self.enemies:
            self.end_game('cleared')

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def begin_frame(self):
        self.buffer.clear()
        render_ui(self.buffer, self.config, self.score)
        render_border(self.buffer, self.config)

    def end_frame(self) -> int:
        render_system(
            self.buffer, self.config, self.player, self.projectiles, self.enemies
        )
        return self.present()

    def present(self) -> int:
        writes = self.buffer.present(self.display)
        flush = getattr(self.display, 'flush', None)
        if flush is not None:
            flush()
        return writes

    def render_game_over(self, prompt: bool = True) -> int:
        """Draw the final screen once."""
        self.buffer.clear()
        render_game_over_screen(self.buffer, self.config, self.score, prompt)
        logger.info('Final score: %d', self.score.value)
        return self.present()

    # -------------------------------------------------------------------------
    # Loop
    # -------------------------------------------------------------------------

    def tick(self):
        """One frame: input, simulation, draw, present, pace."""
        frame_start = self.clock()

        self.begin_frame()
        self.handle_input()
        if self.running:
            self.update()
        self.end_frame()

        self.frame_count += 1
        self.pace(frame_start)

    def pace(self, frame_start: float):
        """Sleep off whatever is left of the frame budget."""
        elapsed = self.clock() - frame_start
        remaining = self.config.frame_time - elapsed
        if remaining > 0:
            self.sleep(remaining)

    def run(self, prompt: bool = True) -> int:
        """Play until the game ends, show the final screen, return the score."""
        while self.running:
            self.tick()
        self.render_game_over(prompt)
        return self.score.value


# =============================================================================
# MAIN LOOP
# =============================================================================

def _seed_from_env(environ=None) -> Optional[int]:
    environ = os.environ if environ is None else environ
    seed = environ.get('PLANE_WAR_SEED')
    return int(seed) if seed else None


def main():
    """Entry point. Sets up the terminal and runs the game."""
    config = GameConfig.from_env()
    setup_logging(config.log_path)
    seed = _seed_from_env()
    logger.info('Starting Plane War (seed=%s)', seed)

    term = Terminal()
    display = TerminalDisplay(term, config.width, config.height, config.title)
    keyboard = KeyboardSource(term)

    display.configure()
    try:
        display.check_size()
    except TerminalTooSmall as e:
        logger.error('%s', e)
        print(e)
        sys.exit(1)

    try:
        with display.session():
            game = GameState(display, keyboard, config, rng=seed)
            game.run()
            keyboard.wait(GAME_OVER_HOLD)
    except Exception:
        logger.exception('Unhandled exception during game execution')
        raise
    finally:
        logger.info('Game shutting down.')


if __name__ == '__main__':
    main()
