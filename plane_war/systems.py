"""
Game Systems
=============
Per-tick movement, collision and scoring, and entity rendering.
Systems work on the lists the game state owns; entities never hold
references to each other.
"""

from typing import List

from .components import Position, Score, shape_cells
from .config import GameConfig
from .engine import DoubleBuffer
from .enemies import Enemy
from .player import Player
from .projectiles import Projectile, PROJECTILE_CHAR


# =============================================================================
# MOVEMENT
# =============================================================================

def enemy_system(enemies: List[Enemy], exit_row: int) -> List[Enemy]:
    """Descend every enemy and return those still above the exit row."""
    survivors = []
    for enemy in enemies:
        enemy.update()
        if not enemy.is_off_screen(exit_row):
            survivors.append(enemy)
    return survivors


# =============================================================================
# COLLISION & SCORING
# =============================================================================

def within_reach(a: Position, b: Position, radius: int) -> bool:
    """Chebyshev proximity: both axis deltas within ``radius``."""
    return abs(a.x - b.x) <= radius and abs(a.y - b.y) <= radius


def projectile_hit_system(
    projectiles: List[Projectile],
    enemies: List[Enemy],
    score: Score,
    radius: int,
) -> List[dict]:
    """
    Resolve projectile/enemy hits in place.

    Each projectile takes out at most one enemy: the first live one in
    list order that is within reach. Both are removed and the score goes up.
    """
    events = []
    survivors = []
    for proj in projectiles:
        target = None
        for enemy in enemies:
            if within_reach(proj.position, enemy.position, radius):
                target = enemy
                break

        if target is None:
            survivors.append(proj)
            continue

        enemies.remove(target)
        score.value += 1
        score.ever_scored = True
        events.append({
            'type': 'hit',
            'x': target.position.x,
            'y': target.position.y,
            'score': score.value,
        })

    projectiles[:] = survivors
    return events


def player_collision_system(
    player: Player,
    enemies: List[Enemy],
    score: Score,
    radius: int,
) -> List[dict]:
    """
    Resolve enemies ramming the player, in place.

    The enemy is always removed. A point is lost only while the score is
    positive; losing the last point after having scored marks the event
    as ``depleted``, which ends the game.
    """
    events = []
    survivors = []
    for enemy in enemies:
        if not within_reach(player.position, enemy.position, radius):
            survivors.append(enemy)
            continue

        depleted = False
        if score.value > 0:
            score.value -= 1
            depleted = score.value == 0 and score.ever_scored
        events.append({
            'type': 'player_hit',
            'x': enemy.position.x,
            'y': enemy.position.y,
            'score': score.value,
            'depleted': depleted,
        })

    enemies[:] = survivors
    return events


def collision_system(
    player: Player,
    projectiles: List[Projectile],
    enemies: List[Enemy],
    score: Score,
    radius: int,
) -> List[dict]:
    """Run projectile hits first, then player collisions. Returns all events."""
    events = projectile_hit_system(projectiles, enemies, score, radius)
    events.extend(player_collision_system(player, enemies, score, radius))
    return events


# =============================================================================
# RENDERING
# =============================================================================

def render_system(
    buffer: DoubleBuffer,
    config: GameConfig,
    player: Player,
    projectiles: List[Projectile],
    enemies: List[Enemy],
):
    """
    Draw entities into the back buffer.

    Fixed layering: projectiles, then enemies, then the player on top.
    Projectile and enemy glyphs are clipped to the playfield so they
    never overwrite the walls; the player is only clipped by the grid.
    """
    for proj in projectiles:
        pos = proj.position
        if config.in_playfield(pos.x, pos.y):
            buffer.draw(pos.x, pos.y, PROJECTILE_CHAR)

    for enemy in enemies:
        for x, y, char in shape_cells(enemy.shape, enemy.position):
            if config.in_playfield(x, y):
                buffer.draw(x, y, char)

    for x, y, char in shape_cells(player.shape, player.position):
        buffer.draw(x, y, char)
