"""
Projectile System
==================
Player shots: spawn at the muzzle, climb one row per tick, vanish at the top.
"""

from typing import List

from .components import Position


PROJECTILE_CHAR = '^'


class Projectile:
    """A single shot travelling straight up."""

    def __init__(self, x: int, y: int):
        self.position = Position(x, y)

    def move(self) -> None:
        self.position.y -= 1

    def is_off_screen(self, top: int) -> bool:
        return self.position.y < top

    def __repr__(self):
        return f'Projectile(x={self.position.x}, y={self.position.y})'


def spawn_projectile(muzzle: Position) -> Projectile:
    """Create a projectile at the given muzzle position."""
    return Projectile(muzzle.x, muzzle.y)


def projectile_system(projectiles: List[Projectile], top: int) -> List[Projectile]:
    """
    Advance every projectile and return the survivors in order.

    Projectiles that pass above ``top`` are dropped.
    """
    survivors = []
    for proj in projectiles:
        proj.move()
        if not proj.is_off_screen(top):
            survivors.append(proj)
    return survivors
