"""
Enemy Definitions
==================
Descending enemy planes with per-instance speed.
"""

from .components import Position, Shape, ENEMY_SHAPE, SpawnDescriptor


class Enemy:
    """
    A descending enemy plane.

    The row shown on screen is the truncated value of a real-valued
    accumulator, so enemies with different speeds drift apart smoothly
    instead of stepping in lockstep.
    """

    def __init__(self, x: int, y: int, speed: float):
        self.position = Position(x, y)
        self.shape: Shape = ENEMY_SHAPE
        self.actual_y = float(y)
        self.speed = speed

    @classmethod
    def from_descriptor(cls, descriptor: SpawnDescriptor) -> 'Enemy':
        return cls(descriptor.x, descriptor.y, descriptor.speed)

    def update(self) -> None:
        self.actual_y += self.speed
        self.position.y = int(self.actual_y)

    def is_off_screen(self, exit_row: int) -> bool:
        return self.position.y >= exit_row

    def __repr__(self):
        return f'Enemy(x={self.position.x}, y={self.actual_y:.2f}, speed={self.speed:.3f})'
