"""
Component Definitions
======================
Plain value types shared by the entities and systems.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Tuple


# =============================================================================
# GEOMETRY
# =============================================================================

@dataclass
class Position:
    """Integer grid position."""
    x: int = 0
    y: int = 0

    def copy(self) -> 'Position':
        return Position(self.x, self.y)


# A sprite is three rows of five characters; space is transparent.
Shape = Tuple[str, str, str]

PLAYER_SHAPE: Shape = (
    ' /=\\ ',
    '<<*>>',
    ' * * ',
)

ENEMY_SHAPE: Shape = (
    '\\+/  ',
    ' |   ',
    '     ',
)


def shape_cells(shape: Shape, anchor: Position) -> Iterator[Tuple[int, int, str]]:
    """
    Yield (x, y, char) for every opaque cell of a sprite.

    The anchor sits on the middle row, third column.
    """
    for i, row in enumerate(shape):
        for j, char in enumerate(row):
            if char != ' ':
                yield anchor.x + j - 2, anchor.y + i - 1, char


# =============================================================================
# SCORING
# =============================================================================

@dataclass
class Score:
    """Non-negative score plus a one-shot flag set by the first hit."""
    value: int = 0
    ever_scored: bool = False


# =============================================================================
# SPAWNING
# =============================================================================

@dataclass(frozen=True)
class SpawnDescriptor:
    """A pending enemy: entry column, start row above the grid, descent speed."""
    x: int
    y: int
    speed: float


# =============================================================================
# INPUT
# =============================================================================

class Intent(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()


MOVE_DELTAS = {
    Intent.UP: (0, -1),
    Intent.DOWN: (0, 1),
    Intent.LEFT: (-1, 0),
    Intent.RIGHT: (1, 0),
}
