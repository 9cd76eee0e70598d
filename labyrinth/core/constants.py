"""Shared constants and enumerations for the maze core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class CellState(str, Enum):
    """All supported cell states in the grid."""

    WALL = "WALL"
    PATH = "PATH"
    START = "START"
    FINISH = "FINISH"


class Direction(str, Enum):
    """Player move directions, screen oriented (y grows downwards)."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]


class EditAction(str, Enum):
    """Cell edits an external editor may request in edit mode."""

    WALL = "WALL"
    PATH = "PATH"
    CYCLE_TERMINAL = "CYCLE_TERMINAL"


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Unit steps for walking the grid, (dx, dy).
ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
# Steps between rooms on the doubled carving lattice.
LATTICE_STEPS: Tuple[Tuple[int, int], ...] = ((0, 2), (0, -2), (2, 0), (-2, 0))

MIN_DIMENSION = 5
DEFAULT_WIDTH = 19
DEFAULT_HEIGHT = 19
DEFAULT_DEAD_END_COUNT = 15
MIN_BRANCH_LENGTH = 2
MAX_BRANCH_LENGTH = 4
START_POSITION: Tuple[int, int] = (1, 1)
DEFAULT_MAZE_FILE = "custom_maze.txt"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def is_perimeter(self, x: int, y: int) -> bool:
        return self.contains(x, y) and not self.is_interior(x, y)

    def finish(self) -> Tuple[int, int]:
        return self.width - 2, self.height - 2
