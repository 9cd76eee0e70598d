"""A* shortest-route search over a maze grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set

from ..core.constants import CellState
from .grid import Coord, MazeGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Path = List[Coord]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class SearchNode:
    """Arena record for one discovered position.

    ``parent`` is the predecessor's position, used as a key back into the
    arena during reconstruction. ``h`` is fixed at creation; ``f`` is always
    derived from the current ``g``.
    """

    position: Coord
    parent: Optional[Coord]
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h


class PathFinder:
    """Computes shortest start-to-goal routes; keeps simple search stats."""

    def __init__(self) -> None:
        self.last_expanded = 0

    def find_path(self, grid: MazeGrid, start: Coord, goal: Coord) -> Path:
        self.last_expanded = 0
        if not grid.is_walkable(*start) or not grid.is_walkable(*goal):
            LOGGER.debug("Invalid endpoints %s -> %s", start, goal)
            return []

        arena: Dict[Coord, SearchNode] = {
            start: SearchNode(position=start, parent=None, g=0, h=manhattan(start, goal))
        }
        # Insertion ordered; min() keeps the first of equal-f candidates.
        open_list: List[Coord] = [start]
        closed: Set[Coord] = set()

        while open_list:
            current = min(open_list, key=lambda position: arena[position].f)
            if current == goal:
                path = self._reconstruct(arena, goal)
                LOGGER.debug(
                    "Path found: %s cells after %s expansions", len(path), self.last_expanded
                )
                return path

            open_list.remove(current)
            closed.add(current)
            self.last_expanded += 1
            tentative_g = arena[current].g + 1

            for neighbor in grid.neighbors4(*current):
                if neighbor in closed or grid.cells[neighbor[1]][neighbor[0]] == CellState.WALL:
                    continue
                node = arena.get(neighbor)
                if node is None:
                    arena[neighbor] = SearchNode(
                        position=neighbor,
                        parent=current,
                        g=tentative_g,
                        h=manhattan(neighbor, goal),
                    )
                    open_list.append(neighbor)
                elif tentative_g < node.g:
                    node.parent = current
                    node.g = tentative_g

        LOGGER.debug("No path from %s to %s (%s expansions)", start, goal, self.last_expanded)
        return []

    @staticmethod
    def _reconstruct(arena: Dict[Coord, SearchNode], goal: Coord) -> Path:
        path: Path = []
        position: Optional[Coord] = goal
        while position is not None:
            path.append(position)
            position = arena[position].parent
        path.reverse()
        return path


def find_path(grid: MazeGrid, start: Coord, goal: Coord) -> Path:
    """Shortest route from ``start`` to ``goal``; empty when none exists."""

    return PathFinder().find_path(grid, start, goal)


def path_length(path: Sequence[Coord]) -> int:
    """Number of edges in a path (cells minus one, zero for an empty path)."""

    return max(len(path) - 1, 0)


def is_valid_path(grid: MazeGrid, path: Sequence[Coord]) -> bool:
    if not path:
        return False
    for index, (x, y) in enumerate(path):
        if not grid.is_walkable(x, y):
            return False
        if index and manhattan(path[index - 1], (x, y)) != 1:
            return False
    return True
