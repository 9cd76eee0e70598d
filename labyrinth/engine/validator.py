"""Deterministic rule validation for generated mazes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Set

from ..core.constants import CellState, START_POSITION
from ..core.exceptions import ValidationError
from .grid import Coord, MazeGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def reachable_cells(grid: MazeGrid, start: Coord) -> Set[Coord]:
    """Breadth-first flood over non-wall cells using unit 4-directional steps."""

    if not grid.is_walkable(*start):
        return set()
    seen: Set[Coord] = {start}
    queue: Deque[Coord] = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in grid.neighbors4(x, y):
            if (nx, ny) in seen or grid.cells[ny][nx] == CellState.WALL:
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    return seen


def is_reachable(grid: MazeGrid, start: Coord, goal: Coord) -> bool:
    return grid.is_walkable(*goal) and goal in reachable_cells(grid, start)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class MazeValidator:
    """Runs deterministic validation over a finished maze."""

    def validate(self, grid: MazeGrid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_perimeter(grid)
            self._check_terminals(grid)
            self._check_solvable(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_perimeter(self, grid: MazeGrid) -> None:
        for y in range(grid.height):
            for x in range(grid.width):
                if grid.bounds.is_perimeter(x, y) and grid.cells[y][x] != CellState.WALL:
                    raise ValidationError(f"Perimeter cell ({x},{y}) is {grid.cells[y][x].value}")

    def _check_terminals(self, grid: MazeGrid) -> None:
        starts = grid.cells_of(CellState.START)
        finishes = grid.cells_of(CellState.FINISH)
        if starts != [START_POSITION]:
            raise ValidationError(f"Expected a single start at {START_POSITION}, found {starts}")
        if finishes != [grid.bounds.finish()]:
            raise ValidationError(
                f"Expected a single finish at {grid.bounds.finish()}, found {finishes}"
            )

    def _check_solvable(self, grid: MazeGrid) -> None:
        if not is_reachable(grid, START_POSITION, grid.bounds.finish()):
            raise ValidationError("Finish is not reachable from start")
