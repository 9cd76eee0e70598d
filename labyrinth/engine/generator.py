"""Maze generation orchestration.

Five-step pipeline:
  1. Initialize: every cell is a wall.
  2. Carve: iterative depth-first backtracking over the doubled room lattice,
     which yields a perfect maze.
  3. Braid: grow a fixed number of short dead-end branches off random path
     cells to add decoys.
  4. Mark the start and finish terminals.
  5. Verify with a breadth-first search and carve a staircase if the finish
     is not reachable.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.constants import (
    CellState,
    DEFAULT_DEAD_END_COUNT,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LATTICE_STEPS,
    MAX_BRANCH_LENGTH,
    MIN_BRANCH_LENGTH,
    MIN_DIMENSION,
    START_POSITION,
)
from ..core.exceptions import InvalidDimensions
from .grid import Coord, MazeGrid
from .validator import is_reachable
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None
    dead_end_count: int = DEFAULT_DEAD_END_COUNT
    min_branch_length: int = MIN_BRANCH_LENGTH
    max_branch_length: int = MAX_BRANCH_LENGTH

    def validate(self) -> None:
        if self.width < MIN_DIMENSION or self.height < MIN_DIMENSION:
            raise InvalidDimensions(
                f"Maze must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, "
                f"got {self.width}x{self.height}"
            )
        if self.dead_end_count < 0:
            raise ValueError("dead_end_count must be non-negative")
        if not 0 < self.min_branch_length <= self.max_branch_length:
            raise ValueError("branch lengths must satisfy 0 < min <= max")


@dataclass
class GenerationReport:
    rooms_carved: int = 0
    branches_added: int = 0
    cells_braided: int = 0
    repaired: bool = False
    seed: Optional[int] = None


class MazeGenerator:
    """Builds solvable puzzle mazes: one true route plus many dead ends."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        config.validate()
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.last_report: Optional[GenerationReport] = None

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> MazeGrid:
        LOGGER.info(
            "Generating %sx%s maze (seed=%s)",
            self.config.width,
            self.config.height,
            self.config.seed,
        )
        report = GenerationReport(seed=self.config.seed)
        grid = self._initialize()
        report.rooms_carved = self._carve(grid)
        report.branches_added, report.cells_braided = self._braid(grid)
        self._mark_terminals(grid)
        report.repaired = self._ensure_finish_reachable(grid)
        self.last_report = report
        LOGGER.info(
            "Maze ready: %s rooms, %s dead-end branches (%s cells)%s",
            report.rooms_carved,
            report.branches_added,
            report.cells_braided,
            ", repaired" if report.repaired else "",
        )
        return grid

    # ------------------------------------------------------------------
    # Carving
    # ------------------------------------------------------------------
    def _initialize(self) -> MazeGrid:
        return MazeGrid(self.config.width, self.config.height, fill=CellState.WALL)

    def _carve(self, grid: MazeGrid) -> int:
        """Depth-first backtracking from the start room; returns rooms carved."""

        start = START_POSITION
        visited = {start}
        stack: List[Coord] = [start]
        grid.set(*start, CellState.PATH)

        while stack:
            x, y = stack[-1]
            candidates = self._unvisited_rooms(grid, x, y, visited)
            if not candidates:
                stack.pop()
                continue
            nx, ny = self.rng.choice(candidates)
            grid.set(x + (nx - x) // 2, y + (ny - y) // 2, CellState.PATH)
            grid.set(nx, ny, CellState.PATH)
            visited.add((nx, ny))
            stack.append((nx, ny))

        LOGGER.debug("Carved %s rooms", len(visited))
        return len(visited)

    def _unvisited_rooms(self, grid: MazeGrid, x: int, y: int, visited: Set[Coord]) -> List[Coord]:
        rooms: List[Coord] = []
        for dx, dy in LATTICE_STEPS:
            nx, ny = x + dx, y + dy
            if (
                grid.bounds.is_interior(nx, ny)
                and (nx, ny) not in visited
                and grid.cells[ny][nx] == CellState.WALL
            ):
                rooms.append((nx, ny))
        return rooms

    # ------------------------------------------------------------------
    # Braiding
    # ------------------------------------------------------------------
    def _braid(self, grid: MazeGrid) -> Tuple[int, int]:
        """Grow dead-end branches; returns (branches added, cells carved)."""

        branches = 0
        carved = 0
        for _ in range(self.config.dead_end_count):
            path_cells = self._interior_path_cells(grid)
            if not path_cells:
                continue
            x, y = self.rng.choice(path_cells)
            length = self.rng.randint(self.config.min_branch_length, self.config.max_branch_length)
            added = self._grow_branch(grid, x, y, length)
            if added:
                branches += 1
                carved += added
        LOGGER.debug("Braided %s branches over %s cells", branches, carved)
        return branches, carved

    def _grow_branch(self, grid: MazeGrid, x: int, y: int, length: int) -> int:
        # Only the target room is checked, so a branch may run into another
        # passage and merge with it.
        directions = list(LATTICE_STEPS)
        carved = 0
        for _ in range(length):
            self.rng.shuffle(directions)
            for dx, dy in directions:
                nx, ny = x + dx, y + dy
                if grid.bounds.is_interior(nx, ny) and grid.cells[ny][nx] == CellState.WALL:
                    wall_x, wall_y = x + dx // 2, y + dy // 2
                    if grid.cells[wall_y][wall_x] == CellState.WALL:
                        carved += 1
                    grid.set(wall_x, wall_y, CellState.PATH)
                    grid.set(nx, ny, CellState.PATH)
                    carved += 1
                    x, y = nx, ny
                    break
            else:
                break
        return carved

    @staticmethod
    def _interior_path_cells(grid: MazeGrid) -> List[Coord]:
        return [
            (x, y)
            for x in range(1, grid.width - 1)
            for y in range(1, grid.height - 1)
            if grid.cells[y][x] == CellState.PATH
        ]

    # ------------------------------------------------------------------
    # Terminals and repair
    # ------------------------------------------------------------------
    @staticmethod
    def _mark_terminals(grid: MazeGrid) -> None:
        grid.set(*START_POSITION, CellState.START)
        grid.set(*grid.bounds.finish(), CellState.FINISH)

    def _ensure_finish_reachable(self, grid: MazeGrid) -> bool:
        """Carve a fallback route when the finish is cut off; True if repaired."""

        finish = grid.bounds.finish()
        if is_reachable(grid, START_POSITION, finish):
            return False
        LOGGER.warning("Finish %s unreachable after carving, adding staircase route", finish)
        self._carve_staircase(grid)
        self._mark_terminals(grid)
        return True

    @staticmethod
    def _carve_staircase(grid: MazeGrid) -> None:
        x, y = START_POSITION
        target_x, target_y = grid.bounds.finish()
        while x < target_x or y < target_y:
            if x < target_x:
                x += 1
                grid.set(x, y, CellState.PATH)
            if y < target_y:
                y += 1
                grid.set(x, y, CellState.PATH)


def generate_maze(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> MazeGrid:
    """Convenience wrapper building a generator for a single maze."""

    return MazeGenerator(GeneratorConfig(width=width, height=height, seed=seed), rng=rng).generate()
