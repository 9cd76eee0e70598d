"""Game session: the controller a rendering/input layer talks to.

The session owns the current grid and the player's state. A host UI feeds
it discrete moves and edit-mode cell edits, and draws ``grid``, ``trail``
and (when ``show_optimal_path`` is set) ``optimal_path``.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional

from ..core.constants import (
    CellState,
    DEFAULT_MAZE_FILE,
    Direction,
    EditAction,
    START_POSITION,
)
from ..io.codec import load_maze, save_maze
from .generator import GeneratorConfig, MazeGenerator
from .grid import Coord, MazeGrid
from .pathfinder import PathFinder, is_valid_path
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class MazeSession:
    """Single-player maze session with movement, editing and solving."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.generator = MazeGenerator(self.config, rng=rng)
        self.path_finder = PathFinder()
        self.grid: MazeGrid = MazeGrid(0, 0)
        self.player: Coord = START_POSITION
        self.trail: List[Coord] = []
        self.optimal_path: List[Coord] = []
        self.move_count = 0
        self.completed = False
        self.edit_mode = False
        self.show_optimal_path = False
        self.new_game()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def new_game(self) -> None:
        self.grid = self.generator.generate()
        self.edit_mode = False
        self._reset_player()
        LOGGER.info("New game started on %sx%s maze", self.grid.width, self.grid.height)

    def _reset_player(self) -> None:
        self.player = START_POSITION
        self.move_count = 0
        self.completed = False
        self.trail = [START_POSITION]
        self.optimal_path = []
        self.show_optimal_path = False

    @property
    def finish(self) -> Coord:
        return self.grid.bounds.finish()

    @property
    def status(self) -> str:
        if self.edit_mode:
            return "editing"
        if self.completed:
            return "completed"
        return "playing"

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------
    def can_enter(self, x: int, y: int) -> bool:
        """A move succeeds iff the destination is in bounds and not a wall."""

        return self.grid.is_walkable(x, y)

    def move(self, direction: Direction) -> bool:
        if self.completed or self.edit_mode:
            return False
        dx, dy = direction.delta
        target = (self.player[0] + dx, self.player[1] + dy)
        if not self.can_enter(*target):
            return False
        self.player = target
        self.move_count += 1
        if not self.trail or self.trail[-1] != target:
            self.trail.append(target)
        if target == self.finish:
            self.completed = True
            LOGGER.info("Maze completed in %s moves", self.move_count)
        return True

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------
    def solve(self) -> List[Coord]:
        route = self.path_finder.find_path(self.grid, START_POSITION, self.finish)
        if route and not is_valid_path(self.grid, route):
            LOGGER.warning("Discarding broken route of %s cells", len(route))
            route = []
        self.optimal_path = route
        if self.optimal_path:
            LOGGER.info("Optimal path found: %s cells", len(self.optimal_path))
            self.show_optimal_path = True
        else:
            LOGGER.info("No optimal path exists")
        return self.optimal_path

    def toggle_optimal_path(self) -> bool:
        self.show_optimal_path = not self.show_optimal_path
        return self.show_optimal_path

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def toggle_edit_mode(self) -> bool:
        self.edit_mode = not self.edit_mode
        return self.edit_mode

    def edit_cell(self, x: int, y: int, action: EditAction) -> bool:
        if not self.edit_mode or not self.grid.in_bounds(x, y):
            return False
        if action == EditAction.WALL:
            state = CellState.WALL
        elif action == EditAction.PATH:
            state = CellState.PATH
        else:
            state = self._next_terminal_state(x, y)
        self.grid.set(x, y, state)
        LOGGER.debug("Edited (%s,%s) -> %s", x, y, state.value)
        return True

    def _next_terminal_state(self, x: int, y: int) -> CellState:
        if (x, y) == START_POSITION:
            return CellState.START
        if (x, y) == self.finish:
            return CellState.FINISH
        current = self.grid.get(x, y)
        if current == CellState.START:
            return CellState.FINISH
        if current == CellState.FINISH:
            return CellState.PATH
        return CellState.START

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save(self, path: Path | str = DEFAULT_MAZE_FILE) -> None:
        save_maze(self.grid, path)

    def load(self, path: Path | str = DEFAULT_MAZE_FILE) -> bool:
        grid = load_maze(path)
        if grid is None:
            return False
        self.grid = grid
        self._reset_player()
        return True
