"""Grid-maze puzzle core: generation, solving and plain-text storage.

This package exposes the public API surface via:

- ``labyrinth.engine.generator.MazeGenerator``: builds solvable puzzle mazes.
- ``labyrinth.engine.pathfinder.find_path``: A* shortest start-to-finish route.
- ``labyrinth.io.codec``: ``encode``/``decode`` and file ``save_maze``/``load_maze``.
- ``labyrinth.engine.session.MazeSession``: controller for a host UI.
"""

from .core.constants import CellState, Direction, EditAction
from .engine.grid import MazeGrid
from .engine.generator import GeneratorConfig, MazeGenerator
from .engine.pathfinder import PathFinder, find_path
from .engine.session import MazeSession
from .io.codec import decode, encode, load_maze, save_maze

__all__ = [
    "CellState",
    "Direction",
    "EditAction",
    "MazeGrid",
    "GeneratorConfig",
    "MazeGenerator",
    "PathFinder",
    "find_path",
    "MazeSession",
    "decode",
    "encode",
    "load_maze",
    "save_maze",
]

__version__ = "0.1.0"
