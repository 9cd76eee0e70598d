"""Plain-text maze format.

The file starts with a ``width,height`` header followed by one line per row::

    5,5
    #####
    #S ##
    # # #
    #  F#
    #####

Reading is forgiving: rows that are missing or short leave their cells as
walls, while any unrecognised character that is present reads as a path.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Optional, Tuple

from ..core.constants import CellState
from ..core.exceptions import MazeStorageError
from ..engine.grid import MazeGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

SYMBOLS: Dict[CellState, str] = {
    CellState.WALL: "#",
    CellState.PATH: " ",
    CellState.START: "S",
    CellState.FINISH: "F",
}
UNKNOWN_SYMBOL = "?"

# Rows end only at CR, LF or CRLF; other control characters are cell content.
LINE_BREAK = re.compile(r"\r\n|\r|\n")

PARSE_TABLE: Dict[str, CellState] = {
    "#": CellState.WALL,
    "S": CellState.START,
    "F": CellState.FINISH,
}


def encode(grid: MazeGrid) -> str:
    lines = [f"{grid.width},{grid.height}"]
    for row in grid.rows():
        lines.append("".join(SYMBOLS.get(cell, UNKNOWN_SYMBOL) for cell in row))
    return "\n".join(lines) + "\n"


def decode(text: str) -> Optional[MazeGrid]:
    """Parse maze text; ``None`` when the header is missing or malformed."""

    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    if len(lines) < 2:
        return None
    size = _parse_header(lines[0])
    if size is None:
        return None
    width, height = size

    grid = MazeGrid(width, height, fill=CellState.WALL)
    for y, line in enumerate(lines[1 : height + 1]):
        for x, char in enumerate(line[:width]):
            grid.cells[y][x] = PARSE_TABLE.get(char, CellState.PATH)
    return grid


def _parse_header(header: str) -> Optional[Tuple[int, int]]:
    parts = [field.strip() for field in header.split(",")]
    if len(parts) != 2:
        return None
    if not all(field.isascii() and field.isdigit() for field in parts):
        return None
    return int(parts[0]), int(parts[1])


def save_maze(grid: MazeGrid, path: Path | str) -> None:
    """Write ``grid`` to ``path``; storage failures raise :class:`MazeStorageError`."""

    target = Path(path)
    try:
        target.write_text(encode(grid), encoding="utf-8")
    except OSError as exc:
        raise MazeStorageError(f"Unable to save maze to {target}: {exc}") from exc
    LOGGER.info("Maze saved: %s", target)


def load_maze(path: Path | str) -> Optional[MazeGrid]:
    source = Path(path)
    if not source.is_file():
        LOGGER.warning("Maze file not found: %s", source)
        return None
    try:
        text = source.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise MazeStorageError(f"Unable to read maze from {source}: {exc}") from exc
    grid = decode(text)
    if grid is None:
        LOGGER.warning("Maze file has a malformed header: %s", source)
    else:
        LOGGER.info("Maze loaded: %s (%sx%s)", source, grid.width, grid.height)
    return grid
