"""Pretty-print helpers for maze grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from ..core.constants import CellState

if TYPE_CHECKING:
    from ..engine.generator import GenerationReport
    from ..engine.grid import MazeGrid


SYMBOLS = {
    CellState.WALL: "#",
    CellState.PATH: " ",
    CellState.START: "S",
    CellState.FINISH: "F",
}
ROUTE_SYMBOL = "."
PLAYER_SYMBOL = "@"


def format_grid(
    grid: MazeGrid,
    *,
    route: Optional[Iterable[Tuple[int, int]]] = None,
    player: Optional[Tuple[int, int]] = None,
) -> str:
    """Render the grid with an optional route overlay and player marker.

    Terminals keep their own symbol even when the route passes through them.
    """

    overlay = set(route or ())
    width = grid.width
    header_cells = [f"{x % 10}" for x in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * width)
    for y, row in enumerate(grid.rows()):
        rendered = []
        for x, cell in enumerate(row):
            if (x, y) == player:
                rendered.append(PLAYER_SYMBOL)
            elif (x, y) in overlay and cell == CellState.PATH:
                rendered.append(ROUTE_SYMBOL)
            else:
                rendered.append(SYMBOLS.get(cell, "?"))
        lines.append(f"{y:>2} |{''.join(rendered)}")
    return "\n".join(lines)


def pretty_print_grid(
    grid: MazeGrid,
    *,
    label: str | None = None,
    route: Optional[Iterable[Tuple[int, int]]] = None,
    stream=None,
) -> None:
    """Print the maze grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, route=route), file=stream)


def print_maze_stats(
    grid: MazeGrid,
    report: Optional[GenerationReport] = None,
    route: Optional[Iterable[Tuple[int, int]]] = None,
    *,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    counts = Counter(cell for row in grid.rows() for cell in row)
    total_cells = grid.width * grid.height
    walkable = total_cells - counts[CellState.WALL]

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.width} x {grid.height} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Walkable:      {walkable} ({walkable / total_cells * 100:.0f}%)", file=stream)
    print(f"  Walls:         {counts[CellState.WALL]}", file=stream)

    if report is not None:
        print(file=stream)
        print("--- Generation ---", file=stream)
        print(f"  Rooms carved:  {report.rooms_carved}", file=stream)
        print(f"  Dead ends:     {report.branches_added} ({report.cells_braided} cells)", file=stream)
        if report.repaired:
            print("  Repaired:      staircase route added", file=stream)
        if report.seed is not None:
            print(f"  Seed:          {report.seed}", file=stream)

    if route is not None:
        cells = list(route)
        print(file=stream)
        print("--- Solution ---", file=stream)
        if cells:
            print(f"  Length:        {len(cells) - 1} steps ({len(cells)} cells)", file=stream)
        else:
            print("  No path from start to finish", file=stream)
