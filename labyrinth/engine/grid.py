"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import Bounds, CellState, ORTHOGONAL_STEPS
from ..core.exceptions import InvalidDimensions, OutOfBounds


Coord = Tuple[int, int]


class MazeGrid:
    """Rectangular matrix of cell states addressed as ``(x, y)``.

    Cells are stored row-major (``cells[y][x]``) so that iterating rows
    matches the order of the text file format.
    """

    def __init__(self, width: int, height: int, fill: CellState = CellState.WALL) -> None:
        if width < 0 or height < 0:
            raise InvalidDimensions(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.bounds = Bounds(width=width, height=height)
        self.cells: List[List[CellState]] = [
            [fill for _ in range(width)] for _ in range(height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellState]]) -> "MazeGrid":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimensions(f"Row {y} has {len(row)} cells, expected {width}")
            grid.cells[y] = list(row)
        return grid

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def get(self, x: int, y: int) -> CellState:
        self._check_bounds(x, y)
        return self.cells[y][x]

    def set(self, x: int, y: int, state: CellState) -> None:
        self._check_bounds(x, y)
        self.cells[y][x] = state

    def is_walkable(self, x: int, y: int) -> bool:
        """True when the cell exists and is anything but a wall."""

        return self.in_bounds(x, y) and self.cells[y][x] != CellState.WALL

    def neighbors4(self, x: int, y: int) -> List[Coord]:
        return [
            (x + dx, y + dy)
            for dx, dy in ORTHOGONAL_STEPS
            if self.in_bounds(x + dx, y + dy)
        ]

    def fill(self, state: CellState) -> None:
        for row in self.cells:
            for x in range(len(row)):
                row[x] = state

    def cells_of(self, state: CellState) -> List[Coord]:
        return [
            (x, y)
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell == state
        ]

    def find(self, state: CellState) -> Optional[Coord]:
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell == state:
                    return x, y
        return None

    def rows(self) -> Iterator[Tuple[CellState, ...]]:
        for row in self.cells:
            yield tuple(row)

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.bounds.contains(x, y):
            raise OutOfBounds(x, y, self.width, self.height)

    # ------------------------------------------------------------------
    # Copying and serialization
    # ------------------------------------------------------------------
    def copy(self) -> "MazeGrid":
        clone = MazeGrid(self.width, self.height)
        clone.cells = [list(row) for row in self.cells]
        return clone

    def to_jsonable(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "cells": [[cell.value for cell in row] for row in self.cells],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.bounds == other.bounds and self.cells == other.cells

    def __repr__(self) -> str:
        return f"MazeGrid(width={self.width}, height={self.height})"
