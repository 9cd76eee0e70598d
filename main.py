"""CLI entrypoint for the maze puzzle core."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from labyrinth.core.constants import (
    DEFAULT_DEAD_END_COUNT,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    START_POSITION,
)
from labyrinth.core.exceptions import MazeError
from labyrinth.engine.generator import GenerationReport, GeneratorConfig, MazeGenerator
from labyrinth.engine.grid import MazeGrid
from labyrinth.engine.pathfinder import find_path
from labyrinth.io.codec import load_maze, save_maze
from labyrinth.utils.logger import configure_logging, get_logger
from labyrinth.utils.pretty import pretty_print_grid, print_maze_stats


LOGGER = get_logger("labyrinth.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate, solve and store grid mazes",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a new maze")
    generate.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Maze width in cells")
    generate.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Maze height in cells")
    generate.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    generate.add_argument(
        "--dead-ends",
        type=int,
        default=DEFAULT_DEAD_END_COUNT,
        help="Number of decoy dead-end branches to grow",
    )
    generate.add_argument("--output", type=Path, help="Save the maze as a text file")
    generate.add_argument("--solve", action="store_true", help="Overlay the optimal path")
    generate.add_argument("--json", action="store_true", help="Print a JSON document instead")

    solve = subparsers.add_parser("solve", help="Solve a maze text file")
    solve.add_argument("file", type=Path, help="Maze text file")
    solve.add_argument("--json", action="store_true", help="Print a JSON document instead")
    return parser


def _payload(grid: MazeGrid, route: Optional[List], report: Optional[GenerationReport]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"grid": grid.to_jsonable()}
    if route is not None:
        payload["path"] = [list(cell) for cell in route]
    if report is not None:
        payload["report"] = report.__dict__
    return payload


def _emit(grid: MazeGrid, route: Optional[List], report: Optional[GenerationReport], as_json: bool) -> None:
    if as_json:
        print(json.dumps(_payload(grid, route, report), indent=2))
        return
    pretty_print_grid(grid, route=route)
    print_maze_stats(grid, report, route)


def run_generate(args: argparse.Namespace) -> None:
    config = GeneratorConfig(
        width=args.width,
        height=args.height,
        seed=args.seed,
        dead_end_count=args.dead_ends,
    )
    generator = MazeGenerator(config)
    grid = generator.generate()
    if args.output:
        save_maze(grid, args.output)
    route = find_path(grid, START_POSITION, grid.bounds.finish()) if args.solve else None
    _emit(grid, route, generator.last_report, args.json)


def run_solve(args: argparse.Namespace) -> int:
    grid = load_maze(args.file)
    if grid is None:
        LOGGER.error("Could not read a maze from %s", args.file)
        return 1
    route = find_path(grid, START_POSITION, grid.bounds.finish())
    _emit(grid, route, None, args.json)
    return 0 if route else 2


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    try:
        if args.command == "generate":
            run_generate(args)
            return 0
        return run_solve(args)
    except (MazeError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
