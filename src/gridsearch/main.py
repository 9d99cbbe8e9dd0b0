"""
gridsearch — Entry Point

Generates a noise terrain grid, searches from the top-left open cell to the
bottom-right open cell, logs a summary and prints the search report.
Terrain generation needs the ``terrain`` extra (``pip install gridsearch[terrain]``).

    python -m gridsearch.main [--seed N] [--rows R] [--cols C] [--walls D]
"""

import argparse
import random
import sys
from typing import List, Optional

from gridsearch.config import GRID_ROWS, GRID_COLS, RANDOM_SEED, WALL_DENSITY, LOG_DIR
from gridsearch.core.logger import SearchLogger
from gridsearch.search.dijkstra import find_path
from gridsearch.tools.search_report import render_search, summarize
from gridsearch.world.grid import Grid, Node


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsearch-demo",
        description="Search a generated terrain grid and print the report",
        epilog="Requires the 'terrain' extra: pip install gridsearch[terrain]",
    )
    parser.add_argument("--seed", type=int, default=RANDOM_SEED,
                        help=f"Noise and wall seed (default {RANDOM_SEED})")
    parser.add_argument("--rows", type=int, default=GRID_ROWS,
                        help=f"Grid height (default {GRID_ROWS})")
    parser.add_argument("--cols", type=int, default=GRID_COLS,
                        help=f"Grid width (default {GRID_COLS})")
    parser.add_argument("--walls", type=float, default=WALL_DENSITY,
                        help=f"Fraction of cells turned to walls (default {WALL_DENSITY})")
    return parser


def _first_open(grid: Grid, reverse: bool = False) -> Optional[Node]:
    nodes = list(grid.nodes())
    if reverse:
        nodes.reverse()
    for node in nodes:
        if not node.is_wall:
            return node
    return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rows < 1 or args.cols < 1:
        parser.error("--rows and --cols must be at least 1")
    if not 0.0 <= args.walls <= 1.0:
        parser.error("--walls must be between 0 and 1")

    try:
        from gridsearch.world.generator import GridGenerator
    except ImportError as e:
        parser.error(f"terrain generation is unavailable ({e}); "
                     "install it with: pip install gridsearch[terrain]")

    logger = SearchLogger(log_dir=LOG_DIR)
    try:
        logger.log_event("SYSTEM", f"Generating {args.rows}x{args.cols} grid "
                                   f"(seed {args.seed})", echo=True)

        grid = GridGenerator.generate(args.rows, args.cols, seed=args.seed)
        start, finish = _first_open(grid), _first_open(grid, reverse=True)
        if start is None or finish is None:
            print("Grid has no open cells.")
            return 1
        GridGenerator.carve_road(grid, start.coord, (start.row, args.cols // 2))
        walls = GridGenerator.scatter_walls(grid, args.walls, random.Random(args.seed),
                                            keep=[start.coord, finish.coord])
        logger.log_event("WORLD", f"{walls} walls scattered", echo=True)

        result = find_path(grid, start, finish)
        print(summarize(result))
        print(render_search(grid, result.visited, result.path, start, finish))
        return 0 if result.found else 2
    finally:
        logger.detach_file()


if __name__ == "__main__":
    sys.exit(main())
