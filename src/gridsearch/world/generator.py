import random
from typing import Iterable, Optional

import noise

from .grid import Coord, Grid, Node
from ..config import (
    GRID_ROWS, GRID_COLS, RANDOM_SEED, NOISE_SCALE, NOISE_OCTAVES,
    WALL_DENSITY, ELEVATION_BANDS, TERRAIN_TYPES,
)


class GridGenerator:
    @staticmethod
    def generate(rows: int = GRID_ROWS, cols: int = GRID_COLS,
                 seed: int = RANDOM_SEED) -> Grid:
        """Terrain grid from Perlin noise: elevation picks a terrain band,
        the band sets the entry cost and whether the cell is a wall."""
        grid_rows = []
        for r in range(rows):
            row = []
            for c in range(cols):
                elev = noise.pnoise2(c * NOISE_SCALE, r * NOISE_SCALE,
                                     octaves=NOISE_OCTAVES, base=seed % 1024)
                terrain = GridGenerator.terrain_for(elev)
                kind = TERRAIN_TYPES[terrain]
                row.append(Node(r, c, cost=float(kind["cost"]),
                                is_wall=kind["wall"], terrain=terrain))
            grid_rows.append(row)
        return Grid(grid_rows)

    @staticmethod
    def terrain_for(elevation: float) -> str:
        for upper, terrain in ELEVATION_BANDS:
            if elevation < upper:
                return terrain
        return ELEVATION_BANDS[-1][1]

    @staticmethod
    def scatter_walls(grid: Grid, density: float = WALL_DENSITY,
                      rng: Optional[random.Random] = None,
                      keep: Iterable[Coord] = ()) -> int:
        """Turn roughly density of the cells into walls, leaving keep open.
        Returns the number of walls placed."""
        rng = rng or random.Random(RANDOM_SEED)
        keep = set(keep)
        placed = 0
        for node in grid.nodes():
            if node.coord in keep:
                node.is_wall = False
                continue
            if not node.is_wall and rng.random() < density:
                node.is_wall = True
                node.terrain = "wall"
                placed += 1
        return placed

    @staticmethod
    def carve_road(grid: Grid, start: Coord, end: Coord) -> None:
        """Lay an L-shaped road (row first, then column) of open, cheap cells."""
        (r1, c1), (r2, c2) = start, end
        step = 1 if c2 >= c1 else -1
        for c in range(c1, c2 + step, step):
            GridGenerator._pave(grid.get_node(r1, c))
        step = 1 if r2 >= r1 else -1
        for r in range(r1, r2 + step, step):
            GridGenerator._pave(grid.get_node(r, c2))

    @staticmethod
    def _pave(node: Optional[Node]) -> None:
        if node is None:
            return
        road = TERRAIN_TYPES["road"]
        node.terrain = "road"
        node.cost = float(road["cost"])
        node.is_wall = road["wall"]
