import math
import random
from typing import List, Tuple

import pytest

from gridsearch.world.grid import Grid, Node


def random_grid(seed: int, rows: int = 7, cols: int = 9,
                wall_density: float = 0.25) -> Grid:
    """Grid with costs in 0..3 (plenty of ties) and scattered walls."""
    rng = random.Random(seed)
    grid = Grid([[Node(r, c, cost=float(rng.randint(0, 3)),
                       is_wall=rng.random() < wall_density)
                  for c in range(cols)] for r in range(rows)])
    grid.get_node(0, 0).is_wall = False
    return grid


def naive_visit_order(grid: Grid, start: Node, finish: Node) -> List[Tuple[int, int]]:
    """Reference policy: pop the head, relax, stably re-sort the whole list."""
    queue = sorted(grid.nodes(), key=lambda n: n.distance)
    order = []
    while queue:
        current = queue.pop(0)
        if current.is_wall:
            continue
        if current.distance == math.inf or current is finish:
            break
        order.append(current.coord)
        for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
            n = grid.get_node(current.row + dr, current.col + dc)
            if n is None or n.is_visited or n.is_wall:
                continue
            if current.distance + n.cost < n.distance:
                n.distance = current.distance + n.cost
                n.predecessor = current.coord
        queue.sort(key=lambda n: n.distance)
    return order


def true_distances(grid: Grid, start: Node) -> dict:
    """Bellman-Ford style fixpoint over open cells, independent of the heap."""
    dist = {n.coord: math.inf for n in grid.nodes()}
    dist[start.coord] = 0.0
    changed = True
    while changed:
        changed = False
        for n in grid.nodes():
            if n.is_wall and n is not start:
                continue
            if dist[n.coord] == math.inf:
                continue
            for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
                m = grid.get_node(n.row + dr, n.col + dc)
                if m is None or m.is_wall:
                    continue
                if dist[n.coord] + m.cost < dist[m.coord]:
                    dist[m.coord] = dist[n.coord] + m.cost
                    changed = True
    return dist


@pytest.fixture
def open_3x3() -> Grid:
    return Grid.from_layout([
        "S..",
        "...",
        "..F",
    ])


@pytest.fixture
def detour_grid() -> Grid:
    return Grid.from_layout([
        "...",
        ".#.",
        "S#F",
    ])


@pytest.fixture
def walled_in_grid() -> Grid:
    return Grid.from_layout([
        ".#..",
        "#S#.",
        ".#.F",
    ])
