"""
GridSearch — Dijkstra relaxation search over a 4-connected grid.

The frontier is a binary heap keyed by (distance, sequence). Sequence numbers
reproduce the pop order of the naive policy "take the head of the list, relax
its neighbours, stably re-sort the whole list by distance":

  - initially every node gets its row-major index;
  - a node whose distance drops gets a fresh number larger than every number
    handed out so far, so it queues behind nodes already holding that distance;
  - nodes lowered in the same round are numbered in the order they held in
    the frontier just before that round.

Usage:
    from gridsearch.search.dijkstra import GridSearch, find_path

    grid.reset(start)
    search = GridSearch()
    visited = search.run(grid, start, finish)
    path = search.reconstruct_path(finish)   # finish -> start, or None

    result = find_path(grid, start, finish)  # reset + run + reconstruct
"""

import heapq
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from gridsearch.core.errors import InvalidGrid, NodeNotInGrid, SearchOutcome
from gridsearch.core.logger import SearchLogger
from gridsearch.world.grid import Coord, Grid, Node
from .constants import NEIGHBOUR_OFFSETS

GridLike = Union[Grid, Sequence[Sequence[Node]]]
HeapKey = Tuple[float, int]


@dataclass
class SearchStats:
    """Counters for one run."""
    pops: int = 0
    stale_pops: int = 0
    walls_skipped: int = 0
    relaxations: int = 0


@dataclass(frozen=True)
class SearchResult:
    visited: List[Node]            # Processed nodes in pop order
    path: Optional[List[Node]]     # [start, ..., finish] or None if unreachable
    cost: float                    # Shortest distance to finish (inf if unreachable)
    outcome: SearchOutcome
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.path is not None


def _as_grid(grid: GridLike) -> Grid:
    if isinstance(grid, Grid):
        grid.validate()
        return grid
    return Grid(grid)


class GridSearch:
    """Dijkstra search over a grid of nodes with per-node entry costs."""

    def __init__(self) -> None:
        self.log = SearchLogger()
        self.outcome: Optional[SearchOutcome] = None
        self.stats = SearchStats()
        self._grid: Optional[Grid] = None

    # ================================================================
    # SEARCH
    # ================================================================

    def run(self, grid: GridLike, start_node: Node,
            finish_node: Node) -> List[Node]:
        """Explore from start_node until finish_node is popped or the
        frontier head is unreachable.

        The caller sets start_node.distance to 0 beforehand (Grid.reset does
        it). Returns the processed nodes in pop order; neither walls nor the
        finish node appear in it. Mutates distance and predecessor only.
        """
        grid = _as_grid(grid)
        grid.require(start_node, "start")
        grid.require(finish_node, "finish")

        self._grid = grid
        self.stats = SearchStats()
        self.outcome = SearchOutcome.EXHAUSTED

        width = grid.width
        keys: Dict[Coord, Optional[HeapKey]] = {}
        frontier: List[Tuple[float, int, int, int]] = []
        for node in grid.nodes():
            seq = node.row * width + node.col
            keys[node.coord] = (node.distance, seq)
            frontier.append((node.distance, seq, node.row, node.col))
        heapq.heapify(frontier)
        next_seq = len(frontier)

        visited: List[Node] = []
        while frontier:
            distance, seq, row, col = heapq.heappop(frontier)
            if keys[(row, col)] != (distance, seq):
                self.stats.stale_pops += 1
                continue
            keys[(row, col)] = None  # Left the frontier
            self.stats.pops += 1
            current = grid.rows[row][col]

            if current.is_wall:
                self.stats.walls_skipped += 1
                continue
            if current.distance == math.inf:
                self.outcome = SearchOutcome.TRAPPED
                break
            if current is finish_node:
                self.outcome = SearchOutcome.FOUND
                break

            visited.append(current)
            if self.log.debug_enabled:
                self.log.debug("SEARCH", f"visit {current.coord} at distance {current.distance}")

            improved = [n for n in self._neighbours(grid, current)
                        if self._relax(current, n)]
            # Renumber in prior frontier order so equal distances keep it
            improved = [n for n in improved if keys[n.coord] is not None]
            improved.sort(key=lambda n: keys[n.coord])
            for n in improved:
                keys[n.coord] = (n.distance, next_seq)
                heapq.heappush(frontier, (n.distance, next_seq, n.row, n.col))
                next_seq += 1

        self.log.log_event(
            "SEARCH",
            f"{start_node.coord} -> {finish_node.coord}: {self.outcome.value}, "
            f"{len(visited)} visited, {self.stats.relaxations} relaxations",
        )
        return visited

    @staticmethod
    def _neighbours(grid: Grid, node: Node) -> List[Node]:
        """In-bounds, unvisited, non-wall neighbours in top/right/bottom/left order."""
        result = []
        for _, (dr, dc) in NEIGHBOUR_OFFSETS:
            n = grid.get_node(node.row + dr, node.col + dc)
            if n is None or n.is_visited or n.is_wall:
                continue
            result.append(n)
        return result

    def _relax(self, u: Node, v: Node) -> bool:
        # Cost belongs to the node being entered, not to the edge
        candidate = u.distance + v.cost
        if candidate < v.distance:
            v.distance = candidate
            v.predecessor = u.coord
            self.stats.relaxations += 1
            return True
        return False

    # ================================================================
    # PATH
    # ================================================================

    def reconstruct_path(self, finish_node: Node) -> Optional[List[Node]]:
        """Walk predecessors back from finish_node.

        Returns nodes in finish -> start order, start included, or None
        when finish_node was never reached or is a wall. Must follow run()
        on the grid that holds finish_node.
        """
        if self._grid is None:
            raise NodeNotInGrid("reconstruct_path called before any run")
        grid = self._grid
        grid.require(finish_node, "finish")

        if finish_node.is_wall or finish_node.distance == math.inf:
            return None

        path = [finish_node]
        node = finish_node
        while node.predecessor is not None:
            node = grid.get_node(*node.predecessor)
            if node is None or len(path) >= len(grid):
                raise InvalidGrid(
                    f"Broken predecessor chain from {finish_node.coord}")
            path.append(node)
        return path


def find_path(grid: GridLike, start_node: Node, finish_node: Node) -> SearchResult:
    """Reset grid for start_node, search to finish_node and reconstruct the path."""
    grid = _as_grid(grid)
    grid.reset(start_node)
    search = GridSearch()
    visited = search.run(grid, start_node, finish_node)
    backwards = search.reconstruct_path(finish_node)
    path = list(reversed(backwards)) if backwards is not None else None
    return SearchResult(
        visited=visited,
        path=path,
        cost=finish_node.distance if path is not None else math.inf,
        outcome=search.outcome,
        stats=search.stats,
    )
