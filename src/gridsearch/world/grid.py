import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from gridsearch.config import (
    DEFAULT_NODE_COST, START_NODE_COST,
    WALL_GLYPH, START_GLYPH, FINISH_GLYPH, OPEN_GLYPH,
)
from gridsearch.core.errors import InvalidGrid, NodeNotInGrid

Coord = Tuple[int, int]


@dataclass(eq=False)
class Node:
    row: int
    col: int
    cost: float = DEFAULT_NODE_COST     # Paid when the search enters this cell
    is_wall: bool = False
    is_visited: bool = False            # Owned by the visual layer; the search only reads it
    distance: float = math.inf
    predecessor: Optional[Coord] = None  # Coordinate, not a node reference
    terrain: str = "open"

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def __repr__(self) -> str:
        flags = " wall" if self.is_wall else ""
        return f"Node({self.row}, {self.col}, cost={self.cost}, distance={self.distance}{flags})"


class Grid:
    """Rectangular, zero-indexed arrangement of nodes, addressed by (row, col)."""

    def __init__(self, rows: Sequence[Sequence[Node]]):
        self.rows: List[List[Node]] = [list(r) for r in rows]
        self.landmarks: Dict[str, Coord] = {}
        self.validate()

    # ================================================================
    # CONSTRUCTION
    # ================================================================

    @classmethod
    def blank(cls, n_rows: int, n_cols: int,
              cost: float = DEFAULT_NODE_COST) -> "Grid":
        return cls([[Node(r, c, cost=cost) for c in range(n_cols)]
                    for r in range(n_rows)])

    @classmethod
    def from_layout(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid from an ASCII layout.

        ``#`` is a wall, ``S`` the start (entry cost START_NODE_COST),
        ``F`` the finish, ``.`` an open cell with the default cost, and a
        digit an open cell with that entry cost. Start and finish positions
        are recorded under ``landmarks["start"]`` / ``landmarks["finish"]``.
        """
        rows: List[List[Node]] = []
        landmarks: Dict[str, Coord] = {}
        for r, line in enumerate(lines):
            row: List[Node] = []
            for c, ch in enumerate(line.strip()):
                if ch == WALL_GLYPH:
                    row.append(Node(r, c, is_wall=True, terrain="wall"))
                elif ch == START_GLYPH:
                    row.append(Node(r, c, cost=START_NODE_COST))
                    landmarks["start"] = (r, c)
                elif ch == FINISH_GLYPH:
                    row.append(Node(r, c))
                    landmarks["finish"] = (r, c)
                elif ch == OPEN_GLYPH:
                    row.append(Node(r, c))
                elif ch.isdigit():
                    row.append(Node(r, c, cost=float(ch)))
                else:
                    raise InvalidGrid(f"Unknown layout glyph {ch!r} at ({r}, {c})")
            rows.append(row)
        grid = cls(rows)
        grid.landmarks.update(landmarks)
        return grid

    # ================================================================
    # ACCESS
    # ================================================================

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __len__(self) -> int:
        return self.height * self.width

    def __getitem__(self, row: int) -> List[Node]:
        return self.rows[row]

    def get_node(self, row: int, col: int) -> Optional[Node]:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.rows[row][col]
        return None

    def landmark(self, name: str) -> Node:
        if name not in self.landmarks:
            raise NodeNotInGrid(f"Grid has no '{name}' landmark")
        return self.get_node(*self.landmarks[name])

    def nodes(self) -> Iterator[Node]:
        """Row-major iteration over every node."""
        for row in self.rows:
            yield from row

    def contains(self, node: Optional[Node]) -> bool:
        if node is None:
            return False
        return self.get_node(node.row, node.col) is node

    def require(self, node: Optional[Node], role: str = "node") -> Node:
        if not self.contains(node):
            raise NodeNotInGrid(f"{role} {node!r} is not a member of this grid")
        return node

    # ================================================================
    # STATE
    # ================================================================

    def validate(self) -> None:
        """Raise InvalidGrid unless the grid is non-empty, rectangular,
        correctly labelled and free of negative costs."""
        if not self.rows or not self.rows[0]:
            raise InvalidGrid("Grid is empty")
        width = len(self.rows[0])
        for r, row in enumerate(self.rows):
            if len(row) != width:
                raise InvalidGrid(f"Row {r} has {len(row)} cells, expected {width}")
            for c, node in enumerate(row):
                if node.coord != (r, c):
                    raise InvalidGrid(f"Node labelled {node.coord} sits at {(r, c)}")
                if node.cost < 0:
                    raise InvalidGrid(f"Node {(r, c)} has negative cost {node.cost}")

    def reset(self, start: Node) -> None:
        """Prepare for a fresh run from start: distances to +inf (start to 0),
        predecessors cleared, visited flags cleared."""
        self.require(start, "start")
        for node in self.nodes():
            node.distance = math.inf
            node.predecessor = None
            node.is_visited = False
        start.distance = 0

    def set_wall(self, row: int, col: int, is_wall: bool = True) -> None:
        node = self.get_node(row, col)
        if node is None:
            raise NodeNotInGrid(f"({row}, {col}) is outside a {self.height}x{self.width} grid")
        node.is_wall = is_wall
