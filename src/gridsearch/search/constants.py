"""
Shared constants for the search subsystem.
"""

from typing import Tuple

# Neighbour enumeration order: top, right, bottom, left. Diagonals never.
NEIGHBOUR_OFFSETS: Tuple[Tuple[str, Tuple[int, int]], ...] = (
    ("top",    (-1, 0)),
    ("right",  (0, 1)),
    ("bottom", (1, 0)),
    ("left",   (0, -1)),
)
