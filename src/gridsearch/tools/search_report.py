"""
gridsearch — Search Report
===========================

Plain-text dump of a finished search, for terminals and log files.

Usage:
    from gridsearch.tools.search_report import render_search, summarize

    result = find_path(grid, start, finish)
    print(summarize(result))
    print(render_search(grid, result.visited, result.path, start, finish))

Legend:
    S start   F finish   # wall   * path   o visited   . untouched
"""

from typing import Any, Iterable, List, Optional

from gridsearch.config import (
    WALL_GLYPH, START_GLYPH, FINISH_GLYPH, OPEN_GLYPH, PATH_GLYPH, VISITED_GLYPH,
)


def render_search(grid: Any, visited: Iterable[Any], path: Optional[Iterable[Any]],
                  start: Any = None, finish: Any = None) -> str:
    """Render the grid row by row; later layers win (path over visited)."""
    canvas: List[List[str]] = [
        [WALL_GLYPH if node.is_wall else OPEN_GLYPH for node in row]
        for row in grid.rows
    ]
    for node in visited:
        canvas[node.row][node.col] = VISITED_GLYPH
    for node in path or ():
        canvas[node.row][node.col] = PATH_GLYPH
    if start is not None:
        canvas[start.row][start.col] = START_GLYPH
    if finish is not None:
        canvas[finish.row][finish.col] = FINISH_GLYPH
    return "\n".join("".join(row) for row in canvas)


def summarize(result: Any) -> str:
    """One-line summary of a SearchResult."""
    if result.path is None:
        return (f"{result.outcome.value}: no path "
                f"({len(result.visited)} visited)")
    return (f"{result.outcome.value}: cost {result.cost:g}, "
            f"{len(result.path)} steps, {len(result.visited)} visited, "
            f"{result.stats.relaxations} relaxations")
