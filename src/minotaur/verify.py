# Structural checks on a carved grid. Used by the test-suite and `minotaur --check`.

from typing import List

from .cell import DIRECTIONS, Cell, link_count, opposite
from .grid import Grid


def flag_count(grid: Grid) -> int:
    return sum(link_count(c) for c in grid.cells)


def asymmetric_links(grid: Grid) -> List[int]:
    """Indices whose flags are not mirrored by the neighbor (or point off-grid)."""
    bad = []
    for i, cell in enumerate(grid.cells):
        for d in DIRECTIONS:
            if not grid.valid_direction(i, d):
                if d in cell:
                    bad.append(i)
                    break
                continue
            n = grid.neighbor(i, d)
            if (d in cell) != (opposite(d) in grid.cells[n]):
                bad.append(i)
                break
    return bad


def is_symmetric(grid: Grid) -> bool:
    return not asymmetric_links(grid)


def _find(parent: List[int], i: int) -> int:
    while parent[i] != i:
        parent[i] = parent[parent[i]]
        i = parent[i]
    return i


def is_perfect(grid: Grid) -> bool:
    """
    True when the open links form a spanning tree: symmetric flags,
    exactly w*h-1 edges and no cycle (which together imply connected).
    """
    n = len(grid)
    if not is_symmetric(grid) or flag_count(grid) != 2 * n - 2:
        return False
    parent = list(range(n))
    for i, cell in enumerate(grid.cells):
        # Each edge once: from its west/north endpoint.
        for d in (Cell.SOUTH, Cell.EAST):
            if d not in cell:
                continue
            a, b = _find(parent, i), _find(parent, grid.neighbor(i, d))
            if a == b:
                return False
            parent[a] = b
    return True
