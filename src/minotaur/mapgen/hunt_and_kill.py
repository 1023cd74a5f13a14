# src/minotaur/mapgen/hunt_and_kill.py

import heapq
from typing import Optional, Set

from ..cell import DIRECTIONS
from ..grid import Grid
from ..rng import Pcg32, resolve_rng
from .moves import open_moves


def _attach(grid: Grid, i: int, visited: Set[int]) -> None:
    # First visited neighbor in canonical order, not a random one.
    for d in DIRECTIONS:
        if grid.valid_direction(i, d) and grid.neighbor(i, d) in visited:
            grid.link(i, d)
            return


def hunt_and_kill(grid: Grid, seed: Optional[int] = None, *, rng: Optional[Pcg32] = None) -> None:
    """
    Walk:  from the current cell, push every unvisited neighbor onto the
           frontier, then step to one of them at random, linking as we go.
    Hunt:  once boxed in, pop the frontier (lowest index first) until an
           unvisited cell turns up, attach it to the tree and walk again.
    The frontier is a min-heap, so the hunt is the classic top-left scan
    without rescanning the whole grid.
    """
    rng = resolve_rng(seed, rng)
    grid.reset()

    current = rng.below(len(grid))
    visited = {current}
    frontier = [current]

    while True:
        moves = open_moves(grid, current, visited)
        while moves:
            for d in moves:
                heapq.heappush(frontier, grid.neighbor(current, d))
            current = grid.link(current, rng.choice(moves))
            visited.add(current)
            moves = open_moves(grid, current, visited)

        while current in visited and frontier:
            current = heapq.heappop(frontier)
        if current in visited:
            break

        # Attach even when that pop emptied the frontier.
        visited.add(current)
        _attach(grid, current, visited)
