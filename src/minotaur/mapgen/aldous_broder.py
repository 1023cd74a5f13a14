# src/minotaur/mapgen/aldous_broder.py

from typing import Optional

from ..grid import Grid
from ..rng import Pcg32, resolve_rng
from .moves import random_step


def aldous_broder(grid: Grid, seed: Optional[int] = None, *, rng: Optional[Pcg32] = None) -> None:
    """
    Uniform spanning tree by random walk: wander from a random cell and link
    every step that enters a cell for the first time, until all are visited.
    Runtime is the walk's cover time; there is no step cap.
    """
    rng = resolve_rng(seed, rng)
    grid.reset()

    total = len(grid)
    visited = [False] * total
    current = rng.below(total)
    visited[current] = True
    num_visited = 1

    while num_visited < total:
        d = random_step(grid, current, rng)
        nxt = grid.neighbor(current, d)
        if not visited[nxt]:
            grid.link(current, d)
            visited[nxt] = True
            num_visited += 1
        current = nxt
