# src/minotaur/mapgen/recursive_backtracker.py

from typing import Optional

from ..grid import Grid
from ..rng import Pcg32, resolve_rng
from .moves import open_moves


def recursive_backtracker(grid: Grid, seed: Optional[int] = None, *, rng: Optional[Pcg32] = None) -> None:
    """
    Depth-first carve with an explicit stack: keep stepping to a random
    unvisited neighbor; when boxed in, drop dead cells off the stack until
    the top one still has somewhere to go, then carry on from there.
    """
    rng = resolve_rng(seed, rng)
    grid.reset()

    current = rng.below(len(grid))
    visited = {current}
    stack = [current]

    while stack:
        moves = open_moves(grid, current, visited)
        while moves:
            current = grid.link(current, rng.choice(moves))
            visited.add(current)
            stack.append(current)
            moves = open_moves(grid, current, visited)

        # The cell we resume from stays on the stack.
        while stack and not open_moves(grid, stack[-1], visited):
            stack.pop()
        if stack:
            current = stack[-1]
