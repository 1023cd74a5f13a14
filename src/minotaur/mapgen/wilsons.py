# src/minotaur/mapgen/wilsons.py

from typing import Dict, List, Optional, Set

from ..cell import Cell
from ..grid import Grid
from ..rng import Pcg32, resolve_rng
from .moves import random_step


def _pick_start(unvisited: Set[int], candidates: List[int], rng: Pcg32) -> int:
    # Rejection sampling keeps the pick uniform over what is still unvisited.
    while True:
        i = rng.choice(candidates)
        if i in unvisited:
            return i


def _refresh_candidates(unvisited: Set[int], candidates: List[int]) -> List[int]:
    # Shrink the list once rejections would dominate. Sorted keeps draws reproducible.
    if len(unvisited) * len(unvisited) < len(candidates):
        return sorted(unvisited)
    return candidates


def _walk(grid: Grid, start: int, unvisited: Set[int], rng: Pcg32) -> Dict[int, Cell]:
    """
    Random walk from start until it hits the tree. Only the last exit
    direction of each cell is kept, which erases any loop the walk closed.
    """
    path: Dict[int, Cell] = {}
    current = start
    while current in unvisited:
        d = random_step(grid, current, rng)
        path[current] = d
        current = grid.neighbor(current, d)
    return path


def wilsons(grid: Grid, seed: Optional[int] = None, *, rng: Optional[Pcg32] = None) -> None:
    """
    Uniform spanning tree by loop-erased random walks.

    One random root joins the tree with no walk. Then, until every cell is in
    the tree: pick an unvisited cell, walk until reaching the tree, and carve
    the loop-erased path from the start up to the first cell that was already
    in the tree.
    """
    rng = resolve_rng(seed, rng)
    grid.reset()

    unvisited = set(range(len(grid)))
    root = rng.below(len(grid))
    unvisited.discard(root)

    candidates = sorted(unvisited)

    while unvisited:
        candidates = _refresh_candidates(unvisited, candidates)

        start = _pick_start(unvisited, candidates, rng)
        path = _walk(grid, start, unvisited, rng)

        current = start
        while current in unvisited:
            d = path[current]
            unvisited.discard(current)
            current = grid.link(current, d)
