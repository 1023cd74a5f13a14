# Direction sampling shared by the walking carvers.

from typing import Iterable, List

from ..cell import DIRECTIONS, Cell
from ..grid import Grid
from ..rng import Pcg32


def random_step(grid: Grid, i: int, rng: Pcg32) -> Cell:
    """Draw from all four directions, re-drawing until the move stays on the grid."""
    while True:
        d = rng.choice(DIRECTIONS)
        if grid.valid_direction(i, d):
            return d


def open_moves(grid: Grid, i: int, visited: Iterable[int]) -> List[Cell]:
    """Directions from i into unvisited cells, in canonical order."""
    return [
        d for d in DIRECTIONS
        if grid.valid_direction(i, d) and grid.neighbor(i, d) not in visited
    ]
