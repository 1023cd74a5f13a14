# src/minotaur/mapgen/binary_tree.py

from typing import Optional

from ..cell import Cell
from ..grid import Grid
from ..rng import Pcg32, resolve_rng


def binary_tree(grid: Grid, seed: Optional[int] = None, *, rng: Optional[Pcg32] = None) -> None:
    """
    Visit every cell in row-major order and link it NORTH or EAST:
      - both valid: a fair coin decides (the only time a bit is drawn),
      - only one valid: take it,
      - neither (the north-east corner): leave it.
    Long corridors run along the north row and east column.
    """
    rng = resolve_rng(seed, rng)
    grid.reset()

    for i in range(len(grid)):
        north = grid.valid_direction(i, Cell.NORTH)
        east = grid.valid_direction(i, Cell.EAST)
        if north and (not east or rng.coin()):
            grid.link(i, Cell.NORTH)
        elif east:
            grid.link(i, Cell.EAST)
