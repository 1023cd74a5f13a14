# src/minotaur/mapgen/sidewinder.py

from typing import Optional

from ..cell import Cell
from ..grid import Grid
from ..rng import Pcg32, resolve_rng


def sidewinder(grid: Grid, seed: Optional[int] = None, *, rng: Optional[Pcg32] = None) -> None:
    """
    Row-major pass that grows eastward "runs". When a run closes (coin says
    NORTH, or the row ends), one cell drawn uniformly from the run is linked
    NORTH and the next run starts at i+1. The top row has no NORTH, so it
    becomes a single corridor.
    """
    rng = resolve_rng(seed, rng)
    grid.reset()

    # First cell that can ever link NORTH is the west end of row 1.
    run_start = grid.width

    for i in range(len(grid)):
        north = grid.valid_direction(i, Cell.NORTH)
        east = grid.valid_direction(i, Cell.EAST)

        if north and (not east or rng.coin()):
            chosen = run_start + rng.below(i + 1 - run_start)
            grid.link(chosen, Cell.NORTH)
            run_start = i + 1
        elif east:
            grid.link(i, Cell.EAST)
        else:
            # East end of the top row.
            run_start = i + 1
