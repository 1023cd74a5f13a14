# src/minotaur/mapgen/generator.py
# Algorithm registry and the single entry point the CLI, viewer and bench use.

import logging
from typing import Callable, Dict, Optional

from ..config import MazeConfig
from ..grid import Grid
from ..rng import Pcg32
from .aldous_broder import aldous_broder
from .binary_tree import binary_tree
from .hunt_and_kill import hunt_and_kill
from .recursive_backtracker import recursive_backtracker
from .sidewinder import sidewinder
from .wilsons import wilsons

logger = logging.getLogger(__name__)

Carver = Callable[..., None]

# Canonical names, in the order the CLI lists them.
ALGORITHMS: Dict[str, Carver] = {
    "binary-tree": binary_tree,
    "sidewinder": sidewinder,
    "aldous-broder": aldous_broder,
    "wilsons": wilsons,
    "hunt-and-kill": hunt_and_kill,
    "recursive-backtracker": recursive_backtracker,
}


def _squash(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())


_BY_SQUASHED = {_squash(k): k for k in ALGORITHMS}


def canonical_name(name: str) -> str:
    """
    Map "AldousBroder", "aldous_broder", "Aldous-Broder" etc. to the
    registry key. Raises KeyError listing the valid names.
    """
    try:
        return _BY_SQUASHED[_squash(name)]
    except KeyError:
        raise KeyError(
            f"unknown algorithm {name!r}; choose one of: {', '.join(ALGORITHMS)}"
        ) from None


def lookup(name: str) -> Carver:
    return ALGORITHMS[canonical_name(name)]


def generate(
    grid: Grid,
    algorithm: str,
    seed: Optional[int] = None,
    *,
    rng: Optional[Pcg32] = None,
) -> Grid:
    carve = lookup(algorithm)
    carve(grid, seed, rng=rng)
    logger.debug(
        "carved %dx%d maze with %s (seed=%s)",
        grid.width, grid.height, canonical_name(algorithm), seed,
    )
    return grid


def generate_from_config(config: MazeConfig) -> Grid:
    grid = Grid(config.width, config.height)
    return generate(grid, config.algorithm, config.seed)
