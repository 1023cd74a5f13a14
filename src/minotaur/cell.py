# Cell flags and direction helpers shared by the grid and every carver.
# Bit values match the .mz snapshot layout (one byte per cell).

from enum import IntFlag
from typing import Tuple


class Cell(IntFlag):
    NORTH = 0b0001
    SOUTH = 0b0010
    EAST = 0b0100
    WEST = 0b1000


EMPTY = Cell(0)
ALL_OPEN = Cell.NORTH | Cell.SOUTH | Cell.EAST | Cell.WEST

# Canonical enumeration order. Carvers that pick "the first" direction rely on it.
DIRECTIONS: Tuple[Cell, ...] = (Cell.NORTH, Cell.SOUTH, Cell.EAST, Cell.WEST)

_OPPOSITE = {
    Cell.NORTH: Cell.SOUTH,
    Cell.SOUTH: Cell.NORTH,
    Cell.EAST: Cell.WEST,
    Cell.WEST: Cell.EAST,
}


def is_direction(d: int) -> bool:
    """True only for the four single-bit directions."""
    return d in _OPPOSITE


def opposite(d: Cell) -> Cell:
    return _OPPOSITE[d]


def link_count(cell: int) -> int:
    # Number of open sides (0..4).
    return bin(cell & ALL_OPEN).count("1")
