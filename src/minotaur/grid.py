# src/minotaur/grid.py
# Row-major maze storage: index i is column i % width, row i // width.

from dataclasses import dataclass, field
from typing import List, Tuple

from .cell import Cell, EMPTY, is_direction, opposite


class DirectionError(AssertionError):
    """
    A move that no correct carver makes: a non-canonical direction code or a
    step off the edge of the grid. Never caught inside the package.
    """


@dataclass
class Grid:
    width: int
    height: int
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name, v in (("width", self.width), ("height", self.height)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"grid {name} must be an integer, got {v!r}")
            if v < 1:
                raise ValueError(f"grid {name} must be >= 1, got {v}")
        if not self.cells:
            self.cells = [EMPTY] * (self.width * self.height)
        elif len(self.cells) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} cells for a "
                f"{self.width}x{self.height} grid, got {len(self.cells)}"
            )
        else:
            self.cells = [Cell(c) for c in self.cells]

    def __len__(self) -> int:
        return len(self.cells)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def coords(self, i: int) -> Tuple[int, int]:
        return i % self.width, i // self.width

    def reset(self) -> None:
        """Wall every cell in again; carvers call this before they start."""
        self.cells = [EMPTY] * (self.width * self.height)

    def valid_direction(self, i: int, d: Cell) -> bool:
        w = self.width
        if d == Cell.NORTH:
            return i >= w
        if d == Cell.SOUTH:
            return i + w < len(self.cells)
        if d == Cell.EAST:
            return (i + 1) % w != 0
        if d == Cell.WEST:
            return i % w != 0
        return False

    def neighbor(self, i: int, d: Cell) -> int:
        if not self.valid_direction(i, d):
            raise DirectionError(f"no neighbor {d!r} of cell {i} in a {self.width}x{self.height} grid")
        if d == Cell.NORTH:
            return i - self.width
        if d == Cell.SOUTH:
            return i + self.width
        if d == Cell.EAST:
            return i + 1
        return i - 1

    def link(self, i: int, d: Cell) -> int:
        """
        Open the wall between cell i and its neighbor in direction d, setting
        the reciprocal flag on the neighbor. Returns the neighbor index.
        """
        if not is_direction(d):
            raise DirectionError(f"not a single cardinal direction: {d!r}")
        n = self.neighbor(i, d)
        self.cells[i] |= d
        self.cells[n] |= opposite(d)
        return n

    def as_rows(self) -> List[List[Cell]]:
        w = self.width
        return [self.cells[y * w:(y + 1) * w] for y in range(self.height)]
