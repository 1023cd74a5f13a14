# src/minotaur/snapshot.py
# .mz snapshot: the grid as little-endian bytes in bincode-style order,
# length-prefixed cell flags followed by the dimensions.
#
#   u64 cell_count | cell_count x u8 flags | u64 width | u64 height

import logging
import struct
from typing import BinaryIO

from .cell import ALL_OPEN
from .grid import Grid

logger = logging.getLogger(__name__)

_U64 = struct.Struct("<Q")
_DIMS = struct.Struct("<QQ")


class SnapshotError(ValueError):
    pass


def dumps(grid: Grid) -> bytes:
    return (
        _U64.pack(len(grid))
        + bytes(int(c) for c in grid.cells)
        + _DIMS.pack(grid.width, grid.height)
    )


def loads(data: bytes) -> Grid:
    if len(data) < _U64.size:
        raise SnapshotError("snapshot truncated: missing cell count")
    (count,) = _U64.unpack_from(data, 0)
    expected = _U64.size + count + _DIMS.size
    if len(data) != expected:
        raise SnapshotError(f"snapshot is {len(data)} bytes, header implies {expected}")

    flags = data[_U64.size:_U64.size + count]
    width, height = _DIMS.unpack_from(data, _U64.size + count)
    if width < 1 or height < 1:
        raise SnapshotError(f"bad snapshot dimensions {width}x{height}")
    if width * height != count:
        raise SnapshotError(f"{count} cells do not fill a {width}x{height} grid")
    bad = [i for i, b in enumerate(flags) if b & ~int(ALL_OPEN)]
    if bad:
        raise SnapshotError(f"cell {bad[0]} has unknown flag bits: {flags[bad[0]]:#04x}")

    return Grid(width, height, list(flags))


def dump(grid: Grid, fp: BinaryIO) -> None:
    fp.write(dumps(grid))


def load(fp: BinaryIO) -> Grid:
    return loads(fp.read())


def save(grid: Grid, path: str) -> None:
    with open(path, "wb") as f:
        dump(grid, f)
    logger.info("wrote %dx%d snapshot to %s", grid.width, grid.height, path)


def open_snapshot(path: str) -> Grid:
    with open(path, "rb") as f:
        grid = load(f)
    logger.info("loaded %dx%d snapshot from %s", grid.width, grid.height, path)
    return grid
