import pytest

from minotaur.cell import EMPTY, Cell
from minotaur.grid import DirectionError, Grid

N, S, E, W = Cell.NORTH, Cell.SOUTH, Cell.EAST, Cell.WEST

@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3), (2.5, 2), (True, 3)])
def test_degenerate_dimensions_rejected(w, h):
    with pytest.raises(ValueError):
        Grid(w, h)

def test_new_grid_is_walled():
    g = Grid(4, 3)
    assert len(g) == 12
    assert all(c == EMPTY for c in g.cells)

def test_cell_count_must_match():
    with pytest.raises(ValueError):
        Grid(2, 2, [0, 0, 0])

def test_index_coords():
    g = Grid(5, 4)
    assert g.index(3, 2) == 13
    assert g.coords(13) == (3, 2)

def test_valid_direction_borders():
    g = Grid(3, 3)
    # 0 1 2
    # 3 4 5
    # 6 7 8
    assert not g.valid_direction(0, N) and not g.valid_direction(0, W)
    assert g.valid_direction(0, S) and g.valid_direction(0, E)
    assert not g.valid_direction(2, E)
    assert not g.valid_direction(8, S) and not g.valid_direction(8, E)
    assert all(g.valid_direction(4, d) for d in (N, S, E, W))
    assert not g.valid_direction(4, N | S)

def test_neighbor():
    g = Grid(3, 3)
    assert [g.neighbor(4, d) for d in (N, S, E, W)] == [1, 7, 5, 3]

def test_neighbor_off_grid_is_fatal():
    g = Grid(3, 3)
    with pytest.raises(DirectionError):
        g.neighbor(0, N)
    with pytest.raises(AssertionError):
        g.neighbor(5, E)

def test_link_sets_both_sides():
    g = Grid(3, 3)
    assert g.link(4, W) == 3
    assert g.cells[4] == W and g.cells[3] == E
    g.link(4, N)
    assert g.cells[4] == W | N and g.cells[1] == S

@pytest.mark.parametrize("i,d", [(0, N | E), (0, EMPTY), (2, E), (6, S)])
def test_link_rejects_bad_moves(i, d):
    g = Grid(3, 3)
    with pytest.raises(DirectionError):
        g.link(i, d)
    assert all(c == EMPTY for c in g.cells)

def test_reset():
    g = Grid(2, 2)
    g.link(0, E)
    g.reset()
    assert all(c == EMPTY for c in g.cells)

def test_as_rows():
    g = Grid(2, 3)
    g.link(4, E)
    rows = g.as_rows()
    assert len(rows) == 3 and rows[2] == [E, W]
