from minotaur.cell import Cell
from minotaur.grid import Grid
from minotaur.verify import asymmetric_links, flag_count, is_perfect, is_symmetric

def test_one_sided_flag_is_caught():
    g = Grid(2, 2)
    g.cells[0] |= Cell.EAST
    assert asymmetric_links(g) == [0]
    assert not is_symmetric(g)

def test_flag_pointing_off_grid_is_caught():
    g = Grid(2, 1)
    g.cells[0] |= Cell.NORTH
    assert not is_symmetric(g)

def test_cycle_is_not_perfect():
    # Closing the fourth side of a 2x2 block makes a loop.
    g = Grid(2, 2)
    g.link(0, Cell.EAST)
    g.link(0, Cell.SOUTH)
    g.link(1, Cell.SOUTH)
    assert is_perfect(g)
    g.link(2, Cell.EAST)
    assert flag_count(g) == 8
    assert not is_perfect(g)

def test_right_edge_count_but_disconnected():
    # Cell 2 is cut off while the 0-1-4-3 square closes a loop.
    g = Grid(3, 2)
    g.link(0, Cell.EAST)
    g.link(0, Cell.SOUTH)
    g.link(1, Cell.SOUTH)
    g.link(3, Cell.EAST)
    g.link(4, Cell.EAST)
    assert flag_count(g) == 2 * 6 - 2
    assert not is_perfect(g)
