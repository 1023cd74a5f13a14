import pygame
import pytest

from minotaur.cell import Cell
from minotaur.grid import Grid
from minotaur.mapgen.recursive_backtracker import recursive_backtracker
from minotaur.render.image import image_size, render_image
from minotaur.render.surface import draw_grid
from minotaur.render.text import render_ascii

WHITE, BLACK = (255, 255, 255), (0, 0, 0)

def two_by_two():
    g = Grid(2, 2)
    g.link(0, Cell.EAST)
    g.link(0, Cell.SOUTH)
    g.link(1, Cell.SOUTH)
    return g

def test_ascii_layout():
    want = (
        "+---+---+\n"
        "|       |\n"
        "+   +   +\n"
        "|   |   |\n"
        "+---+---+\n"
    )
    assert render_ascii(two_by_two()) == want

def test_ascii_dimensions():
    g = Grid(7, 4)
    recursive_backtracker(g, 1)
    lines = render_ascii(g).splitlines()
    assert len(lines) == 2 * 4 + 1
    assert all(len(ln) == 4 * 7 + 1 for ln in lines)

def test_single_cell_image():
    img = render_image(Grid(1, 1), cell_size=10, wall_size=1, background=WHITE, wall=BLACK)
    assert img.size == (11, 11)
    assert img.getpixel((5, 5)) == WHITE
    for xy in [(0, 0), (10, 10), (5, 0), (0, 5), (10, 5), (5, 10)]:
        assert img.getpixel(xy) == BLACK, xy

def test_open_side_is_not_drawn():
    g = Grid(2, 1)
    g.link(0, Cell.EAST)
    img = render_image(g, 10, 1, WHITE, BLACK)
    assert img.size == image_size(g, 10, 1) == (21, 11)
    assert img.getpixel((10, 5)) == WHITE
    assert img.getpixel((10, 0)) == BLACK
    assert img.getpixel((20, 5)) == BLACK

def test_thick_walls_and_colors():
    red, blue = (200, 0, 0), (0, 0, 200)
    img = render_image(Grid(1, 1), cell_size=8, wall_size=3, background=blue, wall=red)
    assert img.size == (11, 11)
    assert img.getpixel((2, 5)) == red
    assert img.getpixel((5, 5)) == blue

def test_zero_wall_is_plain_background():
    img = render_image(Grid(3, 2), cell_size=4, wall_size=0, background=WHITE, wall=BLACK)
    assert img.size == (12, 8)
    assert set(img.getdata()) == {WHITE}

def test_bad_sizes():
    with pytest.raises(ValueError):
        render_image(Grid(1, 1), cell_size=0)

def test_surface_matches_image_geometry():
    g = Grid(2, 1)
    g.link(0, Cell.EAST)
    surf = pygame.Surface(image_size(g, 10, 1))
    draw_grid(surf, g, (0, 0), 10, 1, WHITE, BLACK)
    img = render_image(g, 10, 1, WHITE, BLACK)
    for x in range(21):
        for y in range(11):
            assert tuple(surf.get_at((x, y)))[:3] == img.getpixel((x, y)), (x, y)
