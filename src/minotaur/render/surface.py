# src/minotaur/render/surface.py
from __future__ import annotations

from typing import Tuple

import pygame

from ..cell import Cell
from ..grid import Grid

RGB = Tuple[int, int, int]


def draw_grid(
    screen: pygame.Surface,
    grid: Grid,
    origin_xy: Tuple[int, int],
    cell_size: int,
    wall_size: int,
    background: RGB,
    wall: RGB,
) -> None:
    """
    Paint the maze onto an existing surface with the same geometry as the
    Pillow renderer, so a saved PNG matches what the viewer shows.
    """
    ox, oy = origin_xy
    c, t = cell_size, wall_size
    w, h = c * grid.width + t, c * grid.height + t
    pygame.draw.rect(screen, background, pygame.Rect(ox, oy, w, h))
    if t == 0:
        return
    for i, cell in enumerate(grid.cells):
        cx, cy = grid.coords(i)
        x, y = ox + cx * c, oy + cy * c
        if Cell.NORTH not in cell:
            pygame.draw.rect(screen, wall, pygame.Rect(x, y, c + 1, t))
        if Cell.SOUTH not in cell:
            pygame.draw.rect(screen, wall, pygame.Rect(x, y + c, c + t, t))
        if Cell.WEST not in cell:
            pygame.draw.rect(screen, wall, pygame.Rect(x, y, t, c + 1))
        if Cell.EAST not in cell:
            pygame.draw.rect(screen, wall, pygame.Rect(x + c, y, t, c + 1))
