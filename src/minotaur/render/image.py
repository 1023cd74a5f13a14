# Raster rendering with Pillow.
# Each cell owns a cell_size square; every closed side is a wall_size-thick band
# along that edge. Image is (cell_size*w + wall_size) x (cell_size*h + wall_size).

from typing import Tuple

from PIL import Image, ImageDraw

from ..cell import Cell
from ..grid import Grid

RGB = Tuple[int, int, int]


def image_size(grid: Grid, cell_size: int, wall_size: int) -> Tuple[int, int]:
    return cell_size * grid.width + wall_size, cell_size * grid.height + wall_size


def render_image(
    grid: Grid,
    cell_size: int = 10,
    wall_size: int = 1,
    background: RGB = (255, 255, 255),
    wall: RGB = (0, 0, 0),
) -> Image.Image:
    if cell_size < 1 or wall_size < 0:
        raise ValueError(f"bad cell/wall size: {cell_size}/{wall_size}")
    img = Image.new("RGB", image_size(grid, cell_size, wall_size), background)
    if wall_size == 0:
        return img
    draw = ImageDraw.Draw(img)
    c, t = cell_size, wall_size
    # Pillow rectangles are inclusive on both corners.
    for i, cell in enumerate(grid.cells):
        cx, cy = grid.coords(i)
        x, y = cx * c, cy * c
        if Cell.NORTH not in cell:
            draw.rectangle([x, y, x + c, y + t - 1], fill=wall)
        if Cell.SOUTH not in cell:
            draw.rectangle([x, y + c, x + c + t - 1, y + c + t - 1], fill=wall)
        if Cell.WEST not in cell:
            draw.rectangle([x, y, x + t - 1, y + c], fill=wall)
        if Cell.EAST not in cell:
            draw.rectangle([x + c, y, x + c + t - 1, y + c], fill=wall)
    return img
