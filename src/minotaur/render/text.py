# ASCII rendering: two text lines per grid row (cells, then south walls).

from ..cell import Cell
from ..grid import Grid


def render_ascii(grid: Grid) -> str:
    """
    +---+---+
    |       |
    +   +---+
    |   |   |
    +---+---+
    """
    lines = ["+" + "---+" * grid.width]
    for row in grid.as_rows():
        top = "|"
        bottom = "+"
        for cell in row:
            top += "   " + (" " if Cell.EAST in cell else "|")
            bottom += ("   " if Cell.SOUTH in cell else "---") + "+"
        lines.append(top)
        lines.append(bottom)
    return "\n".join(lines) + "\n"
