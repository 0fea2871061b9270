from __future__ import annotations

from .grid import Board
from .pieces import Shape, shape_cells


def collides(shape: Shape, origin_x: int, origin_y: int, board: Board) -> bool:
    """Whether ``shape`` placed at the given origin overlaps a wall, the floor
    or a locked cell.

    Cells above the board (negative y) only test against the side walls.
    """
    for x, y in shape_cells(shape, origin_x, origin_y):
        if not board.is_inside(x, y):
            return True
        if y >= 0 and board.is_occupied(x, y):
            return True
    return False
