from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from .pieces import Color, Coordinate


logger = logging.getLogger(__name__)


class Board:
    """Fixed-size grid of locked cells.

    Row 0 is the top of the board. Each cell is either empty or holds the
    RGBA color of the piece that locked there. Occupancy and color live in
    separate numpy planes.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.filled = np.zeros((self.height, self.width), dtype=np.bool_)
        self.colors = np.zeros((self.height, self.width, 4), dtype=np.uint8)

    def reset(self) -> None:
        self.filled.fill(False)
        self.colors.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        # No lower bound on y: rows above the board are legal but never stored.
        return 0 <= x < self.width and y < self.height

    def _check_stored(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.width}x{self.height} board")

    def is_occupied(self, x: int, y: int) -> bool:
        self._check_stored(x, y)
        return bool(self.filled[y, x])

    def cell_at(self, x: int, y: int) -> Optional[Color]:
        self._check_stored(x, y)
        if not self.filled[y, x]:
            return None
        r, g, b, a = (int(c) for c in self.colors[y, x])
        return (r, g, b, a)

    def is_row_full(self, y: int) -> bool:
        self._check_stored(0, y)
        return bool(np.all(self.filled[y]))

    def is_row_empty(self, y: int) -> bool:
        self._check_stored(0, y)
        return not bool(np.any(self.filled[y]))

    def lock_cells(self, cells: Iterable[Coordinate], color: Color) -> int:
        """Write ``color`` into every cell that lies on the board.

        Cells above the board (negative y) are dropped, so a piece locking
        partially off the top loses those cells. Returns the number written.
        """
        written = 0
        for x, y in cells:
            if 0 <= y < self.height and 0 <= x < self.width:
                self.filled[y, x] = True
                self.colors[y, x] = color
                written += 1
        return written

    def clear_full_rows(self) -> int:
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                # Shift everything above down one row; re-check the same index.
                self.filled[1 : y + 1] = self.filled[0:y].copy()
                self.colors[1 : y + 1] = self.colors[0:y].copy()
                self.filled[0] = False
                self.colors[0] = 0
                cleared += 1
            else:
                y -= 1
        if cleared:
            logger.debug("Removed %d full row(s)", cleared)
        return cleared

    def snapshot(self) -> np.ndarray:
        """Read-only RGBA copy of the board; empty cells are all zero."""
        state = np.where(self.filled[..., None], self.colors, 0).astype(np.uint8)
        state.setflags(write=False)
        return state
