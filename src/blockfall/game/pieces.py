from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class PieceKind(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray
Color = Tuple[int, int, int, int]
Coordinate = Tuple[int, int]


def _frozen(rows: List[List[int]]) -> Shape:
    shape = np.array(rows, dtype=np.int8)
    shape.setflags(write=False)
    return shape


def rotate_cw(shape: Shape) -> Shape:
    """Return a clockwise-rotated, read-only copy of ``shape``."""
    rotated = np.rot90(shape, 1, axes=(1, 0)).copy()
    rotated.setflags(write=False)
    return rotated


# Square matrices so that rotation keeps the bounding box fixed.
BASE_SHAPES: Dict[PieceKind, Shape] = {
    PieceKind.I: _frozen([[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]]),
    PieceKind.O: _frozen([[1, 1], [1, 1]]),
    PieceKind.T: _frozen([[0, 1, 0], [1, 1, 1], [0, 0, 0]]),
    PieceKind.S: _frozen([[0, 1, 1], [1, 1, 0], [0, 0, 0]]),
    PieceKind.Z: _frozen([[1, 1, 0], [0, 1, 1], [0, 0, 0]]),
    PieceKind.J: _frozen([[0, 0, 1], [1, 1, 1], [0, 0, 0]]),
    PieceKind.L: _frozen([[1, 0, 0], [1, 1, 1], [0, 0, 0]]),
}

COLORS: Dict[PieceKind, Color] = {
    PieceKind.I: (0, 255, 255, 255),    # cyan
    PieceKind.O: (255, 255, 0, 255),    # yellow
    PieceKind.T: (128, 0, 128, 255),    # purple
    PieceKind.S: (0, 255, 0, 255),      # green
    PieceKind.Z: (255, 0, 0, 255),      # red
    PieceKind.J: (0, 0, 255, 255),      # blue
    PieceKind.L: (255, 165, 0, 255),    # orange
}


def shape_cells(shape: Shape, origin_x: int, origin_y: int) -> List[Coordinate]:
    h, w = shape.shape
    cells: List[Coordinate] = []
    for dy in range(h):
        for dx in range(w):
            if shape[dy, dx]:
                cells.append((origin_x + dx, origin_y + dy))
    return cells


@dataclass(frozen=True, eq=False)
class ActivePiece:
    """The falling piece: its kind, current rotated matrix and board origin.

    ``x``/``y`` address the top-left cell of ``shape``. Instances are values;
    moving or rotating returns a new piece and leaves the catalog untouched.
    """

    kind: PieceKind
    shape: Shape
    x: int
    y: int

    @classmethod
    def spawn(cls, kind: PieceKind, board_width: int) -> "ActivePiece":
        shape = BASE_SHAPES[kind]
        return cls(kind=kind, shape=shape, x=(board_width - shape.shape[1]) // 2, y=0)

    @property
    def color(self) -> Color:
        return COLORS[self.kind]

    def cells(self) -> List[Coordinate]:
        return shape_cells(self.shape, self.x, self.y)

    def moved(self, dx: int, dy: int) -> "ActivePiece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> "ActivePiece":
        return replace(self, shape=rotate_cw(self.shape))
