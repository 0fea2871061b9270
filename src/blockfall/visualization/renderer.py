from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame


BACKGROUND = (0, 0, 0)
BORDER = (0, 0, 0)
GRID_LINE = (50, 50, 50)


class Renderer:
    def __init__(self, cell_size: int = 20) -> None:
        self.cell_size = cell_size

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        return width * self.cell_size, height * self.cell_size

    def draw_cells(self, surface: pygame.Surface, state: np.ndarray) -> None:
        h, w, _ = state.shape
        for y in range(h):
            for x in range(w):
                # Empty cells have zero alpha.
                if not state[y, x, 3]:
                    continue
                rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
                pygame.draw.rect(surface, tuple(int(c) for c in state[y, x, :3]), rect)
                pygame.draw.rect(surface, BORDER, rect, 1)

    def draw_grid(self, surface: pygame.Surface, width: int, height: int) -> None:
        px_w, px_h = self.window_size(width, height)
        for x in range(0, px_w + 1, self.cell_size):
            pygame.draw.line(surface, GRID_LINE, (x, 0), (x, px_h))
        for y in range(0, px_h + 1, self.cell_size):
            pygame.draw.line(surface, GRID_LINE, (0, y), (px_w, y))

    def render(self, surface: pygame.Surface, state: np.ndarray) -> None:
        h, w, _ = state.shape
        surface.fill(BACKGROUND)
        self.draw_cells(surface, state)
        self.draw_grid(surface, w, h)
