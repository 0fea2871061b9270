from __future__ import annotations

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from blockfall.game import BlockFallGame, GameConfig  # noqa: E402


GREY = (9, 9, 9, 255)


@pytest.fixture
def game() -> BlockFallGame:
    return BlockFallGame(GameConfig(random_seed=1234))


@pytest.fixture
def fill_row():
    def _fill(board, y, skip=(), color=GREY):
        return board.lock_cells([(x, y) for x in range(board.width) if x not in skip], color)

    return _fill
