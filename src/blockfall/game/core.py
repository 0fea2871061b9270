from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from .collision import collides
from .grid import Board
from .pieces import BASE_SHAPES, ActivePiece, PieceKind
from .timing import GravityTimer


logger = logging.getLogger(__name__)

# Rotation offsets tried in order: in place, left, right, up.
KICK_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0), (-1, 0), (1, 0), (0, -1))

# Smallest board on which every piece spawns clear when the board is empty.
MIN_WIDTH = max(shape.shape[1] for shape in BASE_SHAPES.values())
MIN_HEIGHT = 2


class Action(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    SOFT_DROP = 2
    ROTATE = 3


class Outcome(IntEnum):
    MOVED = 0
    REJECTED = 1
    LOCKED = 2
    SPAWNED = 3
    GAME_OVER = 4


@dataclass(frozen=True)
class MoveResult:
    outcome: Outcome
    lines_cleared: int = 0

    @property
    def game_over(self) -> bool:
        return self.outcome == Outcome.GAME_OVER


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    drop_interval: float = 0.5
    random_seed: Optional[int] = None
    restart_on_game_over: bool = True

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH or self.height < MIN_HEIGHT:
            raise ValueError(
                f"board must be at least {MIN_WIDTH}x{MIN_HEIGHT}, got {self.width}x{self.height}"
            )
        if self.drop_interval <= 0:
            raise ValueError(f"drop_interval must be positive, got {self.drop_interval}")


@dataclass
class GameState:
    board: Board
    gravity: GravityTimer
    active: Optional[ActivePiece] = None
    next_kind: Optional[PieceKind] = None
    game_over: bool = False


class BlockFallGame:
    """Piece controller and gravity driver for one game.

    Every mutation of the board and the active piece goes through ``spawn``,
    ``move`` and ``rotate``, each of which checks ``collides`` before
    committing anything.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self.state = GameState(
            board=Board(self.config.width, self.config.height),
            gravity=GravityTimer(self.config.drop_interval),
        )
        self.reset()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def active(self) -> Optional[ActivePiece]:
        return self.state.active

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def reset(self) -> None:
        self.state.board.reset()
        self.state.gravity.reset()
        self.state.active = None
        self.state.next_kind = None
        self.state.game_over = False
        self.spawn()

    def _random_kind(self) -> PieceKind:
        return self.rng.choice(list(PieceKind))

    def spawn(self) -> MoveResult:
        state = self.state
        if state.game_over:
            return MoveResult(Outcome.REJECTED)
        kind = state.next_kind if state.next_kind is not None else self._random_kind()
        state.next_kind = self._random_kind()
        state.active = ActivePiece.spawn(kind, state.board.width)
        if collides(state.active.shape, state.active.x, state.active.y, state.board):
            logger.info("Game over: %s piece blocked at spawn", kind.name)
            return self._end_game()
        logger.debug("Spawned %s at x=%d (next %s)", kind.name, state.active.x, state.next_kind.name)
        return MoveResult(Outcome.SPAWNED)

    def _end_game(self) -> MoveResult:
        if self.config.restart_on_game_over:
            # An empty board always admits a spawn, so this cannot recurse.
            self.reset()
        else:
            self.state.game_over = True
        return MoveResult(Outcome.GAME_OVER)

    def move(self, dx: int, dy: int) -> MoveResult:
        piece = self.state.active
        if self.state.game_over or piece is None:
            return MoveResult(Outcome.REJECTED)
        if not collides(piece.shape, piece.x + dx, piece.y + dy, self.state.board):
            self.state.active = piece.moved(dx, dy)
            return MoveResult(Outcome.MOVED)
        if dy > 0:
            return self._lock_piece()
        return MoveResult(Outcome.REJECTED)

    def _lock_piece(self) -> MoveResult:
        piece = self.state.active
        assert piece is not None
        self.state.board.lock_cells(piece.cells(), piece.color)
        logger.debug("Locked %s at (%d, %d)", piece.kind.name, piece.x, piece.y)
        lines = self.state.board.clear_full_rows()
        if lines:
            logger.info("Cleared %d line(s)", lines)
        spawned = self.spawn()
        if spawned.game_over:
            return MoveResult(Outcome.GAME_OVER, lines)
        return MoveResult(Outcome.LOCKED, lines)

    def rotate(self) -> MoveResult:
        piece = self.state.active
        if self.state.game_over or piece is None:
            return MoveResult(Outcome.REJECTED)
        rotated = piece.rotated()
        for dx, dy in KICK_OFFSETS:
            if not collides(rotated.shape, rotated.x + dx, rotated.y + dy, self.state.board):
                self.state.active = rotated.moved(dx, dy)
                return MoveResult(Outcome.MOVED)
        return MoveResult(Outcome.REJECTED)

    def soft_drop(self) -> MoveResult:
        result = self.move(0, 1)
        self.state.gravity.reset()
        return result

    def update(self, dt: float) -> Optional[MoveResult]:
        """Advance gravity by ``dt`` seconds; returns the drop result on a tick."""
        if self.state.game_over:
            return None
        if self.state.gravity.advance(dt):
            return self.move(0, 1)
        return None

    def step(self, action: Action) -> MoveResult:
        if action == Action.MOVE_LEFT:
            return self.move(-1, 0)
        if action == Action.MOVE_RIGHT:
            return self.move(1, 0)
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        if action == Action.ROTATE:
            return self.rotate()
        raise ValueError(f"unknown action: {action!r}")

    def get_state(self) -> np.ndarray:
        # Composite the active piece over a copy of the board snapshot.
        state = self.state.board.snapshot().copy()
        piece = self.state.active
        if piece is not None and not self.state.game_over:
            for x, y in piece.cells():
                if 0 <= y < self.state.board.height and 0 <= x < self.state.board.width:
                    state[y, x] = piece.color
        state.setflags(write=False)
        return state
