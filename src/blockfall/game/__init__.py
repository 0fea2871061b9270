"""Game module for blockfall.

Exports the core game engine and supporting classes:
- Board: Grid of locked cells and line clearing
- PieceKind, ActivePiece: Piece catalog and the falling piece value
- collides: Placement legality check shared by every move
- GravityTimer: Drop-interval accumulator
- BlockFallGame: Piece controller, gravity driver and game-over policy
"""

from .grid import Board
from .pieces import BASE_SHAPES, COLORS, ActivePiece, PieceKind, rotate_cw
from .collision import collides
from .timing import GravityTimer
from .core import Action, BlockFallGame, GameConfig, GameState, MoveResult, Outcome

__all__ = [
    "Board",
    "BASE_SHAPES",
    "COLORS",
    "ActivePiece",
    "PieceKind",
    "rotate_cw",
    "collides",
    "GravityTimer",
    "Action",
    "BlockFallGame",
    "GameConfig",
    "GameState",
    "MoveResult",
    "Outcome",
]
