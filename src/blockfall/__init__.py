"""Falling-block puzzle game: board, pieces, movement and line clearing."""

from .game import Action, BlockFallGame, GameConfig, MoveResult, Outcome

__version__ = "0.1.0"

__all__ = ["Action", "BlockFallGame", "GameConfig", "MoveResult", "Outcome", "__version__"]
