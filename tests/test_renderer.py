import pygame

from blockfall.game import (
    BASE_SHAPES,
    COLORS,
    Action,
    ActivePiece,
    BlockFallGame,
    GameConfig,
    Outcome,
    PieceKind,
)
from blockfall.visualization.human_play import KEY_TO_ACTION, build_parser, handle_key
from blockfall.visualization.renderer import GRID_LINE, Renderer


def test_renders_cells_and_grid():
    game = BlockFallGame(GameConfig(width=4, height=4, random_seed=0))
    game.state.active = ActivePiece(PieceKind.O, BASE_SHAPES[PieceKind.O], 2, 2)
    game.board.lock_cells([(0, 3)], COLORS[PieceKind.Z])
    renderer = Renderer(cell_size=10)
    surface = pygame.Surface(renderer.window_size(4, 4))

    renderer.render(surface, game.get_state())

    assert surface.get_size() == (40, 40)
    assert surface.get_at((5, 35))[:3] == COLORS[PieceKind.Z][:3]
    assert surface.get_at((25, 25))[:3] == COLORS[PieceKind.O][:3]
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)
    assert surface.get_at((10, 5))[:3] == GRID_LINE


def test_key_map_and_cli_defaults():
    assert KEY_TO_ACTION == {
        pygame.K_LEFT: Action.MOVE_LEFT,
        pygame.K_RIGHT: Action.MOVE_RIGHT,
        pygame.K_DOWN: Action.SOFT_DROP,
        pygame.K_UP: Action.ROTATE,
        pygame.K_x: Action.ROTATE,
    }
    args = build_parser().parse_args([])
    assert (args.width, args.height, args.cell_size, args.drop_interval) == (10, 20, 20, 0.5)


def test_keys_drive_the_active_piece():
    game = BlockFallGame(GameConfig(random_seed=0, restart_on_game_over=False))
    game.state.active = ActivePiece(PieceKind.T, BASE_SHAPES[PieceKind.T], 3, 5)

    assert handle_key(game, pygame.K_LEFT)
    assert game.active.x == 2
    assert handle_key(game, pygame.K_DOWN)
    assert game.active.y == 6
    assert handle_key(game, pygame.K_a)
    assert (game.active.x, game.active.y) == (2, 6)
    assert not handle_key(game, pygame.K_ESCAPE)


def test_r_restarts_only_after_game_over():
    game = BlockFallGame(GameConfig(random_seed=0, restart_on_game_over=False))
    game.board.lock_cells([(x, 1) for x in range(game.board.width)], COLORS[PieceKind.Z])
    game.state.next_kind = PieceKind.T
    # R does nothing during play.
    assert handle_key(game, pygame.K_r)
    assert game.board.is_row_full(1)

    assert game.spawn().outcome == Outcome.GAME_OVER

    # Movement keys are ignored while the game is over.
    frozen = game.active
    assert handle_key(game, pygame.K_LEFT)
    assert game.active is frozen and game.game_over

    assert handle_key(game, pygame.K_r)
    assert not game.game_over
    assert game.board.filled.sum() == 0
    assert game.active.y == 0
