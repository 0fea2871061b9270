from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from blockfall.game import Action, BlockFallGame, GameConfig
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE,
    pygame.K_x: Action.ROTATE,
}


def draw_game_over(screen: pygame.Surface) -> None:
    font = pygame.font.SysFont(None, 28)
    text = font.render("Game Over! Press R", True, (255, 255, 255))
    rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
    screen.blit(text, rect)


def handle_key(game: BlockFallGame, key: int) -> bool:
    """Apply one key press to ``game``; returns False when the player quits."""
    if key == pygame.K_ESCAPE:
        return False
    if game.game_over:
        if key == pygame.K_r:
            logger.info("Restarting")
            game.reset()
        return True
    action = KEY_TO_ACTION.get(key)
    if action is not None:
        game.step(action)
    return True


def run(config: Optional[GameConfig] = None, cell_size: int = 20, fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = BlockFallGame(config or GameConfig(restart_on_game_over=False))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.board.width, game.board.height))
        pygame.display.set_caption("blockfall")

        running = True
        while running:
            dt = clock.tick(fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not handle_key(game, event.key):
                        running = False

            game.update(dt)

            renderer.render(screen, game.get_state())
            if game.game_over:
                draw_game_over(screen)
            pygame.display.flip()
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play blockfall with the keyboard.")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--cell-size", type=int, default=20)
    p.add_argument("--drop-interval", type=float, default=0.5, help="Seconds per gravity step")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    config = GameConfig(
        width=args.width,
        height=args.height,
        drop_interval=args.drop_interval,
        random_seed=args.seed,
        restart_on_game_over=False,
    )
    run(config, cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
