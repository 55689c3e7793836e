from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from falling_blocks.game import Action, FallingBlockGame
from .renderer import Renderer, RenderConfig


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_s: Action.MOVE_DOWN,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_w: Action.ROTATE,
    pygame.K_UP: Action.ROTATE,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_r: Action.RESET,
}

TICK_EVENT = pygame.USEREVENT + 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard")
    p.add_argument("--seed", type=int, default=None, help="Start seed; random when omitted")
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def run(seed: Optional[int] = None) -> None:
    game = FallingBlockGame(seed=seed)
    logger.info("starting session with seed %d", game.seed)
    render_config = RenderConfig(grid_width=game.config.width, grid_height=game.config.height)
    renderer = Renderer(render_config)

    pygame.init()
    try:
        screen = pygame.display.set_mode(render_config.window_size)
        pygame.display.set_caption("Falling Blocks")
        # Every timer pulse and key press is one action, applied in arrival order
        pygame.time.set_timer(TICK_EVENT, game.config.rules.base_tick_ms)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == TICK_EVENT:
                    game.step(Action.TICK)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.step(action)

            renderer.draw(screen, game.state)
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
