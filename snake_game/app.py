"""
Snake — window, input polling and the fixed-rate tick loop.

Controls
- Arrow keys / WASD: move
- Esc or window close: quit

Input is read every frame; the game itself only advances once per
tick interval, so the snake's speed does not depend on the frame rate.
"""
import argparse
import logging

import pygame

from .config import FPS, GRID_SIZE, SCALE, SNAKE_SIZE, TICK_MS, GameConfig
from .game import SnakeGame
from .render import Renderer
from .snake import Direction
from .timer import TickTimer

logger = logging.getLogger(__name__)

KEY_TO_DIR = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}


class GameApp:
    def __init__(self, config=None):
        self.config = config or GameConfig()
        self.game = SnakeGame(self.config)
        self.timer = TickTimer(self.config.tick_ms)
        self.renderer = Renderer(self.config.scale, self.config.grid_size)

    def handle_event(self, event):
        """Returns False when the app should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in KEY_TO_DIR:
                self.game.notify_direction(KEY_TO_DIR[event.key])
        return True

    def update(self, now_ms):
        """Run one tick if the interval has elapsed. Returns True if a tick ran."""
        if self.game.game_over or not self.timer.ready(now_ms):
            return False
        self.game.tick()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("tick %d\n%s", self.game.ticks, self.game.snapshot().print_board())
        return True

    def run(self):
        pygame.init()
        size = self.config.window_size
        screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        self.timer.reset(pygame.time.get_ticks())

        logger.info(
            "Starting %dx%d grid, snake size %d, tick %d ms",
            self.config.grid_size, self.config.grid_size,
            self.config.snake_size, self.config.tick_ms,
        )

        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            self.update(pygame.time.get_ticks())

            self.renderer.draw(screen, self.game.snapshot())
            pygame.display.flip()
            clock.tick(self.config.fps)

        pygame.quit()
        return self.game.score


def build_parser():
    parser = argparse.ArgumentParser(description="Snake on a fixed-rate tick loop")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE, help="cells per side, border included")
    parser.add_argument("--snake-size", type=int, default=SNAKE_SIZE, help="starting snake length")
    parser.add_argument("--scale", type=int, default=SCALE, help="pixels per cell")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="milliseconds between moves")
    parser.add_argument("--fps", type=int, default=FPS, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for berry placement")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level",
    )
    return parser


def config_from_args(args, parser):
    try:
        return GameConfig(
            grid_size=args.grid_size,
            snake_size=args.snake_size,
            scale=args.scale,
            tick_ms=args.tick_ms,
            fps=args.fps,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    config = config_from_args(args, parser)
    score = GameApp(config).run()
    logger.info("Final score: %d", score)
    return 0
