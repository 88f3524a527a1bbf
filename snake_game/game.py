"""
SnakeGame - the tick controller.

Owns the border, snake, berry, both direction slots and the game-over
flag. Input and timing call in through notify_direction() and tick();
the renderer reads snapshot().
"""
import logging
import random

from .berry import spawn_berry
from .border import Border
from .config import GameConfig
from .snake import Direction, Snake
from .snapshot import Snapshot

logger = logging.getLogger(__name__)


class SnakeGame:
    def __init__(self, config=None, rng=None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.border = Border(self.config.grid_size)
        self.snake = Snake(self.config.snake_size, self.config.grid_size)
        self.berry = spawn_berry(self.snake, self.config.grid_size, self.rng)
        self.direction = Direction.RIGHT
        self.pending_direction = self.direction
        self.game_over = False
        self.ticks = 0

    @property
    def score(self):
        return self.snake.length() - self.config.snake_size

    def notify_direction(self, direction):
        """
        Queue a direction for the next tick.

        Checked against the direction committed on the last tick, not the
        pending one, so two quick presses cannot turn the snake around.
        """
        if self.game_over:
            return
        if direction == self.direction.opposite:
            return
        self.pending_direction = direction

    def tick(self):
        """Advance one step. Returns the game-over flag."""
        if self.game_over:
            return True

        self.direction = self.pending_direction
        self.ticks += 1

        if not self.snake.move(self.direction, self.border):
            self.game_over = True
            logger.info("Game over after %d ticks, score %d", self.ticks, self.score)
            return True

        if self.berry is not None and self.snake.occupies(self.berry):
            logger.debug("Berry eaten at (%d, %d)", self.berry.x, self.berry.y)
            self.berry = spawn_berry(self.snake, self.config.grid_size, self.rng)
            self.snake.grow()

        return False

    def snapshot(self):
        return Snapshot(
            grid_size=self.config.grid_size,
            border=self.border.cells,
            head=self.snake.head,
            body=tuple(self.snake.body),
            berry=self.berry,
            game_over=self.game_over,
            score=self.score,
        )
