"""
Game configuration: grid, timing and colors.

Every tunable lives here. The defaults reproduce a 32x32 board with a
5-long snake that moves every 100 ms, drawn with 20 px cells.
"""
from dataclasses import dataclass
from typing import Optional

# ----------------------------- Defaults ----------------------------------- #
GRID_SIZE = 32          # cells per side (border included)
SNAKE_SIZE = 5          # starting length, head included
SCALE = 20              # pixels per cell
TICK_MS = 100           # one move every 100 ms
FPS = 60                # input polling / render rate

# Colors (R, G, B)
BG           = (36, 36, 36)
SNAKE_HEAD   = (255, 170, 0)
SNAKE_BODY   = (255, 255, 85)
BERRY        = (255, 85, 85)
BORDER       = (85, 85, 85)
GAME_OVER    = (255, 85, 85)
SCORE_LABEL  = (255, 255, 85)
SCORE_NUMBER = (255, 170, 0)


def window_size_for(grid_size, scale):
    """Side length of the window in pixels, including the 1 px gutters."""
    return grid_size * scale + grid_size - 1


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = GRID_SIZE
    snake_size: int = SNAKE_SIZE
    scale: int = SCALE
    tick_ms: int = TICK_MS
    fps: int = FPS
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_size < 3:
            raise ValueError(f"grid_size must be at least 3, got {self.grid_size}")
        if self.snake_size < 1:
            raise ValueError(f"snake_size must be at least 1, got {self.snake_size}")
        if self.scale < 1:
            raise ValueError(f"scale must be positive, got {self.scale}")
        if self.tick_ms < 1:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.fps < 1:
            raise ValueError(f"fps must be positive, got {self.fps}")

        # The starting snake must sit strictly inside the border.
        head_x = self.grid_size // 2 + self.snake_size // 2
        tail_x = head_x - (self.snake_size - 1)
        head_y = self.grid_size // 2 - 1
        if head_x >= self.grid_size - 1 or tail_x < 1 or head_y < 1:
            raise ValueError(
                f"a snake of size {self.snake_size} does not fit inside "
                f"a {self.grid_size}x{self.grid_size} grid"
            )

    @property
    def window_size(self):
        return window_size_for(self.grid_size, self.scale)
