"""Snake — a fixed-rate tick simulation with a pygame front-end."""

from .berry import spawn_berry
from .border import Border
from .cell import Cell
from .config import GameConfig
from .game import SnakeGame
from .snake import Direction, Snake
from .snapshot import CellState, Snapshot
from .timer import TickTimer

__all__ = [
    "Border",
    "Cell",
    "CellState",
    "Direction",
    "GameConfig",
    "Snake",
    "SnakeGame",
    "Snapshot",
    "TickTimer",
    "spawn_berry",
]
