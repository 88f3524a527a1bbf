"""
Snapshot - a read-only view of the game after a tick.

The renderer draws from this; tests and debug logging use the numpy grid
and the text board.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from .cell import Cell

RENDER_STR = '.#oHB'


class CellState(IntEnum):
    EMPTY  = 0
    BORDER = 1
    BODY   = 2
    HEAD   = 3
    BERRY  = 4


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        grid_size: side length of the grid in cells
        border: border cells
        head: snake head
        body: snake body, tail first
        berry: current berry, None when the board has no room left
        game_over: whether the last move was rejected
        score: cells grown since the start
    """
    grid_size: int
    border: Tuple[Cell, ...]
    head: Cell
    body: Tuple[Cell, ...]
    berry: Optional[Cell]
    game_over: bool
    score: int

    def as_array(self):
        """Grid of CellState values indexed [y, x]."""
        grid = np.zeros((self.grid_size, self.grid_size), dtype=np.int8)
        for c in self.border:
            grid[c.y, c.x] = CellState.BORDER
        if self.berry is not None:
            grid[self.berry.y, self.berry.x] = CellState.BERRY
        for c in self.body:
            grid[c.y, c.x] = CellState.BODY
        grid[self.head.y, self.head.x] = CellState.HEAD
        return grid

    def print_board(self):
        """
        Returns the board as text, top row first:
        . = empty, # = border, o = body, H = head, B = berry
        """
        grid = self.as_array()
        rows = [' '.join(RENDER_STR[v] for v in row) for row in grid]
        rows.append(f"Score: {self.score}{'  GAME OVER' if self.game_over else ''}")
        return "\n".join(rows)
