"""Tests for Snapshot grid and text output."""

import numpy as np

from snake_game.cell import Cell
from snake_game.config import GameConfig
from snake_game.game import SnakeGame
from snake_game.snapshot import CellState


def small_game():
    g = SnakeGame(GameConfig(grid_size=8, snake_size=3, seed=0))
    g.berry = Cell(1, 1)
    return g


class TestAsArray:
    def test_shape_and_counts(self):
        grid = SnakeGame(GameConfig(seed=0)).snapshot().as_array()
        assert grid.shape == (32, 32)
        assert np.count_nonzero(grid == CellState.BORDER) == 124
        assert np.count_nonzero(grid == CellState.HEAD) == 1
        assert np.count_nonzero(grid == CellState.BODY) == 4
        assert np.count_nonzero(grid == CellState.BERRY) == 1

    def test_indexed_by_row_then_column(self):
        snap = small_game().snapshot()
        grid = snap.as_array()
        assert grid[snap.head.y, snap.head.x] == CellState.HEAD
        assert grid[1, 1] == CellState.BERRY
        for c in snap.body:
            assert grid[c.y, c.x] == CellState.BODY

    def test_no_berry(self):
        g = small_game()
        g.berry = None
        grid = g.snapshot().as_array()
        assert np.count_nonzero(grid == CellState.BERRY) == 0


class TestPrintBoard:
    def test_layout(self):
        """Snake of size 3 on an 8x8 grid: head at (5, 3), body at x=3..4."""
        lines = small_game().snapshot().print_board().split("\n")
        assert len(lines) == 9
        assert lines[0] == " ".join("#" * 8)
        assert lines[1] == "# B . . . . . #"
        assert lines[3] == "# . . o o H . #"
        assert lines[-1] == "Score: 0"

    def test_game_over_marker(self):
        g = small_game()
        g.game_over = True
        assert g.snapshot().print_board().endswith("Score: 0  GAME OVER")
