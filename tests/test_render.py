"""Tests for the pygame Renderer, drawing to off-screen surfaces."""

import pygame
import pytest

from snake_game.cell import Cell
from snake_game.config import BG, BERRY, BORDER, SNAKE_BODY, SNAKE_HEAD, GameConfig
from snake_game.game import SnakeGame
from snake_game.render import Renderer


@pytest.fixture
def setup():
    config = GameConfig(seed=0)
    game = SnakeGame(config)
    game.berry = Cell(2, 2)
    renderer = Renderer(config.scale, config.grid_size)
    surface = pygame.Surface((config.window_size, config.window_size))
    return game, renderer, surface


def color_at(surface, cell, scale=20, dx=0, dy=0):
    px, py = cell.pixel(scale)
    return tuple(surface.get_at((px + dx, py + dy)))[:3]


class TestRenderer:
    def test_cell_rect(self, setup):
        _, renderer, _ = setup
        rect = renderer.cell_rect(Cell(2, 3))
        assert (rect.x, rect.y, rect.w, rect.h) == (42, 63, 20, 20)

    def test_draws_every_entity(self, setup):
        game, renderer, surface = setup
        renderer.draw(surface, game.snapshot())
        assert color_at(surface, Cell(0, 0)) == BORDER
        assert color_at(surface, Cell(31, 31), dx=19, dy=19) == BORDER
        assert color_at(surface, game.snake.head) == SNAKE_HEAD
        assert color_at(surface, game.snake.body[0]) == SNAKE_BODY
        assert color_at(surface, Cell(2, 2)) == BERRY
        assert color_at(surface, Cell(5, 5)) == BG

    def test_gutter_between_cells(self, setup):
        game, renderer, surface = setup
        renderer.draw(surface, game.snapshot())
        # one pixel past the 20 px cell is background
        assert color_at(surface, Cell(0, 0), dx=20) == BG
        assert color_at(surface, Cell(1, 0)) == BORDER

    def test_game_over_hides_berry(self, setup):
        game, renderer, surface = setup
        game.game_over = True
        renderer.draw(surface, game.snapshot())
        assert color_at(surface, Cell(0, 0)) == BORDER
        assert color_at(surface, Cell(2, 2)) == BG

    def test_game_over_draws_text(self, setup):
        game, renderer, surface = setup
        game.game_over = True
        renderer.draw(surface, game.snapshot())
        size = renderer.size
        band = [
            tuple(surface.get_at((x, y)))[:3]
            for y in range(size // 2 - 56, size // 2)
            for x in range(0, size, 2)
        ]
        assert any(c != BG for c in band)
