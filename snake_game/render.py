"""Pygame drawing of a Snapshot."""
import pygame

from .config import (
    BG, BERRY, BORDER, GAME_OVER, SCORE_LABEL, SCORE_NUMBER, SNAKE_BODY, SNAKE_HEAD,
    window_size_for,
)


class Renderer:
    def __init__(self, scale, grid_size):
        self.scale = scale
        self.size = window_size_for(grid_size, scale)
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, int(scale * 1.4))

    def cell_rect(self, cell):
        px, py = cell.pixel(self.scale)
        return pygame.Rect(px, py, self.scale, self.scale)

    def draw_cell(self, surface, color, cell):
        pygame.draw.rect(surface, color, self.cell_rect(cell))

    def draw(self, surface, snap):
        surface.fill(BG)

        if snap.game_over:
            self.draw_game_over(surface, snap.score)
            for c in snap.border:
                self.draw_cell(surface, BORDER, c)
            return

        for c in snap.border:
            self.draw_cell(surface, BORDER, c)
        self.draw_cell(surface, SNAKE_HEAD, snap.head)
        for c in snap.body:
            self.draw_cell(surface, SNAKE_BODY, c)
        if snap.berry is not None:
            self.draw_cell(surface, BERRY, snap.berry)

    def draw_game_over(self, surface, score):
        line_h = int(self.scale * 1.4)

        over = self.font.render("Game over!", True, GAME_OVER)
        surface.blit(over, ((self.size - over.get_width()) // 2, self.size // 2 - line_h * 2))

        # "Score: " in one color, the number in another, centered as one line
        label = self.font.render("Score: ", True, SCORE_LABEL)
        number = self.font.render(str(score), True, SCORE_NUMBER)
        x = (self.size - label.get_width() - number.get_width()) // 2
        y = self.size // 2 - line_h
        surface.blit(label, (x, y))
        surface.blit(number, (x + label.get_width(), y))
