"""A single grid cell."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    x: int
    y: int

    @classmethod
    def at(cls, x, y, grid_size):
        """
        Build a cell, capping each coordinate at grid_size.

        Only the upper bound is capped. Negative coordinates are never
        produced: a move is rejected by the border before it can leave
        the grid on the low side.
        """
        return cls(min(x, grid_size), min(y, grid_size))

    def offset(self, dx, dy, grid_size):
        return Cell.at(self.x + dx, self.y + dy, grid_size)

    def pixel(self, scale):
        """Top-left pixel of this cell; the extra +x/+y leaves a 1 px gutter."""
        return (self.x * scale + self.x, self.y * scale + self.y)

    def __iter__(self):
        yield self.x
        yield self.y
