"""
The snake: a head cell plus a tail-first body.

Movement shifts every segment forward by one cell; growth duplicates the
oldest segment so the tail stays put for one move.
"""
from collections import deque
from enum import Enum

from .cell import Cell


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return OPPOSITE[self]


OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    def __init__(self, size, grid_size):
        self.grid_size = grid_size
        self.head = Cell.at(grid_size // 2 + size // 2, grid_size // 2 - 1, grid_size)
        # tail first: the cell furthest left is the oldest
        self.body = deque(
            Cell.at(self.head.x - i, self.head.y, grid_size)
            for i in range(size - 1, 0, -1)
        )

    def move(self, direction, border):
        """
        Step the head one cell in `direction`.

        Returns False and leaves the snake untouched if the new head would
        land on the snake itself or on the border.
        """
        new_head = self.head.offset(direction.dx, direction.dy, self.grid_size)
        if self.occupies(new_head):
            return False
        if border.contains(new_head):
            return False

        self.body.append(self.head)
        self.body.popleft()
        self.head = new_head
        return True

    def grow(self):
        """Duplicate the oldest body cell; the body is one longer after the next move."""
        oldest = self.body[0] if self.body else self.head
        self.body.appendleft(oldest)

    def occupies(self, cell):
        if self.head == cell:
            return True
        for segment in self.body:
            if segment == cell:
                return True
        return False

    def __contains__(self, cell):
        return self.occupies(cell)

    def length(self):
        return len(self.body) + 1

    def cells(self):
        """All occupied cells, tail first, head last."""
        return list(self.body) + [self.head]
