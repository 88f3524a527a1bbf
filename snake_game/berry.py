"""Berry placement."""
import logging
import random

from .cell import Cell

logger = logging.getLogger(__name__)

MAX_SAMPLES = 1000


def spawn_berry(snake, grid_size, rng=None, max_samples=MAX_SAMPLES):
    """
    Return a random free cell strictly inside the border, or None if the
    interior is full.

    Rejection sampling is simple and fast while the snake is short. If it
    keeps missing, fall back to picking from the enumerated free cells.
    """
    rng = rng or random
    low, high = 1, grid_size - 2

    for _ in range(max_samples):
        cell = Cell(rng.randint(low, high), rng.randint(low, high))
        if not snake.occupies(cell):
            return cell

    free = [
        Cell(x, y)
        for y in range(low, high + 1)
        for x in range(low, high + 1)
        if not snake.occupies(Cell(x, y))
    ]
    if not free:
        logger.warning("No free cell left for a berry on a %dx%d grid", grid_size, grid_size)
        return None
    logger.debug("Sampling missed %d times; picking from %d free cells", max_samples, len(free))
    return rng.choice(free)
