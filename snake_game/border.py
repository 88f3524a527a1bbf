"""The ring of wall cells around the edge of the grid."""
from .cell import Cell


class Border:
    def __init__(self, size):
        self.size = size
        cells = []
        for i in range(size):
            # top and bottom rows
            cells.append(Cell(i, 0))
            cells.append(Cell(i, size - 1))
            # left and right columns, corners already added
            if i == 0 or i == size - 1:
                continue
            cells.append(Cell(0, i))
            cells.append(Cell(size - 1, i))
        self._cells = tuple(cells)

    @property
    def cells(self):
        return self._cells

    def contains(self, cell):
        for c in self._cells:
            if c == cell:
                return True
        return False

    def __contains__(self, cell):
        return self.contains(cell)

    def __iter__(self):
        return iter(self._cells)

    def __len__(self):
        return len(self._cells)
