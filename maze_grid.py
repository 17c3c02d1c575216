"""
Square grid of maze cells.

The grid owns every cell. A cell points at its parent through a (row, col)
pair rather than a second reference to the parent Cell object.
"""

import numbers
from typing import Iterator, List, Optional, Tuple

from maze_errors import InvalidSizeError, OutOfBoundsError

# Neighbor order: up, down, left, right (row offset, column offset)
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class Cell:
    __slots__ = ("_row", "_col", "visited", "_parent")

    def __init__(self, row: int, col: int):
        self._row = row
        self._col = col
        self.visited = False
        self._parent: Optional[Tuple[int, int]] = None

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def coords(self) -> Tuple[int, int]:
        return (self._row, self._col)

    @property
    def parent(self) -> Optional[Tuple[int, int]]:
        """Coordinates of the cell this one was discovered from, or None."""
        return self._parent

    def set_parent(self, parent: "Cell") -> bool:
        """
        Record the cell this one was reached from. The first assignment wins.

        :return: True if the parent was recorded, False if one was already set
        """
        if self._parent is not None:
            return False
        self._parent = parent.coords
        return True

    def __repr__(self):
        return f"Cell({self._row}, {self._col}, visited={self.visited}, parent={self._parent})"


class Grid:
    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
            raise InvalidSizeError(size)
        self.size = int(size)
        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(self.size)] for row in range(self.size)
        ]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.size)
        return self._cells[row][col]

    def neighbors_of(self, cell: Cell) -> List[Cell]:
        """Orthogonal neighbors inside the grid, in up/down/left/right order."""
        neighbors = []
        for dr, dc in DIRECTIONS:
            nr, nc = cell.row + dr, cell.col + dc
            if self.in_bounds(nr, nc):
                neighbors.append(self._cells[nr][nc])
        return neighbors

    def unvisited_neighbors_of(self, cell: Cell) -> List[Cell]:
        return [nbr for nbr in self.neighbors_of(cell) if not nbr.visited]

    def has_unvisited_neighbor(self, cell: Cell) -> bool:
        return any(not nbr.visited for nbr in self.neighbors_of(cell))

    def parent_of(self, cell: Cell) -> Optional[Cell]:
        if cell.parent is None:
            return None
        return self.cell_at(*cell.parent)

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.size * self.size
