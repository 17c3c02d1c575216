"""
Rendering collaborators for the maze builder.

The builder only ever talks to a MazeRenderer: it paints the background once,
draws every newly discovered cell together with the passage that reached it,
and marks the start and goal when it is done. Renderers never influence the
generated maze.
"""

from typing import Iterable, Optional, Tuple

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

WALL_CHARS = " █"
SOLUTION_CHAR = "·"


def midpoint(cell_a, cell_b) -> Tuple[float, float]:
    """Fractional (row, col) halfway between two adjacent cells."""
    return ((cell_a.row + cell_b.row) / 2, (cell_a.col + cell_b.col) / 2)


class MazeRenderer:
    """Interface consumed by MazeBuilder. Every hook is a no-op here."""

    def paint_background(self, size: int):
        pass

    def draw_cell(self, row, col):
        pass

    def draw_connector(self, cell_a, cell_b):
        pass

    def begin_solution(self):
        pass

    def mark_endpoints(self, start, goal):
        pass


class NullRenderer(MazeRenderer):
    pass


class MatplotlibRenderer(MazeRenderer):
    """
    Draws the maze on a matplotlib Figure, one filled square per cell and per
    connector, on the unit square. Rows run along x and columns along y, so
    the start sits bottom-left and the goal top-right.

    :param figsize: Figure size in inches
    :param passage_color: Fill for carved cells and passages
    :param solution_color: Fill used after begin_solution()
    """

    def __init__(self, figsize=(6, 6), passage_color="white", solution_color="cyan",
                 background_color="black"):
        self.figure = Figure(figsize=figsize)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self.ax.set_xlim(0, 1)
        self.ax.set_ylim(0, 1)
        self.ax.set_aspect("equal")
        self.ax.axis("off")
        self.passage_color = passage_color
        self.solution_color = solution_color
        self.background_color = background_color
        self.color = passage_color
        self.size = None

    def _square(self, row, col, half, color):
        side = 1.0 / self.size
        cx = side / 2 + row / self.size
        cy = side / 2 + col / self.size
        self.ax.add_patch(Rectangle((cx - half, cy - half), 2 * half, 2 * half,
                                    facecolor=color, edgecolor="none"))

    def paint_background(self, size):
        self.size = size
        self.color = self.passage_color
        for patch in list(self.ax.patches):
            patch.remove()
        self.ax.add_patch(Rectangle((0, 0), 1, 1, facecolor=self.background_color,
                                    edgecolor="none"))

    def draw_cell(self, row, col):
        self._square(row, col, 1.0 / (4 * self.size), self.color)

    def draw_connector(self, cell_a, cell_b):
        row, col = midpoint(cell_a, cell_b)
        self._square(row, col, 1.0 / (4 * self.size), self.color)

    def begin_solution(self):
        self.color = self.solution_color

    def mark_endpoints(self, start, goal):
        half = 1.0 / (4 * self.size)
        self._square(start.row, start.col, half, "limegreen")
        self._square(goal.row, goal.col, half, "red")

    def save(self, path, dpi=100):
        self.figure.savefig(path, dpi=dpi, facecolor=self.background_color)
        return path


def render_text(array: np.ndarray, path: Optional[Iterable] = None) -> str:
    """
    Format a maze raster (1 = passage, 0 = wall) as text.

    :param array: Raster from MazeBuilder.to_array()
    :param path: Optional cells to overlay, in walking order
    :return: One line per raster row
    """
    canvas = [[WALL_CHARS[int(value)] for value in row] for row in array]

    if path is not None:
        previous = None
        for cell in path:
            canvas[2 * cell.row][2 * cell.col] = SOLUTION_CHAR
            if previous is not None:
                canvas[previous.row + cell.row][previous.col + cell.col] = SOLUTION_CHAR
            previous = cell

    return "\n".join("".join(row) for row in canvas)
