# Randomized depth-first search (DFS) maze builder with explicit backtracking
# Start is the top-left cell (0, 0), goal is the bottom-right cell (N-1, N-1)

import argparse
import random
import sys
from collections import deque

import numpy as np

from maze_errors import InvalidSizeError, NotBuiltError
from maze_grid import Grid
from maze_logging import configure_logging, get_logger
from maze_render import MatplotlibRenderer, NullRenderer, render_text

logger = get_logger(__name__)

DEFAULT_SIZE = 30


# --- Backtracking disciplines, called on a dead end ---
def backtrack_by_stack(trail, grid):
    """Discard dead cells from the tail; resume at the newest cell with an open neighbor."""
    while trail:
        cell = trail[-1]
        if grid.has_unvisited_neighbor(cell):
            return cell
        trail.pop()
    return None


def backtrack_by_history(trail, grid):
    """Pop cells from the head in first-added order until one has an open neighbor."""
    while trail:
        cell = trail.popleft()
        if grid.has_unvisited_neighbor(cell):
            return cell
    return None


BACKTRACK_STRATEGIES = {
    "stack": backtrack_by_stack,
    "history": backtrack_by_history,
}


class MazeBuilder:
    """
    Builds a perfect maze as a spanning tree of parent links over an N x N grid.

    :param size: Side length of the maze
    :param seed: Seed for a fresh random.Random on every build
    :param rng: Injected random source with randrange(n); overrides seed
    :param backtrack: "stack" or "history", see BACKTRACK_STRATEGIES
    :param renderer: Optional MazeRenderer notified while the maze is carved
    """

    def __init__(self, size=DEFAULT_SIZE, seed=None, rng=None, backtrack="stack", renderer=None):
        if backtrack not in BACKTRACK_STRATEGIES:
            raise ValueError(
                f"Unknown backtrack strategy {backtrack!r}; expected one of {sorted(BACKTRACK_STRATEGIES)}"
            )
        self.size = size
        self.seed = seed
        self.rng = rng
        self.backtrack = backtrack
        self.renderer = renderer or NullRenderer()

        self._grid = None
        self._built = False
        self.advances = 0
        self.backtracks = 0

    def set_size(self, size):
        """Change the side length used by the next build()."""
        self.size = size

    @property
    def is_built(self):
        return self._built

    @property
    def grid(self):
        if self._grid is None:
            raise NotBuiltError("grid")
        return self._grid

    @property
    def start(self):
        return self.grid.cell_at(0, 0)

    @property
    def goal(self):
        last = self.grid.size - 1
        return self.grid.cell_at(last, last)

    def build(self):
        """
        Carve a fresh maze. Any previous maze is discarded.

        :return: self, so queries can be chained
        """
        self._built = False
        self._grid = None
        self._grid = grid = Grid(self.size)
        rng = self.rng if self.rng is not None else random.Random(self.seed)
        find_next = BACKTRACK_STRATEGIES[self.backtrack]
        keep_history = self.backtrack == "history"
        self.advances = 0
        self.backtracks = 0

        logger.debug("Building %dx%d maze (backtrack=%s)", self.size, self.size, self.backtrack)
        self.renderer.paint_background(self.size)

        current = grid.cell_at(0, 0)
        current.visited = True
        trail = deque([current])
        self.renderer.draw_cell(current.row, current.col)

        while current is not None:
            if keep_history and (not trail or trail[-1] is not current):
                trail.append(current)

            candidates = grid.unvisited_neighbors_of(current)
            if not candidates:
                self.backtracks += 1
                current = find_next(trail, grid)
                continue

            neighbor = candidates[rng.randrange(len(candidates))]
            neighbor.set_parent(current)
            neighbor.visited = True
            trail.append(neighbor)
            self.renderer.draw_cell(neighbor.row, neighbor.col)
            self.renderer.draw_connector(current, neighbor)
            self.advances += 1
            current = neighbor

        self.renderer.mark_endpoints(self.start, self.goal)
        self._built = True
        logger.debug(
            "Built %dx%d maze: %d advances, %d backtracks",
            self.size, self.size, self.advances, self.backtracks,
        )
        return self

    def _require_built(self, operation):
        if not self._built:
            raise NotBuiltError(operation)

    def solution_path(self):
        """
        Cells from the goal back to the start, following parent links.

        :return: A one-shot generator; reverse it for start-to-goal order
        """
        self._require_built("solution_path")
        return self._walk_to_start(self._grid, self.goal)

    @staticmethod
    def _walk_to_start(grid, cell):
        while cell is not None:
            yield cell
            cell = grid.parent_of(cell)

    def parent_map(self):
        self._require_built("parent_map")
        return {cell.coords: cell.parent for cell in self._grid}

    def show_solution(self, renderer=None):
        """Draw the solution path on renderer (the builder's own by default)."""
        self._require_built("show_solution")
        renderer = renderer or self.renderer
        renderer.begin_solution()

        path = self.solution_path()
        cur = next(path)
        renderer.draw_cell(cur.row, cur.col)
        for parent in path:
            renderer.draw_cell(parent.row, parent.col)
            renderer.draw_connector(cur, parent)
            cur = parent
        renderer.mark_endpoints(self.start, self.goal)

    def to_array(self):
        """
        Raster form of the maze: (2N-1) x (2N-1), 1 for passages and 0 for walls.
        Cell (r, c) lives at (2r, 2c); a parent link opens the square between two cells.
        """
        self._require_built("to_array")
        side = 2 * self._grid.size - 1
        raster = np.zeros((side, side), dtype=np.uint8)
        for cell in self._grid:
            raster[2 * cell.row, 2 * cell.col] = 1
            if cell.parent is not None:
                prow, pcol = cell.parent
                raster[cell.row + prow, cell.col + pcol] = 1
        return raster


def build_maze(size=DEFAULT_SIZE, seed=None, backtrack="stack"):
    """Convenience wrapper returning a built MazeBuilder."""
    return MazeBuilder(size, seed=seed, backtrack=backtrack).build()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a perfect maze and its solution.")
    parser.add_argument("size", nargs="?", type=int, default=DEFAULT_SIZE,
                        help=f"Side length of the maze (default {DEFAULT_SIZE}).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible maze.")
    parser.add_argument("--backtrack", choices=sorted(BACKTRACK_STRATEGIES), default="stack",
                        help="Backtracking discipline used on dead ends.")
    parser.add_argument("--solution", action="store_true", help="Overlay the solution path.")
    parser.add_argument("--png", metavar="PATH", help="Also write the maze as an image.")
    parser.add_argument("--log-level", default=None, help="Logging level (default $MAZE_LOG_LEVEL or WARNING).")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    renderer = MatplotlibRenderer() if args.png else None
    builder = MazeBuilder(args.size, seed=args.seed, backtrack=args.backtrack, renderer=renderer)
    try:
        builder.build()
    except InvalidSizeError as exc:
        print(f"maze: {exc}", file=sys.stderr)
        return 2

    path = list(builder.solution_path()) if args.solution else None
    print(render_text(builder.to_array(), path))

    if args.png:
        if args.solution:
            builder.show_solution()
        renderer.save(args.png)
        logger.info("Saved maze image to %s", args.png)
    return 0


if __name__ == "__main__":
    sys.exit(main())
