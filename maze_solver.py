"""
CPU path searches over the raster form of a maze (1 = passage, 0 = wall).

Coordinates are (row, col) into the raster returned by MazeBuilder.to_array().
"""

import heapq
from time import time

import numpy as np

DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def raster_endpoints(size):
    """Raster coordinates of the start (0, 0) and goal (N-1, N-1) cells."""
    last = 2 * (size - 1)
    return (0, 0), (last, last)


def dijkstra_with_goal(maze, start, goal):
    """
    Dijkstra's algorithm that stops as soon as the goal is settled.

    :param maze: 2D array, 1 for passages
    :param start: (row, col) start position
    :param goal: (row, col) goal position
    :return: Distance to the goal (inf if unreachable) and elapsed milliseconds
    """
    ts = time()
    maze = np.asarray(maze)
    height, width = maze.shape
    distances = np.full((height, width), np.inf)
    visited = np.zeros((height, width), dtype=bool)

    distances[start] = 0
    queue = [(0, start)]  # Min-heap with (distance, (row, col))

    while queue:
        dist, (row, col) = heapq.heappop(queue)

        if (row, col) == goal:
            return dist, (time() - ts) * 1000

        if visited[row, col]:
            continue
        visited[row, col] = True

        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < height and 0 <= nc < width and maze[nr, nc] == 1 and not visited[nr, nc]:
                new_dist = dist + 1
                if new_dist < distances[nr, nc]:
                    distances[nr, nc] = new_dist
                    heapq.heappush(queue, (new_dist, (nr, nc)))

    return float("inf"), (time() - ts) * 1000


def heuristic(x1, y1, x2, y2):
    """Manhattan distance between (x1, y1) and (x2, y2)."""
    return abs(x1 - x2) + abs(y1 - y2)


def a_star_search(maze, start, goal):
    """
    A* over a maze raster, guided by the Manhattan heuristic.

    :return: Whether the goal is reachable, and elapsed milliseconds
    """
    ts = time()
    maze = np.asarray(maze)
    height, width = maze.shape
    best = {start: 0}
    frontier = [(heuristic(*start, *goal), start)]

    while frontier:
        _, node = heapq.heappop(frontier)
        if node == goal:
            return True, (time() - ts) * 1000

        steps = best[node] + 1
        row, col = node
        for dr, dc in DIRECTIONS:
            nxt = (row + dr, col + dc)
            if not (0 <= nxt[0] < height and 0 <= nxt[1] < width) or maze[nxt] != 1:
                continue
            if steps < best.get(nxt, float("inf")):
                best[nxt] = steps
                heapq.heappush(frontier, (steps + heuristic(*nxt, *goal), nxt))

    return False, (time() - ts) * 1000
