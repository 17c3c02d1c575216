import math

import numpy as np
import pytest

from maze import MazeBuilder
from maze_solver import a_star_search, dijkstra_with_goal, heuristic, raster_endpoints


def test_raster_endpoints():
    assert raster_endpoints(1) == ((0, 0), (0, 0))
    assert raster_endpoints(5) == ((0, 0), (8, 8))


def test_heuristic_is_manhattan():
    assert heuristic(0, 0, 3, 4) == 7
    assert heuristic(2, 2, 2, 2) == 0


@pytest.mark.parametrize("size", [1, 3, 10, 25])
def test_dijkstra_matches_solution_path(size, backtrack):
    maze = MazeBuilder(size, seed=size * 7, backtrack=backtrack).build()
    start, goal = raster_endpoints(size)

    distance, elapsed = dijkstra_with_goal(maze.to_array(), start, goal)

    assert distance == 2 * (len(list(maze.solution_path())) - 1)
    assert elapsed >= 0


@pytest.mark.parametrize("size", [1, 6, 15])
def test_a_star_finds_goal(size):
    maze = MazeBuilder(size, seed=42).build()
    start, goal = raster_endpoints(size)

    found, elapsed = a_star_search(maze.to_array(), start, goal)

    assert found
    assert elapsed >= 0


def test_unreachable_goal():
    blocked = np.array(
        [
            [1, 0, 1],
            [1, 0, 1],
            [1, 0, 1],
        ],
        dtype=np.uint8,
    )
    distance, _ = dijkstra_with_goal(blocked, (0, 0), (2, 2))
    found, _ = a_star_search(blocked, (0, 0), (2, 2))

    assert math.isinf(distance)
    assert not found


def test_solvers_accept_nested_lists():
    corridor = [[1, 1, 1], [0, 0, 1], [1, 1, 1]]
    distance, _ = dijkstra_with_goal(corridor, (0, 0), (2, 0))
    found, _ = a_star_search(corridor, (0, 0), (2, 0))

    assert distance == 6
    assert found


def test_a_star_finds_winding_route_past_dead_end():
    # the top row is a dead end; the only route winds right and back along the bottom
    detour = np.array(
        [
            [1, 1, 1, 1, 0],
            [1, 0, 0, 0, 0],
            [1, 1, 1, 1, 1],
            [0, 0, 0, 0, 1],
            [1, 1, 1, 1, 1],
        ],
        dtype=np.uint8,
    )
    found, _ = a_star_search(detour, (0, 0), (4, 0))
    distance, _ = dijkstra_with_goal(detour, (0, 0), (4, 0))

    assert found
    assert distance == 12
