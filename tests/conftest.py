"""
Shared fixtures for the maze test suite.
"""

import pytest

from maze import MazeBuilder
from maze_render import MazeRenderer


class ScriptedRandom:
    """Random source replaying a fixed sequence of candidate indices."""

    def __init__(self, choices):
        self.choices = list(choices)
        self.calls = []

    def randrange(self, n):
        index = self.choices.pop(0)
        assert 0 <= index < n, f"scripted index {index} invalid for {n} candidates"
        self.calls.append(n)
        return index


class RecordingRenderer(MazeRenderer):
    def __init__(self):
        self.calls = []

    def paint_background(self, size):
        self.calls.append(("paint_background", size))

    def draw_cell(self, row, col):
        self.calls.append(("draw_cell", (row, col)))

    def draw_connector(self, cell_a, cell_b):
        self.calls.append(("draw_connector", cell_a.coords, cell_b.coords))

    def begin_solution(self):
        self.calls.append(("begin_solution",))

    def mark_endpoints(self, start, goal):
        self.calls.append(("mark_endpoints", start.coords, goal.coords))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


# Index sequence for a 3x3 maze that hits a dead end at (0, 1) with cells left unvisited
SCENARIO_CHOICES = [0, 1, 2, 0, 0, 0, 0, 0]


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def scenario_rng():
    return ScriptedRandom(SCENARIO_CHOICES)


@pytest.fixture(params=["stack", "history"])
def backtrack(request):
    return request.param


@pytest.fixture
def small_maze(backtrack):
    return MazeBuilder(8, seed=1234, backtrack=backtrack).build()
