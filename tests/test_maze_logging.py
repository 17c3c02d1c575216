import io
import logging

import pytest

from maze import MazeBuilder
from maze_logging import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    configure_logging("WARNING", stream=io.StringIO())


def test_get_logger_namespaces():
    assert get_logger("maze").name == "maze"
    assert get_logger("maze.grid").name == "maze.grid"
    assert get_logger("maze_solver").name == "maze.maze_solver"


def test_configure_logging_is_idempotent(log_stream):
    logger = configure_logging("INFO", stream=log_stream)
    configure_logging("INFO", stream=log_stream)

    assert logger is logging.getLogger(ROOT_LOGGER_NAME)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_level_from_environment(monkeypatch, log_stream):
    monkeypatch.setenv("MAZE_LOG_LEVEL", "debug")
    logger = configure_logging(stream=log_stream)
    assert logger.level == logging.DEBUG


def test_build_logs_counts_at_debug(log_stream):
    configure_logging("DEBUG", stream=log_stream)

    MazeBuilder(4, seed=3).build()

    output = log_stream.getvalue()
    assert "Building 4x4 maze (backtrack=stack)" in output
    assert "15 advances" in output
    assert "DEBUG" in output


def test_reconfigure_after_previous_stream_closed(log_stream):
    old_stream = io.StringIO()
    configure_logging("DEBUG", stream=old_stream)
    old_stream.close()

    logger = configure_logging("DEBUG", stream=log_stream)
    MazeBuilder(2, seed=0).build()

    assert len(logger.handlers) == 1
    assert "Built 2x2 maze" in log_stream.getvalue()


def test_reconfigure_after_cli_run(capsys, log_stream):
    from maze import main

    assert main(["3", "--seed", "1"]) == 0
    capsys.readouterr()

    configure_logging("DEBUG", stream=log_stream)
    MazeBuilder(3, seed=1).build()

    assert "Building 3x3 maze" in log_stream.getvalue()
