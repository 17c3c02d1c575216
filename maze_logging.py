"""
Logging setup shared by the maze modules.

Every module asks for its logger through get_logger() so all output sits
under the "maze" namespace and can be configured in one place.
"""

import logging
import os
import sys

ROOT_LOGGER_NAME = "maze"
LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV_VAR = "MAZE_LOG_LEVEL"

_handler = None


def get_logger(name):
    """
    Return a logger nested under the "maze" namespace.

    :param name: Usually the calling module's __name__
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level=None, stream=None):
    """
    Attach a single stream handler to the "maze" logger.

    Calling it again updates the level; passing a stream replaces the handler.

    :param level: Level name or number; falls back to $MAZE_LOG_LEVEL, then WARNING
    :param stream: Output stream, stderr by default
    :return: The configured root "maze" logger
    """
    global _handler

    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "WARNING")
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if _handler is None or stream is not None:
        # the previous stream may already be closed, so never flush it
        if _handler is not None:
            logger.removeHandler(_handler)
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False

    return logger
