"""
Exceptions raised while building and querying a maze.
"""


class MazeError(Exception):
    """
    Base class for maze errors.

    :param message: Human readable description
    :param context: Optional values appended to the message (size, coordinates, ...)
    """

    def __init__(self, message, context=None):
        self.context = context or {}
        full_message = message
        if self.context:
            details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
            full_message += f" ({details})"
        super().__init__(full_message)


class InvalidSizeError(MazeError, ValueError):
    """Maze side length is not a positive integer."""

    def __init__(self, size):
        self.size = size
        super().__init__("Maze size must be a positive integer", {"size": size})


class OutOfBoundsError(MazeError, IndexError):
    """Coordinate lookup outside the grid."""

    def __init__(self, row, col, size):
        self.row = row
        self.col = col
        super().__init__(f"Coordinate ({row}, {col}) out of bounds", {"size": size})


class NotBuiltError(MazeError, RuntimeError):
    """Query issued before a maze was built."""

    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"{operation} requires a built maze; call build() first")
