"""Custom exception hierarchy for the maze core."""


class MazeError(Exception):
    """Base exception for maze failures."""


class OutOfBounds(MazeError, IndexError):
    """Raised when a grid coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Cell ({x},{y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


class InvalidDimensions(MazeError, ValueError):
    """Raised when a grid or maze is requested with unusable dimensions."""


class MazeStorageError(MazeError):
    """Raised when a maze file cannot be written or read."""


class ValidationError(MazeError):
    """Raised when a maze fails its integrity checks."""
