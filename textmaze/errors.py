"""Exceptions raised by the maze core."""
from __future__ import annotations


class MazeError(Exception):
    pass


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width: object, height: object, reason: str):
        super().__init__(f"invalid maze size {width}x{height}: {reason}")
        self.width = width
        self.height = height


class InvalidDirection(MazeError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"not a direction: {value!r}")
        self.value = value


class SessionClosed(MazeError, RuntimeError):
    """Raised when a move is attempted after the game has been decided."""
