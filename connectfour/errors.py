"""
errors.py - Exception types raised by the Connect Four engine

A full column is not an error: Grid.attempt_insert reports it by returning
False. These exceptions cover arguments the engine cannot act on at all.
"""

from connectfour.utils import COLUMN_COUNT


class ConnectFourError(Exception):
    """Base class for all Connect Four errors."""


class InvalidColumnError(ConnectFourError, ValueError):
    """Raised when a column index is not an integer in [0, COLUMN_COUNT - 1]."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column!r} is outside the valid range 0-{COLUMN_COUNT - 1}")


class InvalidMarkerError(ConnectFourError, ValueError):
    """Raised when a disc marker is not a single-character string."""

    def __init__(self, marker):
        self.marker = marker
        super().__init__(f"Marker {marker!r} must be a single character")


class RoundOverError(ConnectFourError):
    """Raised when a move is attempted after the round has ended."""


class PlayerSetupError(ConnectFourError, ValueError):
    """Raised when a round is given an unusable set of players."""
