"""
Errors raised by the TicTacToe domain model.
"""


class TicTacToeError(Exception):
    """Base class for every error raised by this package."""


class InvalidSymbolError(TicTacToeError, ValueError):
    """A token that is not a player symbol."""


class InvalidDiagonalError(TicTacToeError, ValueError):
    """A diagonal selector that is neither main nor anti."""


class CoordinateError(TicTacToeError, IndexError):
    """Row or column outside the board."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Invalid position ({row}, {col}). Must be 1-3.")
        self.row = row
        self.col = col


class DecodeError(TicTacToeError, ValueError):
    """Malformed encoded board."""


class InvalidPositionError(TicTacToeError, ValueError):
    """A board that cannot be reached by legal play."""


class GameError(TicTacToeError):
    """A move rejected by the rules."""


class SquareOccupiedError(GameError):
    """The target square already holds a symbol."""


class GameOverError(GameError):
    """The game has already been won or drawn."""


class WrongTurnError(GameError):
    """A player tried to move out of turn."""
