"""
TicTacToe domain model.
Board, squares, players, board encoding and game rules.
"""

__version__ = "1.0.0"

from .config import GameConfig, configure_logging
from .exceptions import (
    CoordinateError,
    DecodeError,
    GameError,
    GameOverError,
    InvalidDiagonalError,
    InvalidPositionError,
    InvalidSymbolError,
    SquareOccupiedError,
    TicTacToeError,
    WrongTurnError,
)
from .player import Player, Symbol
from .square import Square, SquareValue
from .board import Board, Diagonal
from .encoding import Encoding
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .game import Game, GameStatus, Move
