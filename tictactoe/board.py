"""
The 3x3 TicTacToe board.
Squares are addressed with 1-based (row, col) coordinates.
"""

from enum import Enum
from typing import Iterator, List, Tuple, Union

import numpy as np

from .config import GameConfig
from .exceptions import CoordinateError, DecodeError, InvalidDiagonalError
from .square import Square, SquareValue


class Diagonal(Enum):
    """The two diagonals of the board."""
    MAIN = "main"   # (1,1) -> (3,3)
    ANTI = "anti"   # (1,3) -> (3,1)


class Board:
    """
    A fixed 3x3 grid of squares stored row-major.

    The board only knows the current position; turns, history and
    results belong to Game.
    """

    SIZE = GameConfig.BOARD_SIZE

    def __init__(self):
        self._squares: List[Square] = [Square() for _ in range(GameConfig.CELL_COUNT)]

    @classmethod
    def is_valid_coordinate(cls, row: int, col: int) -> bool:
        """Check whether (row, col) are integers that lie on the board."""
        return all(
            isinstance(value, (int, np.integer)) and not isinstance(value, bool)
            and 1 <= value <= cls.SIZE
            for value in (row, col)
        )

    @classmethod
    def translate_coordinates(cls, row: int, col: int) -> int:
        """
        Convert 1-based (row, col) to an index into the square list.

        Args:
            row: Row number (1-3).
            col: Column number (1-3).

        Returns:
            Index in 0-8.

        Raises:
            CoordinateError: If row or col is not an integer in 1-3.
        """
        if not cls.is_valid_coordinate(row, col):
            raise CoordinateError(row, col)
        return (row - 1) * cls.SIZE + (col - 1)

    def get_square(self, row: int, col: int) -> Square:
        """
        Get the square at (row, col).

        The returned square is the board's own, so setting it changes
        the board.

        Raises:
            CoordinateError: If row or col is not an integer in 1-3.
        """
        return self._squares[self.translate_coordinates(row, col)]

    def get_row(self, row: int) -> Tuple[Square, Square, Square]:
        """Get the squares of a row, left to right."""
        return tuple(self.get_square(row, col) for col in range(1, self.SIZE + 1))

    def get_column(self, col: int) -> Tuple[Square, Square, Square]:
        """Get the squares of a column, top to bottom."""
        return tuple(self.get_square(row, col) for row in range(1, self.SIZE + 1))

    def get_diagonal(self, diagonal: Union[Diagonal, str]) -> Tuple[Square, Square, Square]:
        """
        Get the squares of a diagonal, from the top row down.

        Args:
            diagonal: Diagonal.MAIN / "main" for (1,1)->(3,3),
                Diagonal.ANTI / "anti" for (1,3)->(3,1).

        Raises:
            InvalidDiagonalError: If the selector is neither.
        """
        try:
            diagonal = Diagonal(diagonal)
        except ValueError:
            raise InvalidDiagonalError(
                f"Invalid diagonal {diagonal!r}. Must be 'main' or 'anti'."
            ) from None

        return tuple(self.get_square(row, col) for row, col in self.diagonal_coordinates(diagonal))

    @classmethod
    def diagonal_coordinates(cls, diagonal: Diagonal) -> List[Tuple[int, int]]:
        rows = range(1, cls.SIZE + 1)
        if diagonal == Diagonal.MAIN:
            return [(row, row) for row in rows]
        return [(row, cls.SIZE + 1 - row) for row in rows]

    @classmethod
    def line_coordinates(cls) -> List[List[Tuple[int, int]]]:
        """
        All 8 lines as lists of (row, col).

        Rows first, then columns, then the main and anti diagonals.
        """
        cells = range(1, cls.SIZE + 1)
        lines = [[(row, col) for col in cells] for row in cells]
        lines += [[(row, col) for row in cells] for col in cells]
        lines += [cls.diagonal_coordinates(diagonal) for diagonal in Diagonal]
        return lines

    def lines(self) -> List[Tuple[Square, Square, Square]]:
        """All 8 lines as tuples of squares, in line_coordinates() order."""
        return [
            tuple(self.get_square(row, col) for row, col in line)
            for line in self.line_coordinates()
        ]

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, row-major.
        """
        empty = []
        for row in range(1, self.SIZE + 1):
            for col in range(1, self.SIZE + 1):
                if self.get_square(row, col).is_empty():
                    empty.append((row, col))
        return empty

    def count(self, value: SquareValue) -> int:
        """Number of squares holding value."""
        return sum(1 for square in self._squares if square.get_value() == value)

    def is_full(self) -> bool:
        return not any(square.is_empty() for square in self._squares)

    def to_array(self) -> np.ndarray:
        """
        The board as a 3x3 int8 array of SquareValue digits.

        The array is a snapshot; changing it does not touch the board.
        """
        values = [square.get_value().value for square in self._squares]
        return np.array(values, dtype=np.int8).reshape(self.SIZE, self.SIZE)

    @classmethod
    def from_array(cls, array) -> "Board":
        """
        Build a board from a 3x3 integer array (or nested list) of digits 0-2.

        Raises:
            DecodeError: If the shape is wrong, the values are not
                integers or a digit is out of range.
        """
        try:
            array = np.asarray(array)
        except ValueError as e:
            raise DecodeError(f"Not a {cls.SIZE}x{cls.SIZE} array: {e}") from None

        if array.shape != (cls.SIZE, cls.SIZE):
            raise DecodeError(f"Expected a {cls.SIZE}x{cls.SIZE} array, got shape {array.shape}")
        if not np.issubdtype(array.dtype, np.integer):
            raise DecodeError(f"Expected integer digits, got dtype {array.dtype}")
        if np.any((array < 0) | (array > SquareValue.O.value)):
            raise DecodeError(f"Digits must be 0-2, got {array.tolist()}")

        board = cls()
        for square, digit in zip(board._squares, array.flat):
            square.set_value(SquareValue(int(digit)))
        return board

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._squares = [square.copy() for square in self._squares]
        return new_board

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        digits = "".join(str(square.get_value().value) for square in self._squares)
        return f"Board({digits!r})"

    def __str__(self) -> str:
        """
        Render the grid with divider lines between rows:

             X | O | X
            -----------
               | X |
            -----------
             O |   |
        """
        rows = [
            GameConfig.COLUMN_SEPARATOR.join(str(square) for square in self.get_row(row))
            for row in range(1, self.SIZE + 1)
        ]
        return f"\n{GameConfig.ROW_DIVIDER}\n".join(rows)
