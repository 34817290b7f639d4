"""
A single cell of the TicTacToe board.
"""

from enum import Enum
from typing import Union

from .config import GameConfig
from .player import Symbol


class SquareValue(Enum):
    """
    The three states of a square.

    The integer value doubles as the base-3 digit used by Encoding.
    """
    EMPTY = 0
    X = 1
    O = 2

    @classmethod
    def from_symbol(cls, symbol: Symbol) -> "SquareValue":
        """Get the value a symbol leaves on a square."""
        return cls.X if symbol == Symbol.X else cls.O

    def to_symbol(self) -> Symbol:
        """Get the symbol for a filled value; EMPTY has none."""
        if self == SquareValue.EMPTY:
            raise ValueError("An empty square has no symbol")
        return Symbol.X if self == SquareValue.X else Symbol.O

    def __str__(self) -> str:
        return GameConfig.SQUARE_DISPLAY[self.name.lower()]


class Square:
    """
    One cell of the board, holding EMPTY, X or O.

    A new square is always EMPTY; setters overwrite the value
    unconditionally.
    """

    __slots__ = ("_value",)

    def __init__(self, value: SquareValue = SquareValue.EMPTY):
        self._value = value

    def get_value(self) -> SquareValue:
        return self._value

    def set_value(self, token: Union[str, Symbol, SquareValue]) -> None:
        """
        Set the square from a token.

        Args:
            token: "X", "O", "" (clear), a Symbol or a SquareValue.

        Raises:
            InvalidSymbolError: For any other token. The square is left
                unchanged.
        """
        if isinstance(token, SquareValue):
            self._value = token
        elif token == "":
            self._value = SquareValue.EMPTY
        else:
            self._value = SquareValue.from_symbol(Symbol.parse(token))

    def set_x(self) -> None:
        self._value = SquareValue.X

    def set_o(self) -> None:
        self._value = SquareValue.O

    def set_empty(self) -> None:
        self._value = SquareValue.EMPTY

    def is_empty(self) -> bool:
        return self._value == SquareValue.EMPTY

    def is_x(self) -> bool:
        return self._value == SquareValue.X

    def is_o(self) -> bool:
        return self._value == SquareValue.O

    def copy(self) -> "Square":
        return Square(self._value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self._value == other._value

    def __repr__(self) -> str:
        return f"Square({self._value.name})"

    def __str__(self) -> str:
        return str(self._value)
