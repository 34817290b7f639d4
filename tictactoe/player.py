"""
Players and their symbols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import InvalidSymbolError


class Symbol(Enum):
    """The two markers a player can put on the board."""
    X = "X"
    O = "O"

    @classmethod
    def parse(cls, token: Union[str, "Symbol"]) -> "Symbol":
        """
        Convert a token to a Symbol.

        Args:
            token: "X", "O" or a Symbol.

        Returns:
            The matching Symbol.

        Raises:
            InvalidSymbolError: If the token is anything else.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            raise InvalidSymbolError(f"Invalid symbol {token!r}. Must be 'X' or 'O'.") from None

    def opposite(self) -> "Symbol":
        """Get the opposite symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Player:
    """
    A player in the game, identified by its symbol.
    """
    symbol: Symbol

    @classmethod
    def from_token(cls, token: Union[str, Symbol]) -> "Player":
        """Create a player from "X" or "O"; raises InvalidSymbolError otherwise."""
        return cls(Symbol.parse(token))

    def __str__(self) -> str:
        return f"Player {self.symbol}"
