"""
Compact string and number representations of a board.

Each square becomes one base-3 digit in row-major order:
Empty -> 0, X -> 1, O -> 2. Square (1,1) is the most significant digit.
"""

import numpy as np

from .board import Board
from .config import GameConfig
from .exceptions import DecodeError


class Encoding:
    """
    Stateless board encoder.

    Example: X at (1,1) and O at (2,2) encodes to "100020000", which is
    the number 1*3^8 + 2*3^4 = 6723.
    """

    ALPHABET = GameConfig.ENCODING_ALPHABET
    LENGTH = GameConfig.CELL_COUNT
    MAX_NUMBER = GameConfig.MAX_ENCODED_NUMBER

    # Positional weights, most significant first: 3^8 ... 3^0
    _WEIGHTS = GameConfig.ENCODING_BASE ** np.arange(LENGTH - 1, -1, -1, dtype=np.int64)

    @staticmethod
    def encode(board: Board) -> str:
        """Encode a board to a 9-character string over "012"."""
        return "".join(Encoding.ALPHABET[square.get_value().value] for square in board)

    @staticmethod
    def decode(encoded: str) -> Board:
        """
        Decode a 9-character string back to a board.

        Raises:
            DecodeError: If the string has the wrong length or a character
                outside "012".
        """
        if not isinstance(encoded, str):
            raise DecodeError(f"Expected a string, got {type(encoded).__name__}")
        if len(encoded) != Encoding.LENGTH:
            raise DecodeError(
                f"Encoded board must be {Encoding.LENGTH} characters, got {len(encoded)}"
            )

        digits = []
        for position, char in enumerate(encoded):
            digit = Encoding.ALPHABET.find(char)
            if digit < 0:
                raise DecodeError(f"Invalid character {char!r} at position {position}")
            digits.append(digit)

        return Board.from_array(np.array(digits, dtype=np.int8).reshape(Board.SIZE, Board.SIZE))

    @staticmethod
    def to_number(board: Board) -> int:
        """Interpret the board as a base-3 number in [0, 19682]."""
        digits = board.to_array().flatten().astype(np.int64)
        return int(np.dot(digits, Encoding._WEIGHTS))

    @staticmethod
    def from_number(number: int) -> Board:
        """
        Inverse of to_number.

        Raises:
            DecodeError: If number is outside [0, 19682].
        """
        if isinstance(number, bool) or not isinstance(number, (int, np.integer)):
            raise DecodeError(f"Expected an integer, got {type(number).__name__}")
        if not 0 <= number <= Encoding.MAX_NUMBER:
            raise DecodeError(f"Encoded number {number} out of range [0, {Encoding.MAX_NUMBER}]")

        return Encoding.decode(np.base_repr(int(number), base=GameConfig.ENCODING_BASE).zfill(Encoding.LENGTH))
