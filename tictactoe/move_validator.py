"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from .board import Board
from .exceptions import (
    CoordinateError,
    GameOverError,
    InvalidSymbolError,
    SquareOccupiedError,
    TicTacToeError,
    WrongTurnError,
)
from .player import Symbol

if TYPE_CHECKING:
    from .game import Game


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[TicTacToeError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    4. If a symbol is given, it must be that symbol's turn
    """

    def validate_move(
        self,
        game: "Game",
        row: int,
        col: int,
        symbol: Optional[Union[Symbol, str]] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: Current game.
            row: Row to place the symbol (1-3).
            col: Column to place the symbol (1-3).
            symbol: Symbol the caller expects to play, if any.

        Returns:
            ValidationResult with is_valid and the error play() would raise.
        """
        if game.is_over:
            return ValidationResult(
                is_valid=False,
                error=GameOverError(f"Game is already over! ({game.status.value})")
            )

        if not Board.is_valid_coordinate(row, col):
            return ValidationResult(is_valid=False, error=CoordinateError(row, col))

        square = game._board.get_square(row, col)
        if not square.is_empty():
            return ValidationResult(
                is_valid=False,
                error=SquareOccupiedError(
                    f"Cell ({row}, {col}) is already occupied by {square.get_value().name}"
                )
            )

        if symbol is not None:
            try:
                symbol = Symbol.parse(symbol)
            except InvalidSymbolError as e:
                return ValidationResult(is_valid=False, error=e)
            if symbol != game.current_player.symbol:
                return ValidationResult(
                    is_valid=False,
                    error=WrongTurnError(
                        f"It's not {symbol}'s turn! {game.current_player} moves next."
                    )
                )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game: "Game") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of 1-based (row, col); empty once the game is over.
        """
        if game.is_over:
            return []
        return game._board.empty_cells()
