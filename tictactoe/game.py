"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the move history and the result.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .board import Board
from .config import GameConfig
from .encoding import Encoding
from .exceptions import InvalidPositionError
from .move_validator import MoveValidator
from .player import Player, Symbol
from .square import SquareValue
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Where the game stands. Only IN_PROGRESS has outgoing transitions."""
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    symbol: Symbol          # Who made the move
    row: int                # Row (1-3)
    col: int                # Column (1-3)
    move_number: int        # 1 for the first move of the game


class Game:
    """
    A game of TicTacToe between Player X and Player O.

    X always moves first; whose turn it is follows from how many squares
    are filled. After every move all 8 lines are checked: a completed
    line ends the game with a winner, a full board without one is a draw.
    """

    def __init__(self):
        self.player_x = Player(Symbol.X)
        self.player_o = Player(Symbol.O)
        self._validator = MoveValidator()
        self._win_checker = WinChecker()
        self.reset()

    def reset(self) -> None:
        """Clear the board and start over."""
        self._board = Board()
        self._moves: List[Move] = []
        self._winner: Optional[Player] = None
        self._status = GameStatus.IN_PROGRESS

    @classmethod
    def from_board(cls, board: Board) -> "Game":
        """
        Resume a game from a position.

        The move history starts empty; status and winner are evaluated
        from the position.

        Raises:
            InvalidPositionError: If the position can't come from legal play.
        """
        x_count = board.count(SquareValue.X)
        o_count = board.count(SquareValue.O)
        if x_count - o_count not in (0, 1):
            raise InvalidPositionError(
                f"Impossible position: {x_count} X and {o_count} O"
            )

        winners = WinChecker().winners(board)
        if len(winners) > 1:
            raise InvalidPositionError("Impossible position: both players have a line")
        if Symbol.X in winners and x_count == o_count:
            raise InvalidPositionError("Impossible position: O moved after X won")
        if Symbol.O in winners and x_count > o_count:
            raise InvalidPositionError("Impossible position: X moved after O won")

        game = cls()
        game._board = board.copy()
        game._evaluate()
        return game

    @classmethod
    def from_encoded(cls, encoded: str) -> "Game":
        """Resume a game from its 9-character encoding."""
        return cls.from_board(Encoding.decode(encoded))

    @property
    def board(self) -> Board:
        """A copy of the current board; changing it does not affect the game."""
        return self._board.copy()

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status != GameStatus.IN_PROGRESS

    @property
    def moves(self) -> List[Move]:
        return list(self._moves)

    @property
    def current_player(self) -> Player:
        """X when an even number of squares is filled, O otherwise."""
        filled = self._board.count(SquareValue.X) + self._board.count(SquareValue.O)
        return self.player_x if filled % 2 == 0 else self.player_o

    @property
    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        if self._status != GameStatus.WON:
            return None
        return self._win_checker.get_winning_line(self._board)

    def player_for(self, symbol: Symbol) -> Player:
        return self.player_x if symbol == Symbol.X else self.player_o

    def play(
        self,
        row: int = GameConfig.CENTER[0],
        col: int = GameConfig.CENTER[1],
        symbol: Optional[Union[Symbol, str]] = None
    ) -> GameStatus:
        """
        Play a move for the player whose turn it is.

        Without arguments the move goes to the center square, which on a
        fresh game is X's opening move.

        Args:
            row: Row (1-3).
            col: Column (1-3).
            symbol: If given, the move is rejected unless it's this
                symbol's turn.

        Returns:
            The game status after the move.

        Raises:
            GameOverError: The game was already won or drawn.
            CoordinateError: (row, col) is off the board.
            SquareOccupiedError: The square is taken.
            WrongTurnError: symbol is not the player to move.
        """
        result = self._validator.validate_move(self, row, col, symbol)
        if not result.is_valid:
            logger.warning("Rejected move at (%s, %s): %s", row, col, result.error_message)
            raise result.error

        player = self.current_player
        self._board.get_square(row, col).set_value(player.symbol)

        move = Move(
            symbol=player.symbol,
            row=row,
            col=col,
            move_number=len(self._moves) + 1
        )
        self._moves.append(move)
        logger.debug("Move %d: %s plays (%d, %d)", move.move_number, player, row, col)

        self._evaluate()
        return self._status

    def _evaluate(self) -> None:
        """Update winner and status from the board."""
        winner = self._win_checker.check_winner(self._board)

        if winner is not None:
            self._winner = self.player_for(winner)
            self._status = GameStatus.WON
            logger.info("%s wins with line %s", self._winner, self.winning_line)
        elif self._win_checker.check_draw(self._board):
            self._status = GameStatus.DRAWN
            logger.info("Game drawn")

    def __str__(self) -> str:
        return str(self._board)


# Quick test
if __name__ == "__main__":
    from .config import configure_logging

    configure_logging(logging.DEBUG)

    game = Game()
    for row, col in [(2, 2), (1, 1), (1, 3), (3, 1), (2, 1), (2, 3), (3, 2), (1, 2), (3, 3)]:
        status = game.play(row, col)
        print(f"\n{game}\n")
        if game.is_over:
            break

    print(f"Result: {status.value}, winner: {game.winner}")
    print(f"Encoded: {Encoding.encode(game.board)} = {Encoding.to_number(game.board)}")
