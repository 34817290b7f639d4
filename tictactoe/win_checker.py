"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import List, Optional, Set, Tuple

import numpy as np

from .board import Board
from .player import Symbol
from .square import SquareValue


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same symbol in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of 1-based (row, col) tuples)
    WINNING_LINES = Board.line_coordinates()

    def _line_values(self, board: Board) -> np.ndarray:
        """
        The digits of all 8 lines as an 8x3 array.

        Rows, then columns, then main and anti diagonal.
        """
        grid = board.to_array()
        return np.vstack([
            grid,
            grid.T,
            np.diag(grid),
            np.diag(np.fliplr(grid)),
        ])

    def _completed_lines(self, board: Board) -> List[Tuple[int, Symbol]]:
        """(line index, owner) for every line holding three equal symbols."""
        completed = []
        for index, line in enumerate(self._line_values(board)):
            if line[0] != SquareValue.EMPTY.value and np.all(line == line[0]):
                completed.append((index, SquareValue(int(line[0])).to_symbol()))
        return completed

    def check_winner(self, board: Board) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Symbol, or None if no winner yet.
        """
        completed = self._completed_lines(board)
        if not completed:
            return None
        return completed[0][1]

    def winners(self, board: Board) -> Set[Symbol]:
        """Every symbol owning a completed line (two means an impossible position)."""
        return {symbol for _, symbol in self._completed_lines(board)}

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of 1-based (row, col), or None.
        """
        completed = self._completed_lines(board)
        if not completed:
            return None
        return list(self.WINNING_LINES[completed[0][0]])

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        """
        return board.is_full() and self.check_winner(board) is None
