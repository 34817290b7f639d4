"""
Configuration for the TicTacToe domain model.
Board geometry, encoding alphabet, display strings and logging.
"""

import logging
from typing import Optional


class GameConfig:
    """
    Configuration class for game settings.
    Values are read directly by the other modules.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, coordinates are 1-based
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 squares

    # Center square, where the first move goes by default
    CENTER = (2, 2)

    # ==================== ENCODING SETTINGS ====================
    # One digit per square: Empty, X, O
    ENCODING_ALPHABET = "012"
    ENCODING_BASE = len(ENCODING_ALPHABET)

    # Largest number a board can encode to (3^9 - 1)
    MAX_ENCODED_NUMBER = ENCODING_BASE ** CELL_COUNT - 1  # 19682

    # ==================== DISPLAY SETTINGS ====================
    # Every square renders three characters wide
    SQUARE_DISPLAY = {
        "empty": "   ",
        "x": " X ",
        "o": " O ",
    }
    COLUMN_SEPARATOR = "|"
    ROW_DIVIDER = "-" * 11

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[int] = None) -> None:
    """
    Set up root logging for scripts using the package.

    The package itself never installs handlers; call this once from
    application code.

    Args:
        level: Logging level (default: GameConfig.LOG_LEVEL)
    """
    logging.basicConfig(
        level=GameConfig.LOG_LEVEL if level is None else level,
        format=GameConfig.LOG_FORMAT,
    )
