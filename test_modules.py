"""
Checks that every module of the package imports and fits together.
"""

import logging

import tictactoe
from tictactoe import Board, Encoding, Game, GameConfig, GameStatus, configure_logging


def test_config():
    assert GameConfig.BOARD_SIZE == 3
    assert GameConfig.CELL_COUNT == 9
    assert GameConfig.MAX_ENCODED_NUMBER == 19682
    assert len(GameConfig.ROW_DIVIDER) == 11
    assert all(len(text) == 3 for text in GameConfig.SQUARE_DISPLAY.values())


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging()
    configure_logging(logging.DEBUG)

    assert calls == [
        {"level": GameConfig.LOG_LEVEL, "format": GameConfig.LOG_FORMAT},
        {"level": logging.DEBUG, "format": GameConfig.LOG_FORMAT},
    ]


def test_package_exports():
    assert tictactoe.__version__ == "1.0.0"
    for name in ("Board", "Square", "Encoding", "Game", "WinChecker", "MoveValidator"):
        assert hasattr(tictactoe, name)


def test_game_logic():
    game = Game()
    game.play()
    game.play(1, 1)

    encoded = Encoding.encode(game.board)
    assert encoded == "200010000"
    assert Encoding.to_number(game.board) == 2 * 3 ** 8 + 3 ** 4

    resumed = Game.from_encoded(encoded)
    assert resumed.board == game.board
    assert resumed.status == GameStatus.IN_PROGRESS
    assert str(resumed) == str(game.board)
    assert Encoding.decode(encoded) == game.board
    assert Board.from_array(game.board.to_array()) == game.board
