import itertools

import pytest

from tictactoe import Board, DecodeError, Encoding, SquareValue


def board_from_values(values):
    board = Board()
    for square, value in zip(board, values):
        square.set_value(value)
    return board


@pytest.fixture
def example_board():
    board = Board()
    board.get_square(1, 1).set_x()
    board.get_square(2, 2).set_o()
    return board


def test_encode_example(example_board):
    assert Encoding.encode(example_board) == "100020000"


def test_to_number_example(example_board):
    assert Encoding.to_number(example_board) == 1 * 3 ** 8 + 2 * 3 ** 4 == 6723


def test_empty_and_full_boards():
    assert Encoding.encode(Board()) == "000000000"
    assert Encoding.to_number(Board()) == 0

    all_o = board_from_values([SquareValue.O] * 9)
    assert Encoding.encode(all_o) == "222222222"
    assert Encoding.to_number(all_o) == 3 ** 9 - 1 == 19682


def test_decode(example_board):
    board = Encoding.decode("100020000")
    assert board == example_board
    assert board.get_square(1, 1).is_x()
    assert board.get_square(2, 2).is_o()


@pytest.mark.parametrize("encoded", ["", "10002000", "1000200000", "10002000a", "1000200 0", "-10002000"])
def test_decode_rejects_malformed_input(encoded):
    with pytest.raises(DecodeError):
        Encoding.decode(encoded)


def test_decode_rejects_non_strings():
    with pytest.raises(DecodeError):
        Encoding.decode(100020000)


def test_to_number_is_injective_over_all_boards():
    seen = set()
    for values in itertools.product(SquareValue, repeat=9):
        board = board_from_values(values)
        number = Encoding.to_number(board)
        assert 0 <= number <= Encoding.MAX_NUMBER
        seen.add(number)
        # a sample of boards also checks the inverse mappings
        if number % 97 == 0:
            assert Encoding.decode(Encoding.encode(board)) == board
            assert Encoding.from_number(number) == board
    assert len(seen) == 3 ** 9


def test_from_number(example_board):
    assert Encoding.from_number(6723) == example_board
    assert Encoding.from_number(0) == Board()


@pytest.mark.parametrize("number", [-1, 19683, 10 ** 6])
def test_from_number_out_of_range(number):
    with pytest.raises(DecodeError):
        Encoding.from_number(number)


@pytest.mark.parametrize("number", ["6723", 1.5, True, None])
def test_from_number_rejects_non_integers(number):
    with pytest.raises(DecodeError):
        Encoding.from_number(number)


def test_encode_number_and_string_agree(example_board):
    assert int(Encoding.encode(example_board), 3) == Encoding.to_number(example_board)
