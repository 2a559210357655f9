import numpy as np
import pytest

from tictactoe.models.enums import CellMark
from tictactoe.game.board import Board
from tictactoe.game.errors import InvalidIndexError, MalformedBoardError

X, O, E = CellMark.X, CellMark.O, CellMark.EMPTY


def test_new_board_is_empty():
    board = Board()
    assert len(board) == 9
    assert all(board.is_empty(i) for i in range(9))
    assert not board.is_full()
    assert board.get_empty_cells() == list(range(9))


def test_set_and_get():
    board = Board()
    assert board.set(4, X) is True
    assert board.get(4) == X
    assert not board.is_empty(4)
    assert board.count(X) == 1


def test_set_never_overwrites():
    board = Board()
    assert board.set(0, X)
    assert board.set(0, O) is False
    assert board.set(0, X) is False
    assert board.get(0) == X


def test_occupancy_invariant_over_move_sequence():
    board = Board()
    sequence = [(0, X), (0, O), (4, O), (4, X), (8, X), (0, O)]
    written = {}
    for index, mark in sequence:
        before = board.cells
        placed = board.set(index, mark)
        if index in written:
            assert placed is False
            assert board.cells == before
        else:
            assert placed is True
            written[index] = mark
    for index, mark in written.items():
        assert board.get(index) == mark


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_invalid_index_raises(index):
    board = Board()
    with pytest.raises(InvalidIndexError) as excinfo:
        board.is_empty(index)
    assert excinfo.value.index == index
    with pytest.raises(InvalidIndexError):
        board.get(index)
    with pytest.raises(InvalidIndexError):
        board.set(index, X)


def test_invalid_index_is_an_index_error():
    with pytest.raises(IndexError):
        Board().get(9)


def test_cannot_place_empty():
    with pytest.raises(ValueError):
        Board().set(0, E)


def test_is_full():
    board = Board.from_string("XOXXOOOXX")
    assert board.is_full()
    assert board.get_empty_cells() == []


def test_snapshot_is_independent():
    board = Board()
    board.set(0, X)
    copy = board.snapshot()
    assert copy == board
    copy.set(1, O)
    assert board.is_empty(1)
    board.set(2, X)
    assert copy.is_empty(2)


def test_reset_clears_everything():
    board = Board.from_string("XOXXOOOXX")
    board.reset()
    assert board == Board()
    assert board.set(0, O)


def test_string_round_trip_and_display():
    board = Board.from_string("X_O_X_O_X")
    assert board.to_string() == "X_O_X_O_X"
    assert str(board) == "X _ O\n_ X _\nO _ X"


def test_malformed_inputs():
    with pytest.raises(MalformedBoardError) as excinfo:
        Board([X] * 8)
    assert excinfo.value.length == 8
    with pytest.raises(MalformedBoardError):
        Board.from_string("XO")
    with pytest.raises(ValueError):
        Board.from_string("XO?______")
    with pytest.raises(ValueError):
        Board(["X"] * 9)


def test_validate_move():
    board = Board.from_string("X________")
    assert board.validate_move(1).is_valid
    occupied = board.validate_move(0)
    assert not occupied.is_valid
    assert "occupied" in occupied.error_message
    assert not board.validate_move(9).is_valid


def test_numpy_integer_indices_are_accepted():
    board = Board()
    assert board.set(np.int64(4), X)
    assert board.get(np.int8(4)) == X
    assert not board.is_empty(np.uint8(4))
    assert not board.validate_move(np.int32(4)).is_valid
    assert board.validate_move(np.int32(0)).is_valid


@pytest.mark.parametrize("index", [4.0, "4", None])
def test_non_integer_indices_are_rejected(index):
    board = Board()
    with pytest.raises(InvalidIndexError):
        board.set(index, X)
    assert not board.validate_move(index).is_valid
