import pytest
from bitarray import bitarray

from brickwall.board import Board, CellState


def test_from_cells_maps_bits_to_states():
    board = Board.from_cells(bitarray("1001"), 2, 2)
    assert board[0] == CellState.NEEDS_BRICK
    assert board[0, 1] == CellState.EMPTY
    assert board[1, 0] == CellState.EMPTY
    assert board[3] == CellState.NEEDS_BRICK
    assert str(board) == "1.\n.1"


def test_fill_marks_inclusive_range():
    board = Board.from_cells(bitarray("111011"), 2, 3)
    board.fill(0, 1)
    assert board.count(CellState.FILLED) == 2
    assert board.count(CellState.NEEDS_BRICK) == 3
    assert str(board) == "##1\n.11"


def test_setitem_by_2d_index():
    board = Board.from_cells(bitarray("11"), 1, 2)
    board[0, 1] = CellState.FILLED
    assert board[1] == CellState.FILLED


def test_index_helpers():
    board = Board.from_cells(bitarray("000000"), 2, 3)
    assert board.get_2d_idx(5) == (1, 2)
    assert board.get_1d_idx(1, 0) == 3
    assert list(board.row_range(1)) == [3, 4, 5]
    assert board.is_row_end(2)
    assert not board.is_row_end(3)


def test_size_mismatch_rejected():
    with pytest.raises(ValueError):
        Board([1, 1, 1], 2, 2)


def test_invalid_index_type():
    board = Board.from_cells(bitarray("1"), 1, 1)
    with pytest.raises(IndexError):
        board["a"]
