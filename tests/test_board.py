import numpy as np
import pytest

from blockfall.blocks import BlockStore, SettledBlock
from blockfall.board import EMPTY, HEIGHT, WIDTH, Board


def test_new_board_is_empty():
    board = Board()
    assert (board.width, board.height) == (WIDTH, HEIGHT) == (10, 15)
    assert board.grid.shape == (15, 10)
    assert np.all(board.grid == EMPTY)
    assert board.occupied_count() == 0


def test_get_and_set_cell_bounds():
    board = Board()
    board.set_cell(9, 14, 7)
    assert board.get_cell(9, 14) == 7
    assert board.grid[14, 9] == 7
    with pytest.raises(IndexError):
        board.get_cell(10, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, 3)


def test_is_empty_treats_space_above_board_as_open():
    board = Board()
    assert board.is_empty(3, -2)
    assert not board.is_empty(-1, 0)
    assert not board.is_empty(0, 15)
    board.set_cell(2, 2, 0)
    assert not board.is_empty(2, 2)


def test_row_complete_and_ids():
    board = Board()
    for col in range(board.width):
        board.set_cell(col, 14, col + 100)
    assert board.is_row_complete(14)
    assert not board.is_row_complete(13)
    assert board.row_ids(14) == list(range(100, 110))


def test_shift_down_moves_rows_above_and_empties_top():
    board = Board()
    board.set_cell(0, 0, 1)
    board.set_cell(0, 1, 2)
    board.set_cell(0, 2, 99)
    board.set_cell(0, 3, 3)
    board.shift_down(2)
    assert board.get_cell(0, 0) == EMPTY
    assert board.get_cell(0, 1) == 1
    assert board.get_cell(0, 2) == 2
    assert board.get_cell(0, 3) == 3


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.set_cell(1, 1, 5)
    assert board.is_empty(1, 1)


def test_block_store_rejects_duplicate_ids():
    store = BlockStore()
    store.add(SettledBlock(0, (1, 1), "red"))
    with pytest.raises(ValueError):
        store.add(SettledBlock(0, (2, 2), "red"))
    assert len(store) == 1
    assert 0 in store


def test_block_store_shift_and_snapshot():
    store = BlockStore()
    store.add(SettledBlock(0, (1, 3), "red"))
    store.add(SettledBlock(1, (1, 5), "red"))
    snap = store.snapshot()
    store.shift_down_above(4)
    assert store.get(0).position == (1, 4)
    assert store.get(1).position == (1, 5)
    assert snap[0].position == (1, 3)
    assert [b.id for b in store.in_row(4)] == [0]
    store.remove(0)
    assert [b.id for b in store] == [1]
