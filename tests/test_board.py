from __future__ import annotations

import pytest

from block_puzzle.board import EMPTY, Board


def test_new_board_is_empty() -> None:
    board = Board(10, 20)
    assert board.grid.shape == (20, 10)
    assert board.occupied_count() == 0
    assert board.rows() == [[EMPTY] * 10 for _ in range(20)]


def test_invalid_dimensions_rejected() -> None:
    with pytest.raises(ValueError):
        Board(0, 20)


@pytest.mark.parametrize("x,y", [(-1, 0), (10, 0), (0, -1), (0, 20)])
def test_get_cell_out_of_bounds_raises(x: int, y: int) -> None:
    board = Board(10, 20)
    with pytest.raises(IndexError):
        board.get_cell(x, y)


def test_write_cells_sets_values() -> None:
    board = Board(10, 20)
    board.write_cells([(0, 19, 3), (9, 0, 5)])
    assert board.get_cell(0, 19) == 3
    assert board.get_cell(9, 0) == 5
    assert board.is_empty(1, 19)
    assert board.occupied_count() == 2


def test_write_cells_out_of_bounds_writes_nothing() -> None:
    board = Board(10, 20)
    with pytest.raises(IndexError):
        board.write_cells([(0, 0, 1), (10, 0, 1)])
    assert board.occupied_count() == 0


def test_clear_full_rows_without_full_rows() -> None:
    board = Board(4, 4)
    board.write_cells([(x, 3, 1) for x in range(3)])
    before = board.rows()
    assert board.clear_full_rows() == 0
    assert board.rows() == before


def test_clear_removes_non_adjacent_full_rows_together() -> None:
    board = Board(3, 5)
    board.grid[1] = [1, 1, 1]
    board.grid[2] = [2, 0, 0]
    board.grid[3] = [3, 3, 3]
    board.grid[4] = [0, 4, 0]

    assert board.clear_full_rows() == 2
    assert board.grid.shape == (5, 3)
    assert board.rows() == [
        [0, 0, 0],
        [0, 0, 0],
        [0, 0, 0],
        [2, 0, 0],
        [0, 4, 0],
    ]


def test_copy_is_independent() -> None:
    board = Board(3, 3)
    clone = board.copy()
    clone.write_cells([(0, 0, 1)])
    assert board.is_empty(0, 0)
