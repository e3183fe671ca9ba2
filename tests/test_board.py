import pytest

from xoboard.game_logic import Board, EMPTY, MARK_O, MARK_X, WIN_LINES


def test_new_board_is_empty():
    board = Board()
    assert board.get_cells() == (EMPTY,) * 9
    assert not board.is_full()


def test_set_mark_on_empty_cell():
    board = Board()
    assert board.set_mark(4, MARK_X) is True
    assert board.get_cells()[4] == MARK_X
    assert not board.is_cell_empty(4)


def test_set_mark_never_overwrites():
    board = Board()
    board.set_mark(4, MARK_X)
    assert board.set_mark(4, MARK_O) is False
    assert board.get_cells()[4] == MARK_X


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_set_mark_rejects_out_of_range(index):
    board = Board()
    with pytest.raises(IndexError):
        board.set_mark(index, MARK_X)
    assert board.get_cells() == (EMPTY,) * 9


def test_is_cell_empty_out_of_range_is_false():
    board = Board()
    assert not board.is_cell_empty(-1)
    assert not board.is_cell_empty(9)


def test_get_cells_is_a_snapshot():
    board = Board()
    cells = board.get_cells()
    board.set_mark(0, MARK_X)
    assert cells[0] == EMPTY
    assert isinstance(cells, tuple)


def test_reset_clears_every_cell():
    board = Board()
    for i in range(9):
        board.set_mark(i, MARK_X if i % 2 else MARK_O)
    assert board.is_full()
    board.reset()
    assert board.get_cells() == (EMPTY,) * 9


@pytest.mark.parametrize("line", WIN_LINES)
def test_every_line_wins(line):
    board = Board()
    for i in line:
        board.set_mark(i, MARK_O)
    assert board.winner() == MARK_O


def test_mixed_line_does_not_win():
    board = Board()
    board.set_mark(0, MARK_X)
    board.set_mark(1, MARK_X)
    board.set_mark(2, MARK_O)
    assert board.winner() is None


def test_full_board_without_line_has_no_winner():
    board = Board()
    layout = "XOXXOOOXX"
    for i, mark in enumerate(layout):
        board.set_mark(i, mark)
    assert board.is_full()
    assert board.winner() is None
