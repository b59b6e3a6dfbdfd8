import io

import pytest

from othello.ai import choose_move, computer_move
from othello.board import Board


def _full_board():
    return Board([[1, 2, 1, 2, 1, 2, 1, 2]] * 8)


@pytest.fixture
def out():
    return io.StringIO()


def test_choose_move_returns_valid_move():
    board = Board.initial()
    assert choose_move(board, 1) in board.valid_moves(1)


def test_choose_move_minimises_opponent_replies():
    board = Board.initial()
    board.apply_move(1, *board.valid_moves(1)[0])
    move = choose_move(board, 2)

    def replies(candidate):
        preview = board.copy()
        preview.apply_move(2, *candidate)
        return preview.count_moves(1)

    assert all(replies(move) <= replies(other) for other in board.valid_moves(2))


def test_choose_move_does_not_modify_board():
    board = Board.initial()
    choose_move(board, 2)
    assert board == Board.initial()


def test_choose_move_none_when_no_moves():
    assert choose_move(_full_board(), 1) is None


def test_computer_move_without_moves_returns_false(out):
    board = _full_board()
    assert computer_move(board, 2, out) is False
    assert board == _full_board()
    assert out.getvalue() == ""


@pytest.mark.parametrize("player", [1, 2])
def test_computer_move_plays_and_reports_chosen_move(player, out):
    board = Board.initial()
    x, y = choose_move(board, player)
    expected = board.copy()
    expected.apply_move(player, x, y)
    assert computer_move(board, player, out) is True
    assert board == expected
    assert out.getvalue() == f"\nSpieler {player} setzt auf {chr(65 + x)}{y + 1}\n"


def test_computer_self_play_terminates(out):
    board = Board.initial()
    player = 1
    turns = 0
    while board.count_moves(1) or board.count_moves(2):
        computer_move(board, player, out)
        player = 3 - player
        turns += 1
        assert turns <= 200
    assert board.count_moves(1) == 0 and board.count_moves(2) == 0
    assert board.winner() in (0, 1, 2)
    assert out.getvalue().count("setzt auf") <= 60