"""
Tests for win, draw and in-progress detection.
"""

import pytest

from ttt_engine import Board, GameResult, GameStatus, Player, WinChecker


def board_with_line(line, player):
    board = Board()
    for move in line:
        board.place(move, player)
    return board


@pytest.mark.parametrize("player", list(Player))
@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_completed_line_wins(line, player):
    board = board_with_line(line, player)
    assert board.evaluate() == GameResult.win(player)
    assert WinChecker().check_winner(board) is player
    assert WinChecker().get_winning_line(board) == line


@pytest.mark.parametrize("notation, winner", [
    ("xxx/oo./...", Player.HUMAN),
    ("x.o/xo./o.x", Player.COMPUTER),
    ("oxx/.o./x.o", Player.COMPUTER),
    ("xo./xo./x..", Player.HUMAN),
    ("xoo/oxx/xoo", None),
])
def test_mixed_boards(notation, winner):
    assert WinChecker().check_winner(Board.from_string(notation)) is winner


def test_draw():
    board = Board.from_string("xox/xoo/oxx")
    result = board.evaluate()
    assert result == GameResult.draw()
    assert result.is_terminal
    assert result.score == 0
    assert WinChecker().check_draw(board)


def test_full_board_with_line_is_a_win():
    result = Board.from_string("xxx/oox/xoo").evaluate()
    assert result.status is GameStatus.WIN
    assert result.winner is Player.HUMAN


def test_in_progress():
    for notation in [".../.../...", "x../.../...", "xo./ox./...", "xox/xoo/ox."]:
        result = Board.from_string(notation).evaluate()
        assert result == GameResult.in_progress()
        assert not result.is_terminal


def test_in_progress_has_no_score():
    with pytest.raises(ValueError):
        GameResult.in_progress().score


def test_win_scores():
    assert GameResult.win(Player.COMPUTER).score == 1
    assert GameResult.win(Player.HUMAN).score == -1


def test_last_matching_line_decides():
    # Two winners only happen after illegal play; the bottom row is checked last
    board = Board.from_string("xxx/.../ooo")
    assert board.evaluate().winner is Player.COMPUTER
    assert WinChecker().get_winning_line(board) == [(2, 0), (2, 1), (2, 2)]


def test_evaluate_is_idempotent():
    board = Board.from_string("xo./ox./..x")
    first = board.evaluate()
    assert all(board.evaluate() == first for _ in range(5))
    assert board == Board.from_string("xo./ox./..x")


def test_result_str():
    assert str(GameResult.win(Player.HUMAN)) == "x wins"
    assert str(GameResult.draw()) == "draw"
    assert str(GameResult.in_progress()) == "in progress"
