"""
Tests for the minimax AI.
"""

import pytest

from ttt_engine import AIPlayer, Board, GameStatus, Player, play_all_games

X = Player.HUMAN
O = Player.COMPUTER


def human_can_win_next(board):
    for move in board.available_moves():
        with board.speculate(move, X):
            if board.evaluate().winner is X:
                return True
    return False


def full_minimax(board, maximizing, visited):
    """Plain minimax over every branch, counting visited positions."""
    visited[0] += 1
    result = board.evaluate()
    if result.is_terminal:
        return result.score

    mover = O if maximizing else X
    scores = []
    for move in board.available_moves():
        with board.speculate(move, mover):
            scores.append(full_minimax(board, not maximizing, visited))
    return max(scores) if maximizing else min(scores)


# Positions in the full game tree from the empty board
FULL_TREE_SIZE = 549946


def test_pruning_cuts_the_empty_board_tree():
    ai = AIPlayer()
    assert ai.minimax(Board(), True) == 0
    assert ai.positions_evaluated < FULL_TREE_SIZE // 5


@pytest.mark.parametrize("notation, maximizing", [
    ("x../.o./...", False),
    ("x../.o./...", True),
    ("x../.../...", True),
    (".../.x./...", True),
    ("xo./.../...", False),
    ("xo./.x./...", True),
    ("o.x/.x./...", True),
    ("xox/.o./...", False),
])
def test_pruned_score_matches_full_minimax(notation, maximizing):
    board = Board.from_string(notation)
    visited = [0]
    expected = full_minimax(board, maximizing, visited)

    ai = AIPlayer()
    assert ai.minimax(board, maximizing) == expected
    assert ai.positions_evaluated <= visited[0]
    assert board == Board.from_string(notation)


def test_pruning_skips_positions_mid_game():
    board = Board.from_string("x../.o./...")
    visited = [0]
    full_minimax(board, False, visited)

    ai = AIPlayer()
    ai.minimax(board, False)
    assert ai.positions_evaluated < visited[0]


def test_empty_board_first_move():
    board = Board()
    ai = AIPlayer()
    best = ai.find_best_move(board, O)
    assert best.move == (0, 0)
    assert best.score == 0


def test_takes_immediate_win():
    board = Board.from_string("oo./xx./...")
    best = AIPlayer().find_best_move(board, O)
    assert best.move == (0, 2)
    assert best.score == 1


def test_human_side_takes_immediate_win():
    board = Board.from_string("xx./oo./...")
    best = AIPlayer().find_best_move(board, X)
    assert best.move == (0, 2)
    assert best.score == -1


def test_blocks_threat():
    # x threatens the left column; earlier cells in scan order all lose
    board = Board.from_string("x../xo./...")
    ai = AIPlayer()
    assert ai.select_best_move(board) == (2, 0)
    assert not human_can_win_next(board)


@pytest.mark.parametrize("notation", [
    "x../xo./...",
    "xx./.o./...",
    ".x./.x./o..",
    "o.x/.x./...",
])
def test_never_leaves_an_immediate_loss(notation):
    board = Board.from_string(notation)
    AIPlayer().select_best_move(board)
    assert board.evaluate().winner is not X
    assert not human_can_win_next(board)


def test_minimax_at_terminal_state():
    board = Board.from_string("xxx/oo./...")
    ai = AIPlayer()
    assert ai.minimax(board, True) == -1
    assert ai.positions_evaluated == 1


def test_minimax_restores_board():
    board = Board.from_string("x../.o./...")
    before = board.copy()
    AIPlayer().minimax(board, False)
    assert board == before


def test_find_best_move_restores_board():
    board = Board.from_string("x.o/.x./...")
    before = board.copy()
    AIPlayer().find_best_move(board, O)
    assert board == before


def test_select_best_move_commits_one_mark():
    board = Board.from_string("x../.../...")
    move = AIPlayer().select_best_move(board)
    assert board.count(O) == 1
    assert board.count(X) == 1
    assert board.cell(move) is O


def test_full_board_is_a_no_op():
    board = Board.from_string("xox/xoo/oxx")
    ai = AIPlayer()
    assert ai.find_best_move(board) is None
    assert ai.select_best_move(board) is None
    assert board == Board.from_string("xox/xoo/oxx")


def test_deterministic():
    notation = "x../.../..."
    moves = set()
    for _ in range(3):
        board = Board.from_string(notation)
        moves.add(AIPlayer().select_best_move(board))
    assert len(moves) == 1


def test_positions_evaluated_reset_per_search():
    ai = AIPlayer()
    ai.find_best_move(Board(), O)
    first = ai.positions_evaluated
    assert first > 0
    ai.find_best_move(Board(), O)
    assert ai.positions_evaluated == first


def test_move_suggestion():
    ai = AIPlayer()
    assert ai.get_move_suggestion(Board.from_string("oo./xx./...")) == \
        "Place o at position (0, 2) (score: +1)"
    assert ai.get_move_suggestion(Board.from_string("xox/xoo/oxx")) == "No moves available!"


@pytest.mark.parametrize("starter", list(Player))
def test_never_loses(starter):
    outcomes = play_all_games(starter=starter)
    assert sum(outcomes.values()) > 0
    for result in outcomes:
        assert result.is_terminal
        assert not (result.status is GameStatus.WIN and result.winner is X)


def test_play_all_games_leaves_board_untouched():
    board = Board.from_string("x../.o./...")
    play_all_games(starter=X, board=board)
    assert board == Board.from_string("x../.o./...")
