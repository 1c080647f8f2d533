"""
Exhaustive play-out of the engine against every human strategy.
"""

import logging
from collections import Counter
from typing import Optional

from .ai_player import AIPlayer
from .game_state import Board
from .players import Player

logger = logging.getLogger(__name__)


def play_all_games(
    ai: Optional[AIPlayer] = None,
    starter: Player = Player.HUMAN,
    board: Optional[Board] = None
) -> Counter:
    """
    Play every legal human move sequence against the engine.

    The human branches over all empty cells at each turn; the engine
    answers each position with its deterministic best move.

    Args:
        ai: Engine to test (default: AIPlayer for the computer).
        starter: Player to move first.
        board: Starting position (default: empty). Not modified.

    Returns:
        Counter of final GameResults, one count per finished game.
    """
    ai = ai or AIPlayer()
    board = board.copy() if board is not None else Board()

    outcomes: Counter = Counter()
    _explore(ai, board, starter, outcomes)

    logger.info("Played %d games with %s starting: %s",
                sum(outcomes.values()), starter.mark, dict(outcomes))
    return outcomes


def _explore(ai: AIPlayer, board: Board, to_move: Player, outcomes: Counter):
    result = board.evaluate()
    if result.is_terminal:
        outcomes[result] += 1
        return

    if to_move == ai.player:
        move = ai.select_best_move(board)
        try:
            _explore(ai, board, to_move.opposite(), outcomes)
        finally:
            board.clear(move)
        return

    for move in board.available_moves():
        with board.speculate(move, to_move):
            _explore(ai, board, to_move.opposite(), outcomes)
