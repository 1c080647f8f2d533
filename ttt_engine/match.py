"""
Match management for TicTacToe.
Runs rounds of human vs computer: who starts, whose turn it is, and
the engine's replies. Presentation is left to the caller.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from .ai_player import AIPlayer
from .config import EngineConfig
from .game_state import Board, InvalidMoveError, Move, MoveLike, to_move
from .move_validator import MoveValidator
from .players import Player
from .win_checker import GameResult

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """
    A move played in the current round.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Position in the round (0-8)


@dataclass
class Match:
    """
    A series of rounds between the human and the computer.

    Flow of a round:
    1. start_round() clears the board and picks the starter
    2. If the computer starts, it moves right away
    3. play_human_move() applies the human's move and the computer's reply
    4. Repeat until result is terminal, then start the next round

    Only round_counter and tally outlive a round.
    """

    ai: AIPlayer = field(default_factory=AIPlayer)
    board: Board = field(default_factory=Board)
    validator: MoveValidator = field(default_factory=MoveValidator)

    # Rounds started so far; decides who starts the next one
    round_counter: int = 0
    current_player: Player = Player.HUMAN
    history: List[MoveRecord] = field(default_factory=list)

    # Outcomes of finished rounds
    tally: Counter = field(default_factory=Counter)

    @property
    def human(self) -> Player:
        return self.ai.player.opposite()

    @property
    def result(self) -> GameResult:
        return self.board.evaluate()

    @property
    def is_over(self) -> bool:
        return self.result.is_terminal

    def next_starter(self) -> Player:
        """The player who will start the next round."""
        order = [self.human, self.ai.player]
        if not EngineConfig.HUMAN_STARTS_FIRST:
            order.reverse()
        return order[self.round_counter % 2]

    def start_round(self) -> Player:
        """
        Start a new round.

        Returns:
            The player who starts. If it is the computer, its first move
            has already been played.
        """
        starter = self.next_starter()
        self.round_counter += 1

        self.board.reset()
        self.history = []
        self.current_player = starter
        logger.info("Round %d started, %s to play", self.round_counter, starter.mark)

        if starter == self.ai.player:
            self.play_computer_move()
        return starter

    def play_human_move(self, move: MoveLike) -> GameResult:
        """
        Play the human's move, then let the computer reply.

        Args:
            move: (row, col) or cell index 0-8.

        Returns:
            The result after the computer's reply (or after the human's
            move if that ended the round).

        Raises:
            InvalidMoveError: If the move is not legal right now.
        """
        validation = self.validator.validate_move(
            self.board, move, self.human, self.current_player
        )
        if not validation.is_valid:
            raise InvalidMoveError(validation.error_message)

        self._apply(to_move(move), self.human)
        if self._finish_if_over():
            return self.result

        self.play_computer_move()
        return self.result

    def play_computer_move(self) -> Optional[Move]:
        """
        Let the computer play its move.

        Returns:
            The move played, or None if the round is already over.
        """
        if self.is_over:
            return None

        move = self.ai.select_best_move(self.board)
        if move is None:
            return None

        self._record(move, self.ai.player)
        self._finish_if_over()
        return move

    def _apply(self, move: Move, player: Player):
        self.board.place(move, player)
        self._record(move, player)

    def _record(self, move: Move, player: Player):
        row, col = move
        self.history.append(MoveRecord(player, row, col, len(self.history)))
        self.current_player = player.opposite()

    def _finish_if_over(self) -> bool:
        result = self.result
        if not result.is_terminal:
            return False
        self.tally[result] += 1
        logger.info("Round %d over: %s", self.round_counter, result)
        return True
