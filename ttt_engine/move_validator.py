"""
Move validator for TicTacToe.
Validates that a human move follows the rules before it reaches the board.
"""

from dataclasses import dataclass
from typing import Optional

from .game_state import Board, InvalidMoveError, MoveLike, to_move
from .players import Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. It must be the moving player's turn
    3. Can only place on empty cells of the board
    """

    def validate_move(
        self,
        board: Board,
        move: MoveLike,
        player: Optional[Player] = None,
        current_player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            move: (row, col) or cell index 0-8.
            player: Player making the move, if known.
            current_player: Player whose turn it is, if known.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        result = board.evaluate()
        if result.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over ({result})!"
            )

        # Check whose turn it is
        if player is not None and current_player is not None and player != current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player.mark}'s turn!"
            )

        # Check if the move names a cell
        try:
            row, col = to_move(move)
        except InvalidMoveError as e:
            return ValidationResult(is_valid=False, error_message=str(e))

        # Check if cell is empty
        if not board.is_empty((row, col)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.cell((row, col)).mark}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)
