"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
from typing import NamedTuple, Optional

from .game_state import Board, Move
from .players import Player, Role

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    """Best move found for a position and its minimax score."""
    move: Move
    score: float


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive, so the AI always plays optimally - it will
    win if possible, block the opponent if needed, and never lose.
    Scores are fixed: a computer (maximizer) win is +1, a human
    (minimizer) win is -1 and a draw is 0.
    """

    def __init__(self, player: Player = Player.COMPUTER):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: COMPUTER)
        """
        self.player = player

        # Number of positions visited by the last search
        self.positions_evaluated = 0

    def minimax(
        self,
        board: Board,
        maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Searches the board in place: every mark placed while exploring is
        removed again before this returns.

        Args:
            board: Position to evaluate.
            maximizing: True if the maximizer (computer) moves next.
            alpha: Best score the maximizer is already assured of.
            beta: Best score the minimizer is already assured of.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        result = board.evaluate()
        if result.is_terminal:
            return result.score

        mover = Player.from_role(Role.MAXIMIZER if maximizing else Role.MINIMIZER)

        if maximizing:
            best_score = float('-inf')
            for move in board.available_moves():
                with board.speculate(move, mover):
                    score = self.minimax(board, False, alpha, beta)
                best_score = max(best_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
        else:
            best_score = float('inf')
            for move in board.available_moves():
                with board.speculate(move, mover):
                    score = self.minimax(board, True, alpha, beta)
                best_score = min(best_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
        return best_score

    def find_best_move(self, board: Board, player: Optional[Player] = None) -> Optional[SearchResult]:
        """
        Find the best move for a player without committing it.

        Each empty cell is tried in row-major order and scored by a full
        search of the opponent's replies. Only a strictly better score
        replaces the current best, so the first of equally good moves wins.

        Args:
            board: Current position. Left unchanged.
            player: Player to move (default: the player this AI controls).

        Returns:
            The best move and its score, or None if the board is full.
        """
        player = player or self.player
        self.positions_evaluated = 0

        valid_moves = board.available_moves()
        if not valid_moves:
            return None

        maximizing = player.is_maximizer
        best: Optional[SearchResult] = None

        for move in valid_moves:
            with board.speculate(move, player):
                score = self.minimax(board, not maximizing, float('-inf'), float('inf'))

            if best is None or (score > best.score if maximizing else score < best.score):
                best = SearchResult(move, score)

        logger.debug(
            "%s evaluated %d positions. Best move: %s (score: %s)",
            player.mark, self.positions_evaluated, best.move, best.score
        )
        return best

    def select_best_move(self, board: Board, player: Optional[Player] = None) -> Optional[Move]:
        """
        Choose and play the best move.

        Placing the chosen mark is the only lasting change to the board.
        On a full board this does nothing.

        Args:
            board: Current position.
            player: Player to move (default: the player this AI controls).

        Returns:
            (row, col) of the move played, or None if no moves were available.
        """
        player = player or self.player
        best = self.find_best_move(board, player)
        if best is None:
            return None

        board.place(best.move, player)
        return best.move

    def get_move_suggestion(self, board: Board, player: Optional[Player] = None) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current position.
            player: Player to advise (default: the player this AI controls).

        Returns:
            A string describing the suggested move.
        """
        player = player or self.player
        best = self.find_best_move(board, player)

        if best is None:
            return "No moves available!"

        row, col = best.move
        return f"Place {player.mark} at position ({row}, {col}) (score: {best.score:+g})"
