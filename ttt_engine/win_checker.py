"""
Win checker for TicTacToe.
Decides whether a board is won, drawn or still in progress.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from .config import EngineConfig
from .players import Player

if TYPE_CHECKING:
    from .game_state import Board


class GameStatus(Enum):
    """Overall status of a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """
    Result derived from a board. Never stored, always recomputed.

    winner is set only when status is WIN.
    """
    status: GameStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameResult":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "GameResult":
        return cls(GameStatus.DRAW)

    @classmethod
    def win(cls, player: Player) -> "GameResult":
        return cls(GameStatus.WIN, player)

    @property
    def is_terminal(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def score(self) -> int:
        """
        Minimax score of a terminal result.

        Returns:
            +1 for a maximizer win, -1 for a minimizer win, 0 for a draw.

        Raises:
            ValueError: If the game is still in progress.
        """
        if self.status is GameStatus.WIN:
            return self.winner.role.win_score
        if self.status is GameStatus.DRAW:
            return 0
        raise ValueError("A game in progress has no score")

    def __str__(self) -> str:
        if self.status is GameStatus.WIN:
            return f"{self.winner.mark} wins"
        if self.status is GameStatus.DRAW:
            return "draw"
        return "in progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, in the order they are checked
    WINNING_LINES: List[List[Tuple[int, int]]] = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(2, 0), (1, 1), (0, 2)],
    ]

    # Same lines as flat row-major indices
    _FLAT_LINES = [
        tuple(row * EngineConfig.BOARD_SIZE + col for row, col in line)
        for line in WINNING_LINES
    ]

    def check_winner(self, board: "Board") -> Optional[Player]:
        """
        Check if there's a winner.

        Every line is checked; if several lines match (only possible
        after illegal play) the last one checked decides.

        Args:
            board: The board to check.

        Returns:
            The winning Player, or None if no winner yet.
        """
        cells = board.cells()
        index = self._last_winning_index(cells)
        if index is None:
            return None
        return Player.from_code(cells[self._FLAT_LINES[index][0]])

    def check_draw(self, board: "Board") -> bool:
        """True if the board is full and nobody has won."""
        return self.evaluate(board).status is GameStatus.DRAW

    def evaluate(self, board: "Board") -> GameResult:
        """
        Evaluate a board.

        Args:
            board: The board to evaluate.

        Returns:
            WIN for the owner of a completed line, DRAW for a full board
            without one, IN_PROGRESS otherwise.
        """
        cells = board.cells()
        index = self._last_winning_index(cells)
        if index is not None:
            return GameResult.win(Player.from_code(cells[self._FLAT_LINES[index][0]]))
        if EngineConfig.EMPTY_CODE not in cells:
            return GameResult.draw()
        return GameResult.in_progress()

    def get_winning_line(self, board: "Board") -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The winning line as list of (row, col), or None.
        """
        index = self._last_winning_index(board.cells())
        if index is None:
            return None
        return list(self.WINNING_LINES[index])

    def _last_winning_index(self, cells: List[int]) -> Optional[int]:
        winning = None
        for index, (a, b, c) in enumerate(self._FLAT_LINES):
            if cells[a] != EngineConfig.EMPTY_CODE and cells[a] == cells[b] == cells[c]:
                winning = index
        return winning
