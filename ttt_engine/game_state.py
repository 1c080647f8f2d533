"""
Board model for TicTacToe.
Holds the 3x3 grid and the placement/undo primitives the search relies on.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from .config import EngineConfig
from .players import Player
from .win_checker import GameResult, WinChecker

# A move is a (row, col) pair; a row-major index 0-8 is also accepted
Move = Tuple[int, int]
MoveLike = Union[Move, int]


class InvalidMoveError(ValueError):
    """Raised when a move targets an occupied or nonexistent cell."""


def index_to_move(index: int) -> Move:
    """Convert a row-major cell index (0-8) to (row, col)."""
    if not 0 <= index < EngineConfig.CELL_COUNT:
        raise InvalidMoveError(
            f"Invalid cell index {index}. Must be 0-{EngineConfig.CELL_COUNT - 1}."
        )
    row, col = divmod(index, EngineConfig.BOARD_SIZE)
    return (row, col)


def move_to_index(move: Move) -> int:
    """Convert (row, col) to a row-major cell index."""
    row, col = move
    return row * EngineConfig.BOARD_SIZE + col


def to_move(move: MoveLike) -> Move:
    """
    Normalise a move to a (row, col) tuple.

    Raises:
        InvalidMoveError: If the move does not name a cell on the board.
    """
    if isinstance(move, (int, np.integer)):
        return index_to_move(int(move))
    row, col = move
    size = EngineConfig.BOARD_SIZE
    if not (0 <= row < size and 0 <= col < size):
        raise InvalidMoveError(f"Invalid position ({row}, {col}). Must be 0-{size - 1}.")
    return (int(row), int(col))


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are stored in a numpy int8 array: 0 for empty, otherwise the
    owning player's code. The board is shared by reference with the
    search, which places and clears marks in place and always restores
    what it touched.
    """

    _win_checker = WinChecker()

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize the board.

        Args:
            grid: Optional 3x3 array of cell codes. Copied; the board never
                aliases the caller's array. Empty board if omitted.
        """
        size = EngineConfig.BOARD_SIZE
        if grid is None:
            self.grid = np.full((size, size), EngineConfig.EMPTY_CODE, dtype=np.int8)
        else:
            self.grid = np.array(grid, dtype=np.int8)
            if self.grid.shape != (size, size):
                raise ValueError(f"Board grid must be {size}x{size}, got {self.grid.shape}")

    @classmethod
    def from_string(cls, notation: str) -> "Board":
        """
        Build a board from text notation.

        Nine cells in row-major order using the player marks and "." for
        empty. Row separators ("/" or "|") and whitespace are ignored, so
        "xo./.x./..o" and "xo..x...o" are the same board.

        Raises:
            ValueError: On unknown characters or the wrong number of cells.
        """
        codes = {EngineConfig.EMPTY_MARK: EngineConfig.EMPTY_CODE}
        codes.update({player.mark: player.code for player in Player})

        cells = []
        for char in notation.lower():
            if char in EngineConfig.NOTATION_SEPARATORS:
                continue
            if char not in codes:
                raise ValueError(f"Unknown cell character {char!r} in {notation!r}")
            cells.append(codes[char])

        if len(cells) != EngineConfig.CELL_COUNT:
            raise ValueError(
                f"Board notation needs {EngineConfig.CELL_COUNT} cells, got {len(cells)}"
            )
        size = EngineConfig.BOARD_SIZE
        return cls(np.array(cells, dtype=np.int8).reshape(size, size))

    def to_string(self) -> str:
        """Text notation of the board, rows separated by "/"."""
        rows = []
        for row in self.grid:
            rows.append("".join(self._mark_for(code) for code in row))
        return "/".join(rows)

    @staticmethod
    def _mark_for(code: int) -> str:
        if code == EngineConfig.EMPTY_CODE:
            return EngineConfig.EMPTY_MARK
        return Player.from_code(int(code)).mark

    # ==================== QUERIES ====================

    def cells(self) -> List[int]:
        """All cell codes as a flat row-major list."""
        return self.grid.ravel().tolist()

    def cell(self, move: MoveLike) -> Optional[Player]:
        """The player owning a cell, or None if it is empty."""
        row, col = to_move(move)
        code = int(self.grid[row, col])
        if code == EngineConfig.EMPTY_CODE:
            return None
        return Player.from_code(code)

    def is_empty(self, move: MoveLike) -> bool:
        """True iff the target cell is empty."""
        row, col = to_move(move)
        return int(self.grid[row, col]) == EngineConfig.EMPTY_CODE

    def available_moves(self) -> List[Move]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order. The order is
            what breaks ties between equally scored moves in the search.
        """
        size = EngineConfig.BOARD_SIZE
        return [
            divmod(index, size)
            for index, code in enumerate(self.cells())
            if code == EngineConfig.EMPTY_CODE
        ]

    def count(self, player: Player) -> int:
        """Number of cells marked by a player."""
        return int(np.count_nonzero(self.grid == player.code))

    def is_full(self) -> bool:
        return not np.any(self.grid == EngineConfig.EMPTY_CODE)

    def evaluate(self) -> GameResult:
        """Win, draw or in progress, recomputed from the current cells."""
        return self._win_checker.evaluate(self)

    # ==================== MUTATION ====================

    def place(self, move: MoveLike, player: Player) -> None:
        """
        Mark a cell for a player.

        Raises:
            InvalidMoveError: If the cell is occupied or off the board.
        """
        row, col = to_move(move)
        if int(self.grid[row, col]) != EngineConfig.EMPTY_CODE:
            raise InvalidMoveError(
                f"Cell ({row}, {col}) is already occupied by {self.cell((row, col)).mark}"
            )
        self.grid[row, col] = player.code

    def clear(self, move: MoveLike) -> None:
        """Reset a cell to empty. Used to undo speculative placements."""
        row, col = to_move(move)
        self.grid[row, col] = EngineConfig.EMPTY_CODE

    @contextmanager
    def speculate(self, move: MoveLike, player: Player) -> Iterator[None]:
        """
        Place a mark for the duration of a with-block.

        The cell is cleared on every exit path, including a break out of
        the enclosing loop or an exception.
        """
        self.place(move, player)
        try:
            yield
        finally:
            self.clear(move)

    def reset(self) -> None:
        """Set every cell to empty."""
        self.grid.fill(EngineConfig.EMPTY_CODE)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self.grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"
