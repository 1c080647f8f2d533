"""
Player identities for TicTacToe.
The human is always the minimizer and the computer the maximizer.
"""

from enum import Enum

from .config import EngineConfig


class Role(Enum):
    """Search role of a player, valued by the score of its win."""
    MINIMIZER = -1
    MAXIMIZER = 1

    @property
    def win_score(self) -> int:
        """Score of a finished game won by this role."""
        return self.value


class Player(Enum):
    """The two players in the game."""
    HUMAN = EngineConfig.HUMAN_MARK
    COMPUTER = EngineConfig.COMPUTER_MARK

    @property
    def mark(self) -> str:
        """Single character used for this player in board notation."""
        return self.value

    @property
    def code(self) -> int:
        """Value stored in the board grid for a cell owned by this player."""
        return 1 if self is Player.HUMAN else 2

    @property
    def role(self) -> Role:
        # Swapping this mapping inverts the engine's strategy
        return Role.MINIMIZER if self is Player.HUMAN else Role.MAXIMIZER

    @property
    def is_maximizer(self) -> bool:
        return self.role is Role.MAXIMIZER

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN

    @classmethod
    def from_code(cls, code: int) -> "Player":
        """Get the player owning a grid value."""
        for player in cls:
            if player.code == code:
                return player
        raise ValueError(f"No player has grid code {code!r}")

    @classmethod
    def from_role(cls, role: Role) -> "Player":
        """Get the player that plays the given search role."""
        return cls.COMPUTER if role is Role.MAXIMIZER else cls.HUMAN
