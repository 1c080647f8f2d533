"""
TicTacToe decision engine.
Handles the board, win detection, and the minimax AI opponent.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .players import Player, Role
from .win_checker import GameResult, GameStatus, WinChecker
from .game_state import Board, InvalidMoveError, Move, index_to_move, move_to_index
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, SearchResult
from .match import Match, MoveRecord
from .analysis import play_all_games
