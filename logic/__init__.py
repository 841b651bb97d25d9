"""
Logic module for TicTacToe.
Handles game state, rules, and AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, Player, Piece, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, Difficulty
