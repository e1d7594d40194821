"""
Logic module for TicTacToe.
Handles the board, game rules, and session state.
"""

from .config import GameConfig
from .board import Board, Mark, MoveError
from .win_checker import WinChecker, GameStatus, GameResult
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, Move
