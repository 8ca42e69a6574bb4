"""
Console module for TicTacToe.
Handles the turn-taking loop, input checks and board display.
"""

from .config import GameConfig
from .game_state import GameState
from .move_validator import MoveValidator, ValidationResult
from .board_view import BoardView
from .game_loop import TicTacToeGame
