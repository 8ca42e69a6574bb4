"""
Engine module for TicTacToe.
Handles the board, win detection, and the computer's move choice.
"""

from .config import EngineConfig
from .board import Board, BoardError, Cell, Position
from .win_checker import WinChecker
from .heuristics import HeuristicScorer
from .ai_player import AIPlayer, Candidate, Decision

__version__ = "1.0.0"
