"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the result.
"""

from dataclasses import dataclass, field
from typing import Optional

from engine.board import Board, Cell, Position
from engine.win_checker import WinChecker


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=Board)

    # Current player's turn
    current_player: Cell = Cell.HUMAN

    # Game result
    winner: Optional[Cell] = None
    is_draw: bool = False
    is_game_over: bool = False

    # Last committed move
    last_move: Optional[Position] = None

    def make_move(self, row: int, col: int, win_checker: WinChecker) -> bool:
        """
        Commit the current player's move and update the result.

        The win check only looks at lines through the new piece.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            win_checker: Used to check the cell just filled.

        Returns:
            True if move was made, False if the game is over
            or the cell is taken.
        """
        if self.is_game_over:
            return False

        if not self.board.is_empty(row, col):
            return False

        self.board[row, col] = self.current_player
        self.last_move = Position(row, col)

        if win_checker.is_winning_line(self.board, row, col):
            self.winner = self.current_player
            self.is_game_over = True
        elif self.board.is_full():
            self.is_draw = True
            self.is_game_over = True
        else:
            self.current_player = self.current_player.opposite()

        return True
