"""
Board rendering for the console game.
"""

from typing import Dict, Optional

from engine.board import Board, Cell
from .config import GameConfig


class BoardView:
    """
    Draws the board as text.

    Example (X = user, O = computer):

        X|O| 
        -|-|-
         |X| 
        -|-|-
         | |O
    """

    def __init__(self, symbols: Optional[Dict[Cell, str]] = None):
        self.symbols = symbols or GameConfig.SYMBOLS

    def render(self, board: Board) -> str:
        """Return the board as five lines of text."""
        sep = GameConfig.COLUMN_SEPARATOR
        divider = sep.join([GameConfig.ROW_SEPARATOR] * board.SIZE)

        lines = []
        for row in range(board.SIZE):
            if row > 0:
                lines.append(divider)
            lines.append(sep.join(self.symbols[cell] for cell in board.row(row)))
        return "\n".join(lines)

    def print_board(self, board: Board, output=print):
        """Print the board with a blank line above it."""
        output("")
        output(self.render(board))
