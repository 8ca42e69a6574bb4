"""
Win checker for TicTacToe.
Checks whether a move completes a line, and looks one move ahead
for immediate wins and threats.
"""

from typing import Optional

from .board import Board, Cell, Position
from .config import EngineConfig


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 pieces of the same side in a row
    (horizontally, vertically, or diagonally)

    The look-ahead methods place pieces on the board and take them
    back before returning, so the board is never left changed.
    """

    @staticmethod
    def is_diagonal(row: int, col: int) -> bool:
        """True for the four corners and the center."""
        return (row, col) in EngineConfig.DIAGONAL_CELLS

    def is_winning_line(self, board: Board, row: int, col: int) -> bool:
        """
        Check if the piece at (row, col) sits on a completed line.

        Only the lines passing through the cell are checked: its row,
        its column, and any diagonal it belongs to.

        Args:
            board: The game board.
            row: Row of the cell that was just filled.
            col: Column of the cell that was just filled.

        Returns:
            True if that cell's side owns a full line through it.
        """
        side = board[row, col]
        if side == Cell.EMPTY:
            return False

        if all(cell == side for cell in board.row(row)):
            return True

        if all(cell == side for cell in board.column(col)):
            return True

        if not self.is_diagonal(row, col):
            return False

        if row == col and all(cell == side for cell in board.cells(EngineConfig.LEFT_DIAGONAL)):
            return True

        if row + col == 2 and all(cell == side for cell in board.cells(EngineConfig.RIGHT_DIAGONAL)):
            return True

        return False

    def _winning_cells(self, board: Board, side: Cell):
        """Yield, in row-major order, every empty cell that wins for side."""
        for position in board.get_empty_cells():
            with board.placed(position, side):
                wins = self.is_winning_line(board, *position)
            if wins:
                yield position

    def find_immediate_win(self, board: Board, side: Cell) -> Optional[Position]:
        """
        Find a cell that wins the game right away.

        Args:
            board: The game board.
            side: Who would move.

        Returns:
            The first winning cell in row-major order, or None.
        """
        return next(self._winning_cells(board, side), None)

    def count_winning_cells(self, board: Board, side: Cell) -> int:
        """Count the empty cells that would win right away for side."""
        return sum(1 for _ in self._winning_cells(board, side))

    def find_must_defend(self, board: Board, attacking_side: Cell) -> Optional[Position]:
        """
        Find the cell attacking_side must take to stop the opponent winning next move.

        Args:
            board: The game board.
            attacking_side: The side about to move.

        Returns:
            The first cell (row-major) where the opponent would win, or None.
        """
        return self.find_immediate_win(board, attacking_side.opposite())
