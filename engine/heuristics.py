"""
Heuristic scoring for the TicTacToe computer player.

Two numbers are computed for each candidate move:
- risk: how exposed the computer is to a fork after the move (lower is better)
- attack: how many open lines the move sits on (higher is better)
"""

from typing import Optional, Sequence

from .board import Board, Cell
from .config import EngineConfig
from .win_checker import WinChecker


class HeuristicScorer:
    """Scores candidate moves for the computer."""

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    @staticmethod
    def line_offense(cells: Sequence[Cell]) -> int:
        """1 if the line has no human piece on it (still winnable), else 0."""
        return 0 if Cell.HUMAN in cells else 1

    def diagonal_offense(self, row: int, col: int, board: Board) -> int:
        """
        Offense from the diagonals through (row, col).

        Corners count their one diagonal, the center counts both,
        and every other cell counts nothing.
        """
        if not self.win_checker.is_diagonal(row, col):
            return 0

        score = 0
        if row == col:
            score += self.line_offense(board.cells(EngineConfig.LEFT_DIAGONAL))
        if row + col == 2:
            score += self.line_offense(board.cells(EngineConfig.RIGHT_DIAGONAL))
        return score

    def attack_score(self, row: int, col: int, board: Board) -> int:
        """Row + column + diagonal offense for the cell."""
        return (
            self.line_offense(board.row(row))
            + self.line_offense(board.column(col))
            + self.diagonal_offense(row, col, board)
        )

    def risk_score(self, board: Board) -> int:
        """
        Estimate the fork danger on a board where the computer has just moved.

        If the computer threatens to win, the human is forced to block.
        After that block, count how many cells would win for the human:
        more than one is a fork the computer cannot stop.

        Returns:
            EngineConfig.SAFE_RISK if there is no forced block,
            the number of human winning cells if that is a fork,
            otherwise 0.
        """
        forced_block = self.win_checker.find_must_defend(board, Cell.HUMAN)
        if forced_block is None:
            return EngineConfig.SAFE_RISK

        with board.placed(forced_block, Cell.HUMAN):
            human_wins = self.win_checker.count_winning_cells(board, Cell.HUMAN)

        if human_wins > EngineConfig.FORK_THRESHOLD:
            return human_wins
        return 0
