"""
AI player for TicTacToe.
Picks the computer's move: win if possible, otherwise block,
otherwise the lowest-risk / highest-attack cell.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import Board, BoardError, Cell, Position
from .heuristics import HeuristicScorer
from .win_checker import WinChecker


class Decision(Enum):
    """Which rule picked the last move."""
    WIN = "win"
    BLOCK = "block"
    HEURISTIC = "heuristic"


@dataclass
class Candidate:
    """A scored move considered by the heuristic rule."""
    position: Position
    risk: int
    attack: int


class AIPlayer:
    """
    A heuristic TicTacToe opponent.

    Priority, checked in order on every turn:
    1. Win now if a cell completes a line for the computer
    2. Block a cell that would let the human win next move
    3. Otherwise score every empty cell and take the one with the
       lowest risk, breaking ties by the highest attack score and
       then by row-major order
    """

    def __init__(
        self,
        win_checker: Optional[WinChecker] = None,
        scorer: Optional[HeuristicScorer] = None,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            win_checker: Line/threat detector (a new one by default).
            scorer: Heuristic scorer (built on win_checker by default).
            verbose: Print a line about each decision.
        """
        self.win_checker = win_checker or WinChecker()
        self.scorer = scorer or HeuristicScorer(self.win_checker)
        self.verbose = verbose

        # Details of the last decision (for debugging)
        self.last_decision: Optional[Decision] = None
        self.last_candidates: List[Candidate] = []

    def get_best_move(self, board: Board) -> Position:
        """
        Get the computer's move for the current board.

        Args:
            board: Current board. Must have at least one empty cell.

        Returns:
            (row, col) of an empty cell.

        Raises:
            BoardError: If the board is full or holds invalid values.
        """
        self._check_playable(board)
        self.last_candidates = []

        move = self.win_checker.find_immediate_win(board, Cell.COMPUTER)
        if move is not None:
            return self._decide(Decision.WIN, move)

        move = self.win_checker.find_must_defend(board, Cell.COMPUTER)
        if move is not None:
            return self._decide(Decision.BLOCK, move)

        self.last_candidates = self.score_candidates(board)
        best = min(self.last_candidates, key=lambda c: (c.risk, -c.attack))
        return self._decide(Decision.HEURISTIC, best.position)

    def score_candidates(self, board: Board) -> List[Candidate]:
        """
        Score every empty cell as if the computer moved there.

        Returns:
            Candidates in row-major order.
        """
        candidates = []
        for position in board.get_empty_cells():
            with board.placed(position, Cell.COMPUTER):
                candidates.append(Candidate(
                    position=position,
                    risk=self.scorer.risk_score(board),
                    attack=self.scorer.attack_score(position.row, position.col, board)
                ))
        return candidates

    def _decide(self, decision: Decision, move: Position) -> Position:
        self.last_decision = decision

        if self.verbose:
            if decision is Decision.HEURISTIC:
                best = next(c for c in self.last_candidates if c.position == move)
                print(f"AI evaluated {len(self.last_candidates)} positions. "
                      f"Best move: {tuple(move)} (risk: {best.risk}, attack: {best.attack})")
            else:
                print(f"AI move: {tuple(move)} ({decision.value})")

        return move

    @staticmethod
    def _check_playable(board: Board):
        """Fail fast on boards the engine is not meant to see."""
        board.validate()
        if board.is_full():
            raise BoardError("AI asked to move on a full board")
