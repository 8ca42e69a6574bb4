"""
Move validator for TicTacToe.
Checks the human's typed move before it reaches the board.
"""

from dataclasses import dataclass
from typing import Optional

from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be integers in 0-2
    2. Can only place on empty cells
    3. Game must not be over
    """

    @staticmethod
    def parse_int(text: str) -> Optional[int]:
        """
        Parse one typed coordinate.

        Returns:
            The integer, or None if the text is not an integer.
        """
        try:
            return int(text.strip())
        except ValueError:
            return None

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place piece (0-2).
            col: Column to place piece (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        size = game_state.board.SIZE
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Row and Column specified should be in range 0 to {size - 1}"
            )

        if not game_state.board.is_empty(row, col):
            return ValidationResult(
                is_valid=False,
                error_message="Position specified is already occupied"
            )

        return ValidationResult(is_valid=True)
