"""
Console game loop for TicTacToe.

Ties together:
- GameState (the board the game owns)
- MoveValidator (checks typed human moves)
- AIPlayer (picks the computer's moves)
- BoardView (draws the board)
"""

from typing import Callable, Optional

from engine.ai_player import AIPlayer
from engine.board import BoardError, Cell, Position
from engine.win_checker import WinChecker
from .board_view import BoardView
from .config import GameConfig
from .game_state import GameState
from .move_validator import MoveValidator


class TicTacToeGame:
    """
    Runs one game of TicTacToe in the terminal.

    Game flow:
    1. Decide who moves first
    2. The player to move picks a cell (typed by the human,
       chosen by the AI for the computer)
    3. The cell is committed and checked for a win
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        ai: Optional[AIPlayer] = None,
        win_checker: Optional[WinChecker] = None,
        validator: Optional[MoveValidator] = None,
        view: Optional[BoardView] = None,
        game_state: Optional[GameState] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the game.

        Args:
            ai: The computer player.
            win_checker: Line checker used after every move.
            validator: Validates human moves.
            view: Draws the board.
            game_state: Start from this state instead of an empty board.
            input_func: Reads one line of user input (default: input).
            output: Prints one line (default: print).
        """
        self.win_checker = win_checker or WinChecker()
        self.ai = ai or AIPlayer(win_checker=self.win_checker)
        self.validator = validator or MoveValidator()
        self.view = view or BoardView()
        self.game_state = game_state or GameState()
        self.input_func = input_func or input
        self.output = output or print

    def start(self, first_player: Optional[Cell] = None) -> GameState:
        """
        Start the game.

        Args:
            first_player: Who moves first. Asks the user if None.

        Returns:
            The finished game state.
        """
        self.output(GameConfig.START_MESSAGE)
        if first_player is None:
            first_player = self.determine_first_move()
        self.game_state.current_player = first_player

        self.output("\nInitial Board")
        self.view.print_board(self.game_state.board, self.output)
        return self.play()

    def play(self) -> GameState:
        """
        Alternate turns until someone wins or the board is full.

        The engine is never asked to move on a full board.
        """
        state = self.game_state

        while not state.is_game_over and not state.board.is_full():
            if state.current_player == Cell.HUMAN:
                self.output(f"\n{GameConfig.HUMAN_TURN_MESSAGE}")
                row, col = self.human_turn()
            else:
                self.output(f"\n{GameConfig.COMPUTER_TURN_MESSAGE}")
                row, col = self.ai.get_best_move(state.board)

            mover = state.current_player
            if not state.make_move(row, col, self.win_checker):
                raise BoardError(f"Move ({row}, {col}) could not be played")
            self.view.print_board(state.board, self.output)

            if state.winner is not None:
                self.output(
                    GameConfig.HUMAN_WIN_MESSAGE if mover == Cell.HUMAN
                    else GameConfig.COMPUTER_WIN_MESSAGE
                )
                return state

        if not state.is_game_over:
            # Started from a board that was already full
            state.is_draw = True
            state.is_game_over = True

        if state.is_draw:
            self.output(f"\n{GameConfig.TIE_MESSAGE}")
        return state

    def determine_first_move(self) -> Cell:
        """
        Ask who moves first until the answer is 'u' or 'p'.

        Returns:
            Cell.HUMAN or Cell.COMPUTER.
        """
        while True:
            answer = self.input_func(GameConfig.FIRST_MOVE_PROMPT).strip().lower()
            if answer == GameConfig.HUMAN_FIRST_KEY:
                return Cell.HUMAN
            if answer == GameConfig.COMPUTER_FIRST_KEY:
                return Cell.COMPUTER
            self.output(
                f"Error: Invalid Input (enter '{GameConfig.HUMAN_FIRST_KEY}' "
                f"or '{GameConfig.COMPUTER_FIRST_KEY}')"
            )

    def human_turn(self) -> Position:
        """
        Read the human's move, re-prompting until it is valid.

        Returns:
            An empty, in-range position.
        """
        while True:
            row = self._prompt_int(GameConfig.ROW_PROMPT, "row")
            col = self._prompt_int(GameConfig.COLUMN_PROMPT, "column")

            result = self.validator.validate_move(self.game_state, row, col)
            if result.is_valid:
                return Position(row, col)
            self.output(f"Error: {result.error_message}")

    def _prompt_int(self, prompt: str, name: str) -> int:
        while True:
            value = self.validator.parse_int(self.input_func(prompt))
            if value is not None:
                return value
            self.output(f"Error!: Input {name} must be an integer")
