"""
Console configuration for TicTacToe.
Symbols, prompts and messages shown to the player.
"""

from engine.board import Cell


class GameConfig:
    """
    Configuration class for the console game.
    Change these values to restyle the game!
    """
    
    # ==================== BOARD DISPLAY ====================
    SYMBOLS = {
        Cell.EMPTY: " ",
        Cell.HUMAN: "X",
        Cell.COMPUTER: "O",
    }
    COLUMN_SEPARATOR = "|"
    ROW_SEPARATOR = "-"
    
    # ==================== FIRST MOVE ====================
    HUMAN_FIRST_KEY = "u"
    COMPUTER_FIRST_KEY = "p"
    FIRST_MOVE_PROMPT = "Who moves first? (u : user, p : program): "
    
    # ==================== PROMPTS ====================
    ROW_PROMPT = "Enter the row to move: "
    COLUMN_PROMPT = "Enter the column to move: "
    REMATCH_PROMPT = "Play again? (y/n): "
    
    # ==================== MESSAGES ====================
    START_MESSAGE = "Start Game"
    HUMAN_TURN_MESSAGE = "User's turn"
    COMPUTER_TURN_MESSAGE = "AI's turn"
    HUMAN_WIN_MESSAGE = "User has won!"
    COMPUTER_WIN_MESSAGE = "AI has won!"
    TIE_MESSAGE = "Tie!"
