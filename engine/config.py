"""
Engine configuration for TicTacToe.
Board geometry and the heuristic constants used by the computer player.
"""


class EngineConfig:
    """
    Configuration for the move-selection engine.
    
    Changing the heuristic values changes how the computer plays,
    not just how fast it decides.
    """
    
    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    
    # Left diagonal: top-left -> bottom-right
    LEFT_DIAGONAL = ((0, 0), (1, 1), (2, 2))
    
    # Right diagonal: top-right -> bottom-left
    RIGHT_DIAGONAL = ((0, 2), (1, 1), (2, 0))
    
    # Cells a diagonal passes through (four corners + center)
    DIAGONAL_CELLS = frozenset(LEFT_DIAGONAL + RIGHT_DIAGONAL)
    
    # ==================== HEURISTIC SETTINGS ====================
    # Risk reported when the computer has no immediate threat on the board.
    # Higher than any real fork count.
    SAFE_RISK = 10
    
    # The human needs more than this many winning cells to have a fork
    FORK_THRESHOLD = 1
