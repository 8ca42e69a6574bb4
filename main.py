"""
Main script for terminal TicTacToe.

Run this script to play TicTacToe against the computer!
You are X, the computer is O.
"""

import argparse
from typing import List, Optional

from engine.ai_player import AIPlayer
from engine.board import Cell
from engine.win_checker import WinChecker
from game.config import GameConfig
from game.game_loop import TicTacToeGame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    order = parser.add_mutually_exclusive_group()
    order.add_argument(
        "--human-first",
        action="store_true",
        help="You move first (skips the first-move question)"
    )
    order.add_argument(
        "--computer-first",
        action="store_true",
        help="The computer moves first (skips the first-move question)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print how the computer chose each move"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Play a single game without offering a rematch"
    )
    return parser


def first_player_from_args(args: argparse.Namespace) -> Optional[Cell]:
    if args.human_first:
        return Cell.HUMAN
    if args.computer_first:
        return Cell.COMPUTER
    return None


def wants_rematch(input_func=None) -> bool:
    answer = (input_func or input)(GameConfig.REMATCH_PROMPT).strip().lower()
    return answer in ("y", "yes")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    win_checker = WinChecker()
    ai = AIPlayer(win_checker=win_checker, verbose=args.verbose)

    try:
        while True:
            game = TicTacToeGame(ai=ai, win_checker=win_checker)
            game.start(first_player_from_args(args))
            if args.once or not wants_rematch():
                break
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
