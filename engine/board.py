"""
Board model for TicTacToe.
A 3x3 grid of cells, stored as a small numpy array.
"""

from contextlib import contextmanager
from enum import IntEnum
from typing import Iterator, List, NamedTuple, Optional, Sequence, Union

import numpy as np

from .config import EngineConfig


class BoardError(ValueError):
    """Raised when a board is malformed or used outside the engine's contract."""


class Cell(IntEnum):
    """What can sit in a board cell."""
    EMPTY = 0
    HUMAN = 1
    COMPUTER = 2

    def opposite(self) -> "Cell":
        """Get the opposing side."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite side")
        return Cell.COMPUTER if self == Cell.HUMAN else Cell.HUMAN


class Position(NamedTuple):
    """A (row, col) coordinate on the board."""
    row: int
    col: int


# Characters accepted by Board.parse()
_PARSE_SYMBOLS = {
    "X": Cell.HUMAN,
    "O": Cell.COMPUTER,
    " ": Cell.EMPTY,
    ".": Cell.EMPTY,
}

_VALID_VALUES = frozenset(int(cell) for cell in Cell)

Index = Union[Position, tuple]


class Board:
    """
    The 3x3 TicTacToe grid.

    The game loop owns the board. The engine borrows it and may
    place pieces temporarily with placed(), which always puts the
    previous value back.
    """

    SIZE = EngineConfig.BOARD_SIZE

    def __init__(self, grid: Optional[Sequence[Sequence[int]]] = None):
        """
        Create a board.

        Args:
            grid: Optional 3x3 nested sequence of Cell values.
                  Defaults to an empty board.
        """
        if grid is None:
            self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        else:
            try:
                self.grid = np.array(grid, dtype=np.int8)
            except (OverflowError, ValueError, TypeError) as e:
                raise BoardError(f"Board grid is not a {self.SIZE}x{self.SIZE} grid of cell values: {e}") from e
            self.validate()

    @classmethod
    def parse(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from three strings.

        'X' is the human, 'O' the computer, ' ' or '.' an empty cell.

        Example:
            Board.parse(["XX.", ".O.", "..."])
        """
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise BoardError(f"Expected {cls.SIZE} rows of {cls.SIZE} characters")

        grid = []
        for row in rows:
            try:
                grid.append([_PARSE_SYMBOLS[ch.upper()] for ch in row])
            except KeyError as e:
                raise BoardError(f"Unknown board symbol {e.args[0]!r}") from None
        return cls(grid)

    def validate(self) -> None:
        """
        Check the grid shape and that every cell holds a Cell value.

        Raises:
            BoardError: If the grid is malformed.
        """
        if self.grid.shape != (self.SIZE, self.SIZE):
            raise BoardError(f"Board must be {self.SIZE}x{self.SIZE}, got {self.grid.shape}")

        bad = set(np.unique(self.grid).tolist()) - _VALID_VALUES
        if bad:
            raise BoardError(f"Board holds invalid cell values: {sorted(bad)}")

    def _check_index(self, row: int, col: int):
        # numpy would wrap negative indices around
        if not (0 <= row < self.SIZE and 0 <= col < self.SIZE):
            raise BoardError(f"Position ({row}, {col}) is off the board")

    def __getitem__(self, index: Index) -> Cell:
        row, col = index
        self._check_index(row, col)
        return Cell(int(self.grid[row, col]))

    def __setitem__(self, index: Index, cell: Cell):
        if not isinstance(cell, Cell):
            raise BoardError(f"Not a cell value: {cell!r}")
        row, col = index
        self._check_index(row, col)
        self.grid[row, col] = cell

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        symbols = {Cell.EMPTY: ".", Cell.HUMAN: "X", Cell.COMPUTER: "O"}
        rows = ["".join(symbols[Cell(int(v))] for v in row) for row in self.grid]
        return f"Board({rows!r})"

    def is_empty(self, row: int, col: int) -> bool:
        return self[row, col] == Cell.EMPTY

    def get_empty_cells(self) -> List[Position]:
        """
        Get all empty cells on the board.

        Returns:
            List of positions in row-major order.
        """
        return [Position(int(r), int(c)) for r, c in np.argwhere(self.grid == Cell.EMPTY)]

    def is_full(self) -> bool:
        return not (self.grid == Cell.EMPTY).any()

    def row(self, row: int) -> List[Cell]:
        self._check_index(row, 0)
        return [Cell(int(v)) for v in self.grid[row, :]]

    def column(self, col: int) -> List[Cell]:
        self._check_index(0, col)
        return [Cell(int(v)) for v in self.grid[:, col]]

    def cells(self, positions: Sequence[Index]) -> List[Cell]:
        """Get the values at a list of positions (e.g. a diagonal)."""
        return [self[pos] for pos in positions]

    @contextmanager
    def placed(self, position: Index, side: Cell) -> Iterator["Board"]:
        """
        Temporarily put a piece on an empty cell.

        The cell is restored when the block exits, even on error.

        Args:
            position: Cell to occupy.
            side: Cell.HUMAN or Cell.COMPUTER.
        """
        if side == Cell.EMPTY:
            raise BoardError("Cannot place an EMPTY piece")

        previous = self[position]
        if previous != Cell.EMPTY:
            raise BoardError(f"Cell {tuple(position)} is already occupied")

        self[position] = side
        try:
            yield self
        finally:
            self[position] = previous
