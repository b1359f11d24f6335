"""
Board module for Othello.
Holds the 8x8 grid of cell states and the colour enumerations.
"""
from enum import IntEnum
from typing import Iterator, Tuple

import numpy as np

from .exceptions import OutOfRangeError

Position = Tuple[int, int]


class CellState(IntEnum):
    """Contents of a single board cell."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2


class Player(IntEnum):
    """A side in the game. Codes match the CellState of its pieces."""
    BLACK = 1
    WHITE = 2

    @property
    def cell(self) -> CellState:
        return CellState(int(self))

    def opponent(self) -> 'Player':
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the bare integer
        return format(str(self), format_spec)


class Board:
    """
    Represents the Othello board as an 8x8 numpy array of cell codes.

    The grid is mutated only through ``set``; game rules live in
    ``rules.apply_move`` which is the sole caller during play.
    """

    SIZE = 8

    def __init__(self):
        """Initialize a board in the standard opening position."""
        self._cells = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._cells[3, 3] = CellState.WHITE
        self._cells[4, 4] = CellState.WHITE
        self._cells[3, 4] = CellState.BLACK
        self._cells[4, 3] = CellState.BLACK

    @classmethod
    def empty(cls) -> 'Board':
        """Create a board with every cell empty."""
        board = cls()
        board._cells[:, :] = CellState.EMPTY
        return board

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def _check(self, pos: Position) -> Position:
        try:
            row, col = pos
        except (TypeError, ValueError):
            raise OutOfRangeError(pos) from None
        if not self.in_bounds(row, col):
            raise OutOfRangeError(pos)
        return row, col

    def get(self, pos: Position) -> CellState:
        """
        Get the state of a cell.

        Args:
            pos: (row, col) tuple, 0-based

        Returns:
            The CellState at that position

        Raises:
            OutOfRangeError: if pos is not on the board
        """
        row, col = self._check(pos)
        return CellState(int(self._cells[row, col]))

    def set(self, pos: Position, cell: CellState) -> None:
        """Write a single cell. Values that are not a CellState raise ValueError."""
        row, col = self._check(pos)
        self._cells[row, col] = CellState(cell)

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board.__new__(Board)
        new_board._cells = self._cells.copy()
        return new_board

    def positions(self) -> Iterator[Position]:
        """Iterate over all 64 positions in row-major order."""
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                yield (row, col)

    def count(self, cell: CellState) -> int:
        """Count the cells holding the given state."""
        return int(np.count_nonzero(self._cells == CellState(cell)))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of cell codes (0 empty, 1 black, 2 white)
        """
        return self._cells.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        symbols = {CellState.EMPTY: '.', CellState.BLACK: 'B', CellState.WHITE: 'W'}
        rows = []
        for i in range(self.SIZE):
            rows.append(' '.join(symbols[CellState(int(v))] for v in self._cells[i]))
        return "\n".join(rows)
