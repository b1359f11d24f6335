"""
Exceptions raised by the Othello game core.
"""


class OthelloError(Exception):
    """Base class for all game-core errors."""


class OutOfRangeError(OthelloError, IndexError):
    """A position lies outside the 8x8 board."""

    def __init__(self, pos):
        super().__init__(f"Position {pos} is outside the board")
        self.pos = pos


class IllegalMoveError(OthelloError, ValueError):
    """A command was refused because it is not legal in the current state."""


class GameInProgressError(OthelloError, RuntimeError):
    """The result of a game was requested before the game ended."""
