"""
Othello game module.
This package contains the core game logic: board, move rules and game state.
"""

from .board import Board, CellState, Player, Position
from .exceptions import GameInProgressError, IllegalMoveError, OthelloError, OutOfRangeError
from .rules import DIRECTIONS, apply_move, flips_for, has_legal_move, is_legal, legal_moves
from .state import GameState, MoveRecord, Outcome, ScoreTally

__all__ = [
    'Board', 'CellState', 'Player', 'Position',
    'OthelloError', 'OutOfRangeError', 'IllegalMoveError', 'GameInProgressError',
    'DIRECTIONS', 'flips_for', 'is_legal', 'legal_moves', 'has_legal_move', 'apply_move',
    'GameState', 'MoveRecord', 'Outcome', 'ScoreTally',
]
