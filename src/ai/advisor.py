"""
Heuristic move selection for the computer player.

Each candidate is scored by the static value of its cell minus the best
static value the opponent could reach in reply on the resulting board.
Flip counts play no part in the score.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..game import rules
from ..game.board import Board, Player, Position
from ..game.exceptions import IllegalMoveError

logger = logging.getLogger(__name__)

# Static value of each cell, row-major. Corners are prized, the cells
# touching a corner are penalised.
POSITION_VALUES = np.array([
    [100, -20,  10,   5,   5,  10, -20, 100],
    [-20, -50, -10,  -2,  -2, -10, -50, -20],
    [ 10, -10,   9,   0,   0,   9, -10,  10],
    [  5,  -2,   0,   0,   0,   0,  -2,   5],
    [  5,  -2,   0,   0,   0,   0,  -2,   5],
    [ 10, -10,   9,   0,   0,   9, -10,  10],
    [-20, -50, -10,  -2,  -2, -10, -50, -20],
    [100, -20,  10,   5,   5,  10, -20, 100],
], dtype=np.int32)
POSITION_VALUES.setflags(write=False)

# Score used for the opponent's reply when it has none; below every table entry.
NO_REPLY_VALUE = -100


class AiAdvisor:
    """One-ply positional move chooser with a worst-case opponent reply."""

    def __init__(self, position_values: np.ndarray = POSITION_VALUES):
        values = np.asarray(position_values, dtype=np.int32)
        if values.shape != (Board.SIZE, Board.SIZE):
            raise ValueError(f"Position table must be 8x8, got {values.shape}")
        if values.min() <= NO_REPLY_VALUE:
            raise ValueError(f"Position values must be above {NO_REPLY_VALUE}")
        if not (np.array_equal(values, values[::-1, :])
                and np.array_equal(values, values[:, ::-1])
                and np.array_equal(values, values.T)):
            raise ValueError("Position table must be symmetric across both axes and the diagonal")
        self._values = values.copy()
        self._values.setflags(write=False)

    def position_value(self, pos: Position) -> int:
        row, col = pos
        return int(self._values[row, col])

    def evaluate(self, board: Board, move: Position, player: Player,
                 flips: Optional[Sequence[Position]] = None) -> int:
        """
        Score a single candidate move.

        Args:
            board: Current board (not modified)
            move: Candidate (row, col)
            player: The side considering the move
            flips: Flips for this move on this board; recomputed when omitted

        Returns:
            Cell value of ``move`` minus the opponent's best reply value

        Raises:
            IllegalMoveError: if the move flips nothing
        """
        if flips is None:
            flips = rules.flips_for(board, move, player)
        if not flips:
            raise IllegalMoveError(f"{player} cannot play {move}")
        self_value = self.position_value(move)

        simulated = board.copy()
        rules.apply_move(simulated, move, player, flips)

        replies = rules.legal_moves(simulated, player.opponent())
        worst_reply = NO_REPLY_VALUE
        for reply in replies:
            worst_reply = max(worst_reply, self.position_value(reply))

        return self_value - worst_reply

    def rank_moves(self, board: Board, player: Player) -> List[Tuple[Position, int]]:
        """Evaluate every legal move, in row-major order."""
        ranked = []
        for move, flips in rules.legal_moves(board, player).items():
            evaluation = self.evaluate(board, move, player, flips)
            logger.debug("%s candidate %s: evaluation %d", player, move, evaluation)
            ranked.append((move, evaluation))
        return ranked

    def choose_move(self, board: Board, player: Player) -> Optional[Position]:
        """
        Pick the move with the highest evaluation.

        Ties go to the first candidate in row-major order.

        Returns:
            The chosen (row, col), or None if the player has no legal move
        """
        best_move = None
        best_evaluation = None
        for move, evaluation in self.rank_moves(board, player):
            if best_evaluation is None or evaluation > best_evaluation:
                best_move, best_evaluation = move, evaluation

        if best_move is None:
            logger.debug("%s has no legal move", player)
        else:
            logger.debug("%s chooses %s (evaluation %d)", player, best_move, best_evaluation)
        return best_move
