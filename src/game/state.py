"""
Othello game state module.
Handles turn order, move application, terminal detection and scoring.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from . import rules
from .board import Board, CellState, Player, Position
from .exceptions import GameInProgressError, IllegalMoveError

logger = logging.getLogger(__name__)


class Outcome(Enum):
    BLACK_WINS = "black_wins"
    WHITE_WINS = "white_wins"
    TIE = "tie"


@dataclass(frozen=True)
class ScoreTally:
    """Piece counts on a board snapshot."""
    black: int
    white: int

    def for_player(self, player: Player) -> int:
        return self.black if player is Player.BLACK else self.white


@dataclass(frozen=True)
class MoveRecord:
    """What happened when a move was applied."""
    player: Player
    position: Position
    flips: tuple
    next_player: Optional[Player]  # None when the move ended the game


class GameState:
    """
    Owns one Board and tracks whose turn it is.

    All mutation goes through ``apply_move`` and ``pass_turn``. The board is
    never handed out directly; the ``board`` property returns a copy.
    """

    def __init__(self):
        """Start a new game from the standard opening, Black to move."""
        self._board = Board()
        self._current_player = Player.BLACK

    @classmethod
    def from_board(cls, board: Board, current_player: Player = Player.BLACK) -> 'GameState':
        """
        Build a state from an arbitrary position.

        Args:
            board: Position to start from (copied, not aliased)
            current_player: The side to move
        """
        state = cls.__new__(cls)
        state._board = board.copy()
        state._current_player = Player(current_player)
        return state

    @property
    def board(self) -> Board:
        return self._board.copy()

    @property
    def current_player(self) -> Player:
        return self._current_player

    def get_board_state(self):
        """Get the board as a numpy array copy, for renderers."""
        return self._board.get_board_state()

    def legal_moves(self) -> Dict[Position, List[Position]]:
        """Get the legal moves for the side to move, mapped to their flips."""
        return rules.legal_moves(self._board, self._current_player)

    def apply_move(self, pos: Position) -> MoveRecord:
        """
        Play a move for the side to move.

        Args:
            pos: (row, col) of the move

        Returns:
            MoveRecord describing the flips and who moves next

        Raises:
            IllegalMoveError: if pos is not a legal move; state is unchanged
        """
        pos = tuple(pos)
        moves = self.legal_moves()
        if pos not in moves:
            raise IllegalMoveError(
                f"{self._current_player} cannot play at {pos}")

        mover = self._current_player
        flips = moves[pos]
        rules.apply_move(self._board, pos, mover, flips)

        opponent = mover.opponent()
        if rules.has_legal_move(self._board, opponent):
            next_player = opponent
        elif rules.has_legal_move(self._board, mover):
            logger.debug("%s has no legal move, %s moves again", opponent, mover)
            next_player = mover
        else:
            next_player = None

        if next_player is not None:
            self._current_player = next_player
        else:
            logger.debug("Game over after %s played %s", mover, pos)

        return MoveRecord(player=mover, position=pos, flips=tuple(flips),
                          next_player=next_player)

    def pass_turn(self) -> Player:
        """
        Hand the turn to the opponent when the side to move is stuck.

        Returns:
            The player now to move

        Raises:
            IllegalMoveError: if the side to move has a legal move, or the game is over
        """
        if self.is_terminal():
            raise IllegalMoveError("Game is over")
        if rules.has_legal_move(self._board, self._current_player):
            raise IllegalMoveError(
                f"{self._current_player} has a legal move and cannot pass")
        self._current_player = self._current_player.opponent()
        return self._current_player

    def is_terminal(self) -> bool:
        """Check if neither side has a legal move."""
        return not (rules.has_legal_move(self._board, Player.BLACK)
                    or rules.has_legal_move(self._board, Player.WHITE))

    def tally(self) -> ScoreTally:
        return ScoreTally(black=self._board.count(CellState.BLACK),
                          white=self._board.count(CellState.WHITE))

    def outcome(self) -> Outcome:
        """
        Get the result of a finished game.

        Raises:
            GameInProgressError: if the game is not over
        """
        if not self.is_terminal():
            raise GameInProgressError("Game is still in progress")
        score = self.tally()
        if score.black > score.white:
            return Outcome.BLACK_WINS
        if score.white > score.black:
            return Outcome.WHITE_WINS
        return Outcome.TIE

    def winner(self) -> Optional[Player]:
        """The winning player of a finished game, or None for a tie."""
        result = self.outcome()
        if result is Outcome.BLACK_WINS:
            return Player.BLACK
        if result is Outcome.WHITE_WINS:
            return Player.WHITE
        return None

    def __str__(self) -> str:
        status = [str(self._board)]
        score = self.tally()
        if self.is_terminal():
            result = self.outcome()
            if result is Outcome.TIE:
                status.append("Game over! It's a draw!")
            else:
                status.append(f"Game over! {self.winner()} wins!")
        else:
            status.append(f"Current player: {self._current_player}")
        status.append(f"Score - Black: {score.black}, White: {score.white}")
        return "\n".join(status)
