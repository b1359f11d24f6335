"""
Move rules for Othello: capture computation, legality and move application.
"""
from typing import Dict, List, Sequence, Tuple

from .board import Board, CellState, Player, Position

# Compass directions, scanned in this order when collecting flips.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def flips_for(board: Board, pos: Position, player: Player) -> List[Position]:
    """
    Get the pieces that would be flipped if ``player`` played at ``pos``.

    Args:
        board: Board to inspect (not modified)
        pos: (row, col) of the candidate move
        player: The side making the move

    Returns:
        Flipped positions, grouped by direction in DIRECTIONS order and
        innermost-first within a direction. Empty if the move is not legal.
    """
    if board.get(pos) != CellState.EMPTY:
        return []

    own = player.cell
    opponent = player.opponent().cell
    row, col = pos
    flips: List[Position] = []

    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        run: List[Position] = []
        while Board.in_bounds(r, c) and board.get((r, c)) == opponent:
            run.append((r, c))
            r += dr
            c += dc
        if run and Board.in_bounds(r, c) and board.get((r, c)) == own:
            flips.extend(run)

    return flips


def is_legal(board: Board, pos: Position, player: Player) -> bool:
    """Check if a move flips at least one piece."""
    return len(flips_for(board, pos, player)) > 0


def legal_moves(board: Board, player: Player) -> Dict[Position, List[Position]]:
    """
    Get all legal moves for a player, mapped to their flips.

    Positions are visited in row-major order, so the returned dict
    iterates in that order.
    """
    moves: Dict[Position, List[Position]] = {}
    for pos in board.positions():
        flips = flips_for(board, pos, player)
        if flips:
            moves[pos] = flips
    return moves


def has_legal_move(board: Board, player: Player) -> bool:
    """Check if the player has any legal move, stopping at the first found."""
    return any(flips_for(board, pos, player) for pos in board.positions())


def apply_move(board: Board, pos: Position, player: Player,
               flips: Sequence[Position]) -> None:
    """
    Place a piece and flip the captured cells, in place.

    ``flips`` must be the result of ``flips_for`` on this same board state.
    """
    cell = player.cell
    board.set(pos, cell)
    for flipped in flips:
        board.set(flipped, cell)
