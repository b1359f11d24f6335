"""
Console host for playing Othello against the computer.

The host only decides when to ask the core for something; legality,
flips and turn order all come from GameState.
"""
import logging
import time
from typing import Callable, Iterable, List, Optional

from ..ai import AiAdvisor
from ..config import PlayConfig
from ..game import Board, CellState, GameState, IllegalMoveError, Outcome, Position

logger = logging.getLogger(__name__)

COLUMNS = "abcdefgh"


def parse_move(text: str) -> Position:
    """
    Parse a move typed by the user.

    Accepts algebraic coordinates ("d3" is column d, row 3) or a
    0-based "row col" pair ("2 3" or "2,3").

    Raises:
        ValueError: if the text is not a position on the board
    """
    text = text.strip().lower()
    if len(text) == 2 and text[0] in COLUMNS and text[1].isdigit():
        row, col = int(text[1]) - 1, COLUMNS.index(text[0])
    else:
        parts = text.replace(',', ' ').split()
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Cannot read a move from {text!r}")
        row, col = int(parts[0]), int(parts[1])
    if not Board.in_bounds(row, col):
        raise ValueError(f"{text!r} is not on the board")
    return (row, col)


def format_move(pos: Position) -> str:
    row, col = pos
    return f"{COLUMNS[col]}{row + 1}"


def render_board(board: Board, hints: Iterable[Position] = ()) -> str:
    """Draw the board as text, marking hint positions with '*'."""
    symbols = {CellState.EMPTY: '.', CellState.BLACK: 'B', CellState.WHITE: 'W'}
    hints = set(hints)
    lines = ["  " + " ".join(COLUMNS)]
    for row in range(Board.SIZE):
        cells = []
        for col in range(Board.SIZE):
            pos = (row, col)
            cells.append('*' if pos in hints else symbols[board.get(pos)])
        lines.append(f"{row + 1} " + " ".join(cells))
    return "\n".join(lines)


def replay_transcript(moves: Iterable[Position]) -> GameState:
    """
    Rebuild a game by applying recorded moves from the opening.

    Raises:
        IllegalMoveError: if a recorded move is not legal at its turn
    """
    state = GameState()
    for pos in moves:
        state.apply_move(pos)
    return state


class ConsoleController:
    """Runs a human-versus-computer game in the terminal."""

    def __init__(self, config: Optional[PlayConfig] = None,
                 advisor: Optional[AiAdvisor] = None,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print,
                 sleep: Callable[[float], None] = time.sleep):
        self.config = config or PlayConfig()
        self.advisor = advisor or AiAdvisor()
        self.human = self.config.human_player
        self.computer = self.human.opponent()
        self.state = GameState()
        self.transcript: List[Position] = []
        self._input = input_fn
        self._output = output_fn
        self._sleep = sleep

    def show(self) -> None:
        hints = ()
        if self.config.show_hints and self.state.current_player is self.human:
            hints = self.state.legal_moves().keys()
        self._output(render_board(self.state.board, hints))
        score = self.state.tally()
        self._output(f"Black: {score.black}  White: {score.white}")

    def play(self) -> Optional[Outcome]:
        """
        Play until the game ends or the user quits.

        Returns:
            The outcome, or None if the user quit early
        """
        logger.info("New game: human plays %s", self.human)
        while not self.state.is_terminal():
            self.show()
            player = self.state.current_player
            if not self.state.legal_moves():
                self._output(f"{player} has no valid moves. Skipping turn.")
                self.state.pass_turn()
                continue
            if player is self.human:
                if not self.human_turn():
                    self._output("Game abandoned.")
                    logger.info("Game abandoned after %d moves", len(self.transcript))
                    return None
            else:
                self.computer_turn()

        self.show()
        return self.finish()

    def human_turn(self) -> bool:
        """Prompt until a legal move is entered. Returns False if the user quits."""
        while True:
            try:
                text = self._input(f"{self.human} to move (e.g. d3), or q to quit: ")
            except EOFError:
                return False
            if text.strip().lower() in {"q", "quit", "exit"}:
                return False
            try:
                pos = parse_move(text)
                self._apply(pos)
                return True
            except IllegalMoveError:
                self._output("Invalid move. Please select a valid cell.")
            except ValueError as e:
                self._output(str(e))

    def computer_turn(self) -> None:
        self._output("Computer is thinking...")
        self._sleep(self.config.ai_delay)
        move = self.advisor.choose_move(self.state.board, self.computer)
        if move is None:
            self._output(f"{self.computer} has no valid moves. Skipping turn.")
            self.state.pass_turn()
            return
        self._output(f"Computer plays {format_move(move)}")
        self._apply(move)

    def _apply(self, pos: Position) -> None:
        record = self.state.apply_move(pos)
        self.transcript.append(pos)
        logger.debug("%s played %s flipping %d", record.player, format_move(pos), len(record.flips))
        if record.next_player is record.player:
            self._output(f"{record.player.opponent()} has no valid moves. "
                         f"{record.player} plays again.")

    def finish(self) -> Outcome:
        outcome = self.state.outcome()
        score = self.state.tally()
        winner = self.state.winner()
        if winner is None:
            result = "It's a tie!"
        elif winner is self.human:
            result = "You win!"
        else:
            result = "Computer wins!"
        self._output(f"Game Over! {result} (Black: {score.black} White: {score.white})")
        logger.info("Game finished: %s in %d moves, transcript %s", outcome.value,
                    len(self.transcript), " ".join(format_move(p) for p in self.transcript))
        return outcome
