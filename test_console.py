"""
Tests for the console host: input parsing, rendering, replay and scripted games.
"""
import pytest

from src.config import PlayConfig
from src.controller import ConsoleController, format_move, parse_move, render_board, replay_transcript
from src.game import Board, CellState, IllegalMoveError, Player


def scripted(lines):
    """Input function that replays the given lines."""
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_parse_move():
    assert parse_move("d3") == (2, 3)
    assert parse_move(" A1 ") == (0, 0)
    assert parse_move("h8") == (7, 7)
    assert parse_move("2 3") == (2, 3)
    assert parse_move("2,3") == (2, 3)


@pytest.mark.parametrize("text", ["", "zz", "i1", "a9", "a0", "8 0", "1 2 3", "x y"])
def test_parse_move_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_format_move():
    assert format_move((2, 3)) == "d3"
    assert format_move((7, 0)) == "a8"
    assert parse_move(format_move((5, 6))) == (5, 6)


def test_render_board_with_hints():
    lines = render_board(Board(), hints=[(2, 3), (3, 2)]).splitlines()
    assert lines[0] == "  a b c d e f g h"
    assert lines[3] == "3 . . . * . . . ."
    assert lines[4] == "4 . . * W B . . ."
    assert lines[5] == "5 . . . B W . . ."


def test_replay_transcript():
    state = replay_transcript([(2, 3), (2, 2)])
    assert state.board.get((2, 2)) == CellState.WHITE
    assert state.board.get((3, 3)) == CellState.WHITE
    assert state.current_player is Player.BLACK


def test_replay_rejects_illegal_transcript():
    with pytest.raises(IllegalMoveError):
        replay_transcript([(2, 3), (0, 0)])


def test_human_then_computer_move():
    """Bad input is re-prompted, then the computer answers after its delay."""
    output = []
    delays = []
    controller = ConsoleController(
        PlayConfig(human_color="black", ai_delay=0.5),
        input_fn=scripted(["zz", "a1", "d3", "q"]),
        output_fn=output.append,
        sleep=delays.append,
    )

    assert controller.play() is None
    assert controller.transcript == [(2, 3), (2, 2)]
    assert delays == [0.5]
    assert "Invalid move. Please select a valid cell." in output
    assert "Computer plays c3" in output
    assert "Game abandoned." in output


def test_computer_moves_first_when_human_plays_white():
    output = []
    controller = ConsoleController(
        PlayConfig(human_color="white", ai_delay=0),
        input_fn=scripted([]),
        output_fn=output.append,
        sleep=lambda s: None,
    )

    assert controller.play() is None
    assert controller.transcript == [(2, 3)]
    assert controller.state.current_player is Player.WHITE


def test_hints_only_on_human_turn():
    output = []
    controller = ConsoleController(PlayConfig(show_hints=True), output_fn=output.append)
    controller.show()
    assert "*" in output[0]

    output.clear()
    controller.config.show_hints = False
    controller.show()
    assert "*" not in output[0]


def test_full_game_to_the_end():
    """A human that always plays its first legal move finishes a game."""
    output = []
    holder = {}

    def first_legal(prompt):
        return format_move(next(iter(holder['controller'].state.legal_moves())))

    controller = ConsoleController(
        PlayConfig(ai_delay=0),
        input_fn=first_legal,
        output_fn=output.append,
        sleep=lambda s: None,
    )
    holder['controller'] = controller

    outcome = controller.play()

    assert outcome is not None
    assert controller.state.is_terminal()
    assert outcome is controller.state.outcome()
    assert output[-1].startswith("Game Over!")
    assert replay_transcript(controller.transcript).board == controller.state.board


if __name__ == "__main__":
    print("Running console tests...\n")
    test_parse_move()
    test_render_board_with_hints()
    test_human_then_computer_move()
    test_full_game_to_the_end()
    print("All console tests passed!")
